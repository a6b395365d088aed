"""Emulation speed toggles."""

CATEGORY = "speed"
