"""Emulation lifecycle, display and audio commands."""

CATEGORY = "control"
