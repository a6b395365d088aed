"""Emulator menu and control mapping commands."""

CATEGORY = "menu"
