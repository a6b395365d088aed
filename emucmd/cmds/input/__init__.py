"""Commands feeding controller input into the running game."""

CATEGORY = "input"
