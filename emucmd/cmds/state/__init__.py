"""Save state commands."""

CATEGORY = "state"
