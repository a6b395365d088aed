"""Conversion of symbolic button states into the numeric values the core expects."""

# analog stick axis codes report full deflection instead of 1 when pressed
ANALOG_BUTTONS = frozenset(range(16, 24))

ANALOG_MAX = 0x7FFF


def valueFromState(state: str | None, button: int | None) -> int:
    """Return the input value for `state` ('pressed', 'released', 'analog').

    Unrecognized or missing states read as released (0).
    """
    match state:
        case "released":
            return 0
        case "pressed":
            return ANALOG_MAX if button in ANALOG_BUTTONS else 1
        case "analog":
            return ANALOG_MAX
        case _:
            return 0
