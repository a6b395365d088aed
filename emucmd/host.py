"""Capability interface of the emulator host.

The command layer never owns the host. Every attribute and method listed in
these protocols is optional: default commands look each one up with
`capability()` and report a missing one as a `CapabilityAbsent` result instead
of raising.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class CapabilityAbsent:
    """Result returned when the host does not provide what a command needs.

    Falsy, so callers checking `if result:` treat it like an empty result.
    """

    capability: str

    def __bool__(self) -> bool:
        return False


class GameManager(Protocol):
    def simulateInput(self, player: int, button: int, value: int) -> Any: ...

    def restart(self) -> Any: ...

    def quickSave(self, slot: int | None) -> Any: ...

    def quickLoad(self, slot: int | None) -> Any: ...

    def getState(self) -> Any: ...

    def loadState(self, state: Any) -> Any: ...

    def toggleFastForward(self, enabled: bool | None) -> Any: ...

    def toggleSlowMotion(self, enabled: bool | None) -> Any: ...

    def toggleRewind(self, enabled: bool | None) -> Any: ...

    def setCheat(self, index: int, enabled: bool, code: str | None) -> Any: ...

    def resetCheat(self) -> Any: ...


class Menu(Protocol):
    def open(self) -> Any: ...

    def close(self) -> Any: ...


class Hideable(Protocol):
    def hide(self) -> Any: ...


class EmulatorHost(Protocol):
    """Everything the default commands may touch on the host."""

    gameManager: GameManager | None
    menu: Menu | None
    controlMenu: Hideable | None
    controlPopup: Hideable | None

    # player index -> button name -> {"value": keyCode, "value2": gamepad label}
    controls: dict[int, dict[str, dict[str, Any]]]
    defaultControllers: dict[int, dict[str, dict[str, Any]]]

    def pause(self, dontUpdate: bool | None) -> Any: ...

    def play(self, dontUpdate: bool | None) -> Any: ...

    def toggleFullscreen(self, enabled: bool | None) -> Any: ...

    def mute(self) -> Any: ...

    def unmute(self) -> Any: ...

    def screenshot(self) -> Any: ...

    def setVolume(self, value: Any) -> Any: ...

    def changeSettingOption(self, setting: str, value: Any, startup: bool | None) -> Any: ...

    def setupKeys(self) -> Any: ...

    def checkGamepadInputs(self) -> Any: ...

    def saveSettings(self) -> Any: ...


def capability(target: Any, name: str) -> Callable[..., Any] | None:
    """Return `target.name` if it exists and is callable, else None."""
    if target is None:
        return None

    fn = getattr(target, name, None)
    return fn if callable(fn) else None


def component(target: Any, name: str) -> Any | None:
    """Return a sub-object of the host (game manager, menu, ...) or None."""
    if target is None:
        return None

    return getattr(target, name, None)
