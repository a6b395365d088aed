"""Command: menu.controlReset, menu.controlClear, menu.controlClose,
menu.controlSetKeyboard, menu.controlSetGamepad

Category: menu

Control mappings live on the host as
    controls[player][button] = {"value": keyCode, "value2": gamepadLabel}
for players 0-3.
"""

import copy
from dataclasses import dataclass, field

from loguru import logger

from emucmd.cmds.base import IOp, PArg, command
from emucmd.host import CapabilityAbsent, component

PLAYERS = (0, 1, 2, 3)


@dataclass
class IOpControls(IOp):
    """Shared host refresh after a control mapping change."""

    def refreshControls(self, setupKeys: bool = False):
        if setupKeys:
            self.call(self.emu, "setupKeys")

        self.call(self.emu, "checkGamepadInputs")
        self.call(self.emu, "saveSettings")


@command(names="controlReset")
@dataclass
class IOpControlReset(IOpControls):
    """Reset controls to defaults"""

    def run(self):
        defaults = component(self.emu, "defaultControllers")
        if defaults is None:
            return CapabilityAbsent("defaultControllers")

        self.emu.controls = copy.deepcopy(defaults)
        self.refreshControls(setupKeys=True)


@command(names="controlClear")
@dataclass
class IOpControlClear(IOpControls):
    """Clear all control mappings"""

    def run(self):
        self.emu.controls = {player: {} for player in PLAYERS}
        self.refreshControls(setupKeys=True)


@command(names="controlClose")
@dataclass
class IOpControlClose(IOp):
    """Close control configuration popup"""

    def run(self):
        controlMenu = component(self.emu, "controlMenu")
        if controlMenu:
            return self.call(controlMenu, "hide")


@dataclass
class IOpControlAssign(IOpControls):
    """Store one mapping field for (player, button) then refresh the host."""

    player: int = field(init=False)
    button: str = field(init=False)

    # key inside controls[player][button] this command writes
    slot = ""

    def assigned(self):
        raise NotImplementedError

    def run(self):
        controls = component(self.emu, "controls")
        if controls is None:
            return CapabilityAbsent("controls")

        # KeyError for players outside the configured set
        mapping = controls[self.player]
        if not mapping.get(self.button):
            mapping[self.button] = {}

        mapping[self.button][self.slot] = self.assigned()
        logger.debug(
            "[{}] Player {} {} {} = {}",
            self.op.method,
            self.player,
            self.button,
            self.slot,
            mapping[self.button][self.slot],
        )

        controlPopup = component(self.emu, "controlPopup")
        if controlPopup:
            self.call(controlPopup, "hide")

        self.refreshControls()


@command(names="controlSetKeyboard")
@dataclass
class IOpControlSetKeyboard(IOpControlAssign):
    """Set keyboard control mapping.

    Params:
        player  - Player index (0-3)
        button  - Button name
        keyCode - Keyboard key code
    """

    keyCode: int = field(init=False)

    slot = "value"

    def argmap(self):
        return [
            PArg("player", convert=int, desc="Player index (0-3)"),
            PArg("button", desc="Button name"),
            PArg("keyCode", desc="Keyboard key code"),
        ]

    def assigned(self):
        return self.keyCode


@command(names="controlSetGamepad")
@dataclass
class IOpControlSetGamepad(IOpControlAssign):
    """Set gamepad control mapping.

    Params:
        player - Player index (0-3)
        button - Button name
        label  - Gamepad button label
    """

    label: str = field(init=False)

    slot = "value2"

    def argmap(self):
        return [
            PArg("player", convert=int, desc="Player index (0-3)"),
            PArg("button", desc="Button name"),
            PArg("label", desc="Gamepad button label"),
        ]

    def assigned(self):
        return self.label
