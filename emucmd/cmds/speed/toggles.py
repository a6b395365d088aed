"""Command: speed.fastForward, speed.slowMotion, speed.rewind

Category: speed
"""

from dataclasses import dataclass, field

from emucmd.cmds.base import IOp, PArg, command


@dataclass
class IOpSpeedToggle(IOp):
    enabled: bool | None = field(init=False)

    # game manager toggle invoked with the requested state
    toggle = ""

    def argmap(self):
        return [PArg("enabled", desc="Force state instead of toggle")]

    def run(self):
        return self.call(self.gameManager, self.toggle, self.enabled)


@command(names="fastForward")
@dataclass
class IOpFastForward(IOpSpeedToggle):
    """Toggle fast forward.

    Params:
        enabled - Force state instead of toggle (optional)
    """

    toggle = "toggleFastForward"


@command(names="slowMotion")
@dataclass
class IOpSlowMotion(IOpSpeedToggle):
    """Toggle slow motion.

    Params:
        enabled - Force state instead of toggle (optional)
    """

    toggle = "toggleSlowMotion"


@command(names="rewind")
@dataclass
class IOpRewind(IOpSpeedToggle):
    """Toggle rewind.

    Params:
        enabled - Force state instead of toggle (optional)
    """

    toggle = "toggleRewind"
