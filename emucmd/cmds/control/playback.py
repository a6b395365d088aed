"""Command: control.pause, control.play, control.restart

Category: control
"""

from dataclasses import dataclass, field

from loguru import logger

from emucmd.cmds.base import IOp, PArg, command
from emucmd.host import CapabilityAbsent


@command(names="pause")
@dataclass
class IOpPause(IOp):
    """Pause emulation.

    Params:
        dontUpdate - Skip UI update (optional)
    """

    dontUpdate: bool | None = field(init=False)

    def argmap(self):
        return [PArg("dontUpdate", desc="Skip UI update")]

    def run(self):
        return self.call(self.emu, "pause", self.dontUpdate)


@command(names="play")
@dataclass
class IOpPlay(IOp):
    """Resume emulation.

    Params:
        dontUpdate - Skip UI update (optional)
    """

    dontUpdate: bool | None = field(init=False)

    def argmap(self):
        return [PArg("dontUpdate", desc="Skip UI update")]

    def run(self):
        return self.call(self.emu, "play", self.dontUpdate)


@command(names="restart")
@dataclass
class IOpRestart(IOp):
    """Restart current game."""

    def run(self):
        if not self.gameManager:
            logger.warning("[{}] gameManager not available for restart", self.op.method)
            return CapabilityAbsent("gameManager")

        return self.call(self.gameManager, "restart")
