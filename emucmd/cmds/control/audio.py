"""Command: control.mute, control.unmute

Category: control
"""

from dataclasses import dataclass

from emucmd.cmds.base import IOp, command


@command(names="mute")
@dataclass
class IOpMute(IOp):
    """Mute audio"""

    def run(self):
        return self.call(self.emu, "mute")


@command(names="unmute")
@dataclass
class IOpUnmute(IOp):
    """Unmute audio"""

    def run(self):
        return self.call(self.emu, "unmute")
