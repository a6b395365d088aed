"""Command: control.fullscreen, control.screenshot

Category: control
"""

from dataclasses import dataclass, field

from emucmd.cmds.base import IOp, PArg, command


@command(names="fullscreen")
@dataclass
class IOpFullscreen(IOp):
    """Toggle fullscreen.

    Params:
        enabled - Force state instead of toggle (optional)
    """

    enabled: bool | None = field(init=False)

    def argmap(self):
        return [PArg("enabled", desc="Force state instead of toggle")]

    def run(self):
        return self.call(self.emu, "toggleFullscreen", self.enabled)


@command(names="screenshot")
@dataclass
class IOpScreenshot(IOp):
    """Take screenshot. Returns whatever image data the host produces."""

    def run(self):
        return self.call(self.emu, "screenshot")
