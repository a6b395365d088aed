"""Command: menu.open, menu.close

Category: menu
"""

from dataclasses import dataclass

from emucmd.cmds.base import IOp, command
from emucmd.host import component


@command(names="open")
@dataclass
class IOpMenuOpen(IOp):
    """Open emulator menu"""

    def run(self):
        return self.call(component(self.emu, "menu"), "open")


@command(names="close")
@dataclass
class IOpMenuClose(IOp):
    """Close emulator menu"""

    def run(self):
        return self.call(component(self.emu, "menu"), "close")
