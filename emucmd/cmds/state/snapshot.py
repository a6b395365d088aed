"""Command: state.save, state.load

Category: state
"""

from dataclasses import dataclass, field
from typing import Any

from emucmd.cmds.base import IOp, PArg, command


@command(names="save")
@dataclass
class IOpSaveState(IOp):
    """Get current save state. Returns the host's opaque save state data."""

    def run(self):
        return self.call(self.gameManager, "getState")


@command(names="load")
@dataclass
class IOpLoadState(IOp):
    """Load save state.

    Params:
        state - Save state data, as returned by state.save
    """

    saveState: Any = field(init=False)

    def argmap(self):
        return [PArg("state", dest="saveState", desc="Save state data")]

    def run(self):
        return self.call(self.gameManager, "loadState", self.saveState)
