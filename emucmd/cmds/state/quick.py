"""Command: state.quickSave, state.quickLoad

Category: state
"""

from dataclasses import dataclass, field

from loguru import logger

from emucmd.cmds.base import IOp, PArg, command
from emucmd.host import CapabilityAbsent


@dataclass
class IOpQuickSlot(IOp):
    """Shared parameter handling for slot based quick save/load."""

    slot: int | None = field(init=False)

    # game manager method invoked with the slot
    action = ""

    def argmap(self):
        return [PArg("slot", desc="Save slot number")]

    def run(self):
        if not self.gameManager:
            logger.warning(
                "[{}] gameManager not available for {}", self.op.method, self.action
            )
            return CapabilityAbsent("gameManager")

        return self.call(self.gameManager, self.action, self.slot)


@command(names="quickSave")
@dataclass
class IOpQuickSave(IOpQuickSlot):
    """Quick save to slot.

    Params:
        slot - Save slot number
    """

    action = "quickSave"


@command(names="quickLoad")
@dataclass
class IOpQuickLoad(IOpQuickSlot):
    """Quick load from slot.

    Params:
        slot - Save slot number
    """

    action = "quickLoad"
