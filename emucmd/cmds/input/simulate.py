"""Command: input.simulate

Category: input
"""

from dataclasses import dataclass, field
from typing import Any

from emucmd.cmds.base import MISSING, IOp, PArg, command


@command(names="simulate")
@dataclass
class IOpSimulateInput(IOp):
    """Simulate controller input.

    Params:
        player  - Player index (0-3)
        button  - Button code
        state   - 'pressed', 'released', or 'analog' (optional)
        value   - Direct value, overrides state (optional). An explicit None is
                  forwarded as-is; only an absent value falls back to state.
    """

    player: int = field(init=False)
    button: int = field(init=False)
    inputState: str | None = field(init=False)
    value: Any = field(init=False)

    def argmap(self):
        return [
            PArg("player", convert=int, desc="Player index (0-3)"),
            PArg("button", convert=int, desc="Button code"),
            PArg("state", dest="inputState", desc="'pressed', 'released', or 'analog'"),
            PArg("value", default=MISSING, desc="Direct value (overrides state)"),
        ]

    def run(self):
        value = self.value
        if value is MISSING:
            value = self.state.valueFromState(self.inputState, self.button)

        return self.call(self.gameManager, "simulateInput", self.player, self.button, value)
