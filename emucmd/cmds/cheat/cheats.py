"""Command: cheat.set, cheat.reset

Category: cheat
"""

from dataclasses import dataclass, field

from emucmd.cmds.base import IOp, PArg, command


@command(names="set")
@dataclass
class IOpSetCheat(IOp):
    """Set cheat code.

    Params:
        index   - Cheat index
        enabled - Enable/disable cheat
        code    - Cheat code (optional)
    """

    index: int = field(init=False)
    enabled: bool = field(init=False)
    code: str | None = field(init=False)

    def argmap(self):
        return [
            PArg("index", desc="Cheat index"),
            PArg("enabled", desc="Enable/disable cheat"),
            PArg("code", desc="Cheat code"),
        ]

    def run(self):
        return self.call(self.gameManager, "setCheat", self.index, self.enabled, self.code)


@command(names="reset")
@dataclass
class IOpResetCheats(IOp):
    """Reset all cheats"""

    def run(self):
        return self.call(self.gameManager, "resetCheat")
