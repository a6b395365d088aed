"""Command: settings.change

Category: settings
"""

from dataclasses import dataclass, field
from typing import Any

from emucmd.cmds.base import IOp, PArg, command


@command(names="change")
@dataclass
class IOpChangeSetting(IOp):
    """Change emulator setting.

    Params:
        setting - Setting name (or 'volume')
        value   - New setting value
        startup - Is startup setting (optional)

    The 'volume' setting is routed to the host's volume control; everything
    else goes through the generic settings option change.
    """

    setting: str = field(init=False)
    value: Any = field(init=False)
    startup: bool | None = field(init=False)

    def argmap(self):
        return [
            PArg("setting", desc="Setting name (or 'volume')"),
            PArg("value", desc="New setting value"),
            PArg("startup", desc="Is startup setting"),
        ]

    def run(self):
        if self.setting == "volume":
            return self.call(self.emu, "setVolume", self.value)

        return self.call(
            self.emu, "changeSettingOption", self.setting, self.value, self.startup
        )
