import pytest
from loguru import logger

from emucmd.handler import CommandHandler


class Recorder:
    """Host stand-in that records every capability call it receives."""

    def __init__(self, calls, prefix):
        self._calls = calls
        self._prefix = prefix

    def _record(self, name, *args):
        self._calls.append((f"{self._prefix}{name}", args))


class FakeGameManager(Recorder):
    def __init__(self, calls):
        super().__init__(calls, "gameManager.")

    def simulateInput(self, player, button, value):
        self._record("simulateInput", player, button, value)
        return value

    def restart(self):
        self._record("restart")
        return "restarted"

    def quickSave(self, slot):
        self._record("quickSave", slot)
        return True

    def quickLoad(self, slot):
        self._record("quickLoad", slot)
        return True

    def getState(self):
        self._record("getState")
        return b"\x00STATE"

    def loadState(self, state):
        self._record("loadState", state)
        return len(state)

    def toggleFastForward(self, enabled):
        self._record("toggleFastForward", enabled)
        return enabled

    def toggleSlowMotion(self, enabled):
        self._record("toggleSlowMotion", enabled)
        return enabled

    def toggleRewind(self, enabled):
        self._record("toggleRewind", enabled)
        return enabled

    def setCheat(self, index, enabled, code):
        self._record("setCheat", index, enabled, code)

    def resetCheat(self):
        self._record("resetCheat")


class FakeWidget(Recorder):
    def open(self):
        self._record("open")

    def close(self):
        self._record("close")

    def hide(self):
        self._record("hide")


class FakeEmulator(Recorder):
    def __init__(self):
        self.calls = []
        super().__init__(self.calls, "")
        self.gameManager = FakeGameManager(self.calls)
        self.menu = FakeWidget(self.calls, "menu.")
        self.controlMenu = FakeWidget(self.calls, "controlMenu.")
        self.controlPopup = FakeWidget(self.calls, "controlPopup.")
        self.defaultControllers = {
            0: {"A": {"value": 88, "value2": "BUTTON_1"}},
            1: {},
            2: {},
            3: {},
        }
        self.controls = {0: {}, 1: {}, 2: {}, 3: {}}

    def names(self):
        return [name for name, _ in self.calls]

    def pause(self, dontUpdate):
        self._record("pause", dontUpdate)

    def play(self, dontUpdate):
        self._record("play", dontUpdate)

    def toggleFullscreen(self, enabled):
        self._record("toggleFullscreen", enabled)

    def mute(self):
        self._record("mute")
        return "muted"

    def unmute(self):
        self._record("unmute")
        return "unmuted"

    def screenshot(self):
        self._record("screenshot")
        return "iVBORw0KGgo="

    def setVolume(self, value):
        self._record("setVolume", value)

    def changeSettingOption(self, setting, value, startup):
        self._record("changeSettingOption", setting, value, startup)

    def setupKeys(self):
        self._record("setupKeys")

    def checkGamepadInputs(self):
        self._record("checkGamepadInputs")

    def saveSettings(self):
        self._record("saveSettings")


@pytest.fixture
def emulator():
    return FakeEmulator()


@pytest.fixture
def events():
    return []


@pytest.fixture
def handler(emulator, events):
    return CommandHandler(emulator, onCommand=events.append)


@pytest.fixture
def logs():
    """Capture loguru records emitted during the test."""
    records = []
    sink_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(sink_id)


def messages(records, level=None):
    return [r["message"] for r in records if level is None or r["level"].name == level]
