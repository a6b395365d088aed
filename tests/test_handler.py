import pytest

from emucmd.errors import OperationFailed, UnknownMethod
from emucmd.handler import CommandHandler, StrictCommandHandler
from emucmd.operation import NotificationEvent, Operation

from .conftest import messages


def explode(context, op):
    raise RuntimeError("cartridge on fire")


STRICT_CONFIGS = [{"strictMode": True}, {"fallbackOnError": False}]


def test_exec_returns_handler_result(handler, emulator, events):
    assert handler.exec("control.mute") == "muted"
    assert emulator.names() == ["mute"]

    assert len(events) == 1
    event = events[0]
    assert isinstance(event, NotificationEvent)
    assert event.method == "control.mute"
    assert event.params == {}
    assert event.result == "muted"
    assert event.error is None
    assert isinstance(event.timestamp, int)


def test_unknown_method_permissive_returns_none(handler, events, logs):
    assert handler.exec("unknown.x", {"a": 1}) is None
    assert events == []
    assert any("unknown.x" in m for m in messages(logs, "WARNING"))


@pytest.mark.parametrize("config", STRICT_CONFIGS)
def test_unknown_method_strict_raises(emulator, events, config):
    handler = CommandHandler(emulator, onCommand=events.append, handlerConfig=config)
    with pytest.raises(UnknownMethod) as exc:
        handler.exec("unknown.x")

    assert exc.value.method == "unknown.x"
    assert "unknown.x" in str(exc.value)
    assert events == []


def test_handler_failure_permissive_returns_none(emulator, events, logs):
    handler = CommandHandler(emulator, commands={"boom.now": explode}, onCommand=events.append)
    assert handler.exec("boom.now", {"x": 1}) is None

    assert len(events) == 1
    assert events[0].error == "cartridge on fire"
    assert events[0].result is None
    assert events[0].params == {"x": 1}
    assert any("cartridge on fire" in m for m in messages(logs, "ERROR"))


@pytest.mark.parametrize("config", STRICT_CONFIGS)
def test_handler_failure_strict_raises_wrapped(emulator, events, config):
    handler = CommandHandler(
        emulator, commands={"boom.now": explode}, onCommand=events.append, handlerConfig=config
    )
    with pytest.raises(OperationFailed) as exc:
        handler.exec("boom.now")

    assert exc.value.method == "boom.now"
    assert isinstance(exc.value.cause, RuntimeError)
    assert exc.value.__cause__ is exc.value.cause
    assert "cartridge on fire" in str(exc.value)

    # observers saw the failure before the caller did
    assert [e.error for e in events] == ["cartridge on fire"]


def test_notification_precedes_return(emulator):
    order = []

    def handle(context, op):
        order.append("handler")
        return 1

    def observe(event):
        order.append("notify")

    handler = CommandHandler(emulator, commands={"x.y": handle}, onCommand=observe)
    handler.exec("x.y")
    order.append("returned")
    assert order == ["handler", "notify", "returned"]


def test_override_invoked_exactly_once(emulator):
    calls = []

    def mute(context, op):
        calls.append(op)
        return "custom"

    handler = CommandHandler(emulator, commands={"control.mute": mute})
    assert handler.exec("control.mute", {}) == "custom"
    assert len(calls) == 1
    assert emulator.names() == []


def test_handler_receives_context_and_operation(emulator):
    seen = {}

    def probe(context, op):
        seen["context"] = context
        seen["op"] = op
        return context.valueFromState("pressed", 18)

    handler = CommandHandler(emulator, commands={"probe.it": probe})
    params = {"k": "v"}
    assert handler.exec("probe.it", params) == 0x7FFF

    assert seen["context"] is handler
    op = seen["op"]
    assert isinstance(op, Operation)
    assert op.method == "probe.it"
    assert op.params == params
    assert isinstance(op.timestamp, int) and op.timestamp > 0


def test_disabled_method_behaves_unknown(emulator):
    handler = CommandHandler(emulator, commands={"control.mute": False})
    assert handler.exec("control.mute", {}) is None
    assert emulator.names() == []
    assert not handler.has("control.mute")

    strict = StrictCommandHandler(emulator, commands={"control.mute": False})
    with pytest.raises(UnknownMethod):
        strict.exec("control.mute", {})


def test_raising_observer_never_changes_result(emulator, logs):
    def observer(event):
        raise ValueError("observer broke")

    handler = CommandHandler(emulator, onCommand=observer)
    assert handler.exec("control.mute") == "muted"
    assert handler.exec("control.unmute") == "unmuted"
    assert len(messages(logs, "ERROR")) == 2


def test_raising_observer_on_failed_dispatch(emulator):
    def observer(event):
        raise ValueError("observer broke")

    handler = CommandHandler(emulator, commands={"boom.now": explode}, onCommand=observer)
    assert handler.exec("boom.now") is None

    strict = StrictCommandHandler(emulator, commands={"boom.now": explode}, onCommand=observer)
    with pytest.raises(OperationFailed):
        strict.exec("boom.now")


def test_non_callable_observer_ignored(emulator, logs):
    handler = CommandHandler(emulator, onCommand="not a function")
    assert not handler.notifier
    assert handler.exec("control.mute") == "muted"
    assert any("onCommand" in m for m in messages(logs, "WARNING"))


def test_intent_logged_only_when_enabled(emulator, logs):
    CommandHandler(emulator).exec("control.mute")
    assert not messages(logs, "INFO")

    CommandHandler(emulator, handlerConfig={"enableLogging": True}).exec("control.mute", {"a": 1})
    assert any("control.mute" in m for m in messages(logs, "INFO"))


def test_strict_handler_ignores_configuration(emulator):
    strict = StrictCommandHandler(emulator)
    assert strict.config.raises
    with pytest.raises(UnknownMethod):
        strict.exec("unknown.x")


def test_params_default_to_empty_mapping(emulator):
    seen = []
    handler = CommandHandler(emulator, commands={"x.y": lambda context, op: seen.append(op.params)})
    handler.exec("x.y")
    handler.exec("x.y", None)
    assert seen == [{}, {}]


def test_introspection(handler):
    assert handler.has("state.quickSave")
    assert not handler.has("state.nothing")
    assert handler.methods() == sorted(handler.commands)
    assert "CommandHandler" in repr(handler)


def test_empty_failure_message_uses_exception_type(emulator, events):
    def silent(context, op):
        raise RuntimeError()

    handler = CommandHandler(emulator, commands={"quiet.fail": silent}, onCommand=events.append)
    assert handler.exec("quiet.fail") is None
    assert [e.error for e in events] == ["RuntimeError"]


def test_timestamps_are_epoch_milliseconds(handler, events):
    handler.exec("control.mute")
    op = Operation(method="control.mute")

    # anything past 2001 in milliseconds; seconds would be ~1e9
    assert op.timestamp > 1_000_000_000_000
    assert events[0].timestamp > 1_000_000_000_000
    assert abs(events[0].timestamp - op.timestamp) < 60_000
