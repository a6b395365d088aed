from emucmd.autostart import load_autostart, run_autostart
from emucmd.config import HandlerConfig, resolve_handler_config
from emucmd.errors import CommandError, OperationFailed, UnknownMethod
from emucmd.handler import CommandHandler, StrictCommandHandler
from emucmd.host import CapabilityAbsent
from emucmd.inputstate import valueFromState
from emucmd.operation import NotificationEvent, Operation

__all__ = [
    "CapabilityAbsent",
    "CommandError",
    "CommandHandler",
    "HandlerConfig",
    "NotificationEvent",
    "Operation",
    "OperationFailed",
    "StrictCommandHandler",
    "UnknownMethod",
    "load_autostart",
    "resolve_handler_config",
    "run_autostart",
    "valueFromState",
]
