"""Single entry point routing emulator operations to their handlers.

    handler = CommandHandler(emulator)
    handler.exec("input.simulate", {"player": 0, "button": 2, "state": "pressed"})
    handler.exec("control.pause")
    handler.exec("state.quickSave", {"slot": 1})

Two policies exist. CommandHandler is permissive by default: unknown methods
and handler failures are logged and turned into a None result, unless
`handlerConfig` enables strictMode or disables fallbackOnError.
StrictCommandHandler always raises.

Observers registered with `onCommand` see every resolved dispatch exactly
once, before the caller sees the outcome. Unknown methods are never resolved,
so they are never notified.
"""

from collections.abc import Mapping
from typing import Any

import prettyprinter as pp  # type: ignore
from loguru import logger

from emucmd.cmds import build_commands
from emucmd.config import STRICT_CONFIG, HandlerConfig, resolve_handler_config
from emucmd.errors import OperationFailed, UnknownMethod, describe
from emucmd.inputstate import valueFromState
from emucmd.notify import Notifier
from emucmd.operation import Handler, Observer, Operation


class CommandHandler:
    def __init__(
        self,
        emulator: Any,
        *,
        commands: Mapping[str, Any] | None = None,
        onCommand: Observer | None = None,
        handlerConfig: Mapping[str, Any] | None = None,
    ):
        # borrowed: never created, closed, or replaced here
        self.emulator = emulator
        self.config: HandlerConfig = self.resolveConfig(handlerConfig)
        self.commands: Mapping[str, Handler] = build_commands(commands)
        self.notifier = Notifier(onCommand)

    def resolveConfig(self, handlerConfig: Mapping[str, Any] | None) -> HandlerConfig:
        return resolve_handler_config(handlerConfig)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(methods={len(self.commands)}, config={self.config})"

    def has(self, method: str) -> bool:
        return method in self.commands

    def methods(self) -> list[str]:
        return sorted(self.commands)

    def valueFromState(self, state: str | None, button: int | None) -> int:
        return valueFromState(state, button)

    def exec(self, method: str, params: Mapping[str, Any] | None = None) -> Any:
        """Execute `method` with `params`.

        Returns the handler's result, or None when a failure was absorbed by
        the fallback policy.

        Raises:
            UnknownMethod: method not in the table (strict / no fallback only)
            OperationFailed: handler raised (strict / no fallback only)
        """
        if params is None:
            params = {}

        if self.config.enableLogging:
            logger.info("[{}] Executing with params: {}", method, pp.pformat(params))

        handler = self.commands.get(method)
        if handler is None:
            if self.config.raises:
                raise UnknownMethod(method)

            logger.warning("[{}] Unknown operation method, ignoring", method)
            return None

        op = Operation(method=method, params=params)

        try:
            result = handler(self, op)
        except Exception as e:
            self.notifier.notify(method, params, None, e)

            if self.config.raises:
                raise OperationFailed(method, e) from e

            logger.error("[{}] Error executing operation: {}", method, describe(e))
            return None

        self.notifier.notify(method, params, result, None)
        return result


class StrictCommandHandler(CommandHandler):
    """CommandHandler without configurable policy: always raise, never fall back."""

    def __init__(
        self,
        emulator: Any,
        *,
        commands: Mapping[str, Any] | None = None,
        onCommand: Observer | None = None,
    ):
        super().__init__(emulator, commands=commands, onCommand=onCommand)

    def resolveConfig(self, handlerConfig: Mapping[str, Any] | None) -> HandlerConfig:
        return STRICT_CONFIG
