"""Delivery of dispatch outcomes to an optional observer callback."""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from emucmd.errors import describe
from emucmd.operation import NotificationEvent, Observer, now_millis


class Notifier:
    """Best-effort wrapper around the `onCommand` observer.

    Observer failures are logged and dropped. They never reach the dispatcher
    and are never retried.
    """

    def __init__(self, callback: Observer | None = None):
        self.callback: Observer | None = None

        if callback is None:
            return

        if callable(callback):
            self.callback = callback
        else:
            logger.warning(
                "[notify] onCommand must be callable, got {}; notifications disabled",
                type(callback).__name__,
            )

    def __bool__(self) -> bool:
        return self.callback is not None

    @staticmethod
    def message(error: BaseException | str | None) -> str | None:
        """Failure message for an event; exceptions without one fall back to their type name."""
        if error is None:
            return None

        if isinstance(error, BaseException):
            return describe(error)

        return error

    def notify(
        self,
        method: str,
        params: Mapping[str, Any],
        result: Any,
        error: BaseException | str | None,
    ) -> None:
        if not self.callback:
            return

        event = NotificationEvent(
            method=method,
            params=params,
            result=result,
            timestamp=now_millis(),
            error=self.message(error),
        )

        try:
            self.callback(event)
        except Exception:
            logger.exception("[{}] Error in onCommand callback", method)
