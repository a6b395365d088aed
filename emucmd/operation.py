"""Value objects passed through a dispatch: the Operation a handler receives
and the NotificationEvent an observer receives."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import whenever

if TYPE_CHECKING:
    from emucmd.handler import CommandHandler


def now_millis() -> int:
    """Current wall clock time as integer epoch milliseconds."""
    return whenever.Instant.now().timestamp(unit="millisecond")


@dataclass(frozen=True)
class Operation:
    """One request for one handler. Created fresh for every `exec()` call."""

    method: str
    params: Mapping[str, Any] = field(default_factory=dict)
    timestamp: int = field(default_factory=now_millis)


@dataclass(frozen=True)
class NotificationEvent:
    """Outcome of a resolved dispatch as delivered to the observer callback.

    `error` is None on success, else the failure message.
    """

    method: str
    params: Mapping[str, Any]
    result: Any
    timestamp: int
    error: str | None = None


# handlers receive the dispatcher as invocation context plus the operation
Handler = Callable[["CommandHandler", Operation], Any]
Observer = Callable[[NotificationEvent], Any]
