"""Merge of caller command overrides into the default command table."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from loguru import logger

from emucmd.operation import Handler


def build_commands(overrides: Mapping[str, Any] | None = None) -> Mapping[str, Handler]:
    """Return the command table for one handler instance.

    Per override key:
      - callable: replaces the default (or adds a new method)
      - False / None: removes the method entirely
      - anything else: rejected with a warning, default left intact

    The returned mapping is read-only; the table is fixed once built.
    """
    # Import defaults here to avoid circular imports
    from . import default_commands

    merged = default_commands()

    if not isinstance(overrides, Mapping):
        if overrides is not None:
            logger.warning(
                "Command overrides must be a mapping, got {}; using defaults",
                type(overrides).__name__,
            )

        return MappingProxyType(merged)

    for method, override in overrides.items():
        if callable(override):
            logger.info("[{}] Overriding operation with custom implementation", method)
            merged[method] = override
        elif override is False or override is None:
            logger.info("[{}] Disabling operation", method)
            merged.pop(method, None)
        else:
            logger.warning(
                "[{}] Invalid command override {!r}: must be callable, False, or None",
                method,
                override,
            )

    return MappingProxyType(merged)
