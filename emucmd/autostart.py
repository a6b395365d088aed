"""Replay of a fixed startup command sequence through a command handler."""

import json
import pathlib
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from emucmd.handler import CommandHandler


def run_autostart(handler: "CommandHandler", entries: Iterable[Any]) -> None:
    """Run every `{method, params}` entry in order.

    A failing entry is logged and skipped; it never stops the remaining
    entries. Nothing is retried.
    """
    for idx, entry in enumerate(entries):
        if not isinstance(entry, Mapping) or not entry.get("method"):
            logger.warning("[autostart {}] Skipping entry without method: {}", idx, entry)
            continue

        method = entry["method"]
        try:
            handler.exec(method, entry.get("params") or {})
        except Exception as e:
            logger.error("[autostart {}] {} failed: {}", idx, method, e)


def load_autostart(path: pathlib.Path | str) -> list[Any]:
    """Read a JSON list of startup entries.

    Missing or malformed files produce an empty list (logged).
    """
    path = pathlib.Path(path)

    try:
        entries = json.loads(path.read_text())
    except FileNotFoundError:
        logger.error("[autostart] File not found: {}", path)
        return []
    except (OSError, ValueError) as e:
        logger.error("[autostart] Failed to read {}: {}", path, e)
        return []

    if not isinstance(entries, list):
        logger.error(
            "[autostart] Expected a list of entries in {}, got {}",
            path,
            type(entries).__name__,
        )
        return []

    logger.info("[autostart] Loaded {} entries from {}", len(entries), path)
    return entries
