"""Behavioral flags of the permissive command handler.

Resolution never fails: anything malformed is replaced by its default.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from loguru import logger


@dataclass(frozen=True)
class HandlerConfig:
    # unknown methods and handler failures become a logged None result
    fallbackOnError: bool = True

    # log every exec() intent and every rejected config value
    enableLogging: bool = False

    # unknown methods and handler failures always raise
    strictMode: bool = False

    @property
    def raises(self) -> bool:
        """True if failures propagate to the exec() caller."""
        return self.strictMode or not self.fallbackOnError


DEFAULT_CONFIG = HandlerConfig()

# hardwired policy of StrictCommandHandler
STRICT_CONFIG = HandlerConfig(fallbackOnError=False, enableLogging=False, strictMode=True)

# environment variable -> config key, read only by the command line runner
ENV_KEYS = {
    "EMUCMD_FALLBACK_ON_ERROR": "fallbackOnError",
    "EMUCMD_ENABLE_LOGGING": "enableLogging",
    "EMUCMD_STRICT_MODE": "strictMode",
}

TRUTHY = {"1", "true", "yes", "on"}
FALSY = {"0", "false", "no", "off"}


def resolve_handler_config(partial: Mapping[str, Any] | None) -> HandlerConfig:
    """Build a complete HandlerConfig from a partial mapping of flags.

    Recognized keys with non-bool values are dropped back to their default
    (with a warning, but only when the resolved config has logging enabled).
    Unrecognized keys are ignored.
    """
    if not isinstance(partial, Mapping):
        return DEFAULT_CONFIG

    accepted: dict[str, bool] = {}
    rejected: list[tuple[str, Any]] = []
    for f in fields(HandlerConfig):
        if f.name not in partial:
            continue

        val = partial[f.name]
        if isinstance(val, bool):
            accepted[f.name] = val
        else:
            rejected.append((f.name, val))

    config = replace(DEFAULT_CONFIG, **accepted)

    if config.enableLogging:
        for key, val in rejected:
            logger.warning(
                "[config] Invalid value for {}: {!r} (expected bool), using default: {}",
                key,
                val,
                getattr(DEFAULT_CONFIG, key),
            )

    return config


def parse_flag(val: str) -> bool | str:
    """Parse an environment flag. Unparseable input is returned unchanged so
    the resolver rejects it like any other non-bool value."""
    check = val.strip().lower()
    if check in TRUTHY:
        return True

    if check in FALSY:
        return False

    return val


def config_from_environment(environ: Mapping[str, str]) -> dict[str, Any]:
    """Collect handler config flags from EMUCMD_* environment variables."""
    found: dict[str, Any] = {}
    for envkey, key in ENV_KEYS.items():
        if envkey in environ:
            found[key] = parse_flag(environ[envkey])

    return found
