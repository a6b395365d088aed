"""Default command table.

Every subpackage of emucmd.cmds is a method namespace (control, state, menu,
...) whose modules define @command classes. Importing this package imports
all of them once and freezes the result into DEFAULT_COMMANDS; handler
instances start from a copy of it (see build_commands).
"""

import importlib
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from emucmd.operation import Handler

from .base import _COMMAND_REGISTRY, IOp, PArg, command, methods_of
from .dispatch import build_commands

__all__ = ["DEFAULT_COMMANDS", "IOp", "PArg", "build_commands", "command", "default_commands"]


def discover_and_import_commands():
    """Import every module of every namespace package so their @command
    decorators run. Order is alphabetical, namespaces first."""
    root = Path(__file__).parent

    namespaces = [d for d in sorted(root.iterdir()) if d.is_dir() and not d.name.startswith("_")]
    for namespace in namespaces:
        for module_file in sorted(namespace.glob("*.py")):
            if module_file.name == "__init__.py":
                continue

            # e.g. .state.quick -> emucmd.cmds.state.quick
            importlib.import_module(f".{namespace.name}.{module_file.stem}", package=__package__)


def build_default_commands() -> Mapping[str, Handler]:
    """Map every discovered "namespace.name" method to its handler.

    Two classes claiming the same method is a packaging error and raises.
    """
    discover_and_import_commands()

    commands: dict[str, Handler] = {}
    owners: dict[str, type[IOp]] = {}

    for cmd_class in _COMMAND_REGISTRY:
        for method in methods_of(cmd_class):
            if method in owners:
                raise ValueError(
                    f"Duplicate command method '{method}': "
                    f"{owners[method].__name__} and {cmd_class.__name__}"
                )

            owners[method] = cmd_class
            commands[method] = cmd_class.handler()

    return commands


# The master default registry, never mutated after import
DEFAULT_COMMANDS: Mapping[str, Handler] = MappingProxyType(build_default_commands())


def default_commands() -> dict[str, Handler]:
    """Fresh mutable copy of the default command set."""
    return dict(DEFAULT_COMMANDS)
