"""Base classes and decorators for the command system.

This module provides:
- IOp: Base class for all default command operations
- PArg: Declaration of one parameter an operation reads from its params
- @command: Decorator to register commands with metadata
- Command registry for auto-discovery
"""

import importlib
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from emucmd.host import CapabilityAbsent, capability, component
from emucmd.operation import Handler, Operation

if TYPE_CHECKING:
    from emucmd.handler import CommandHandler

# Global command registry - commands register themselves at import time
_COMMAND_REGISTRY: list[type["IOp"]] = []

# PArg default for params whose absence must be told apart from an explicit None
MISSING: Any = object()

CMDS_PACKAGE = "emucmd.cmds"


def namespace_of(cls: type) -> str:
    """Method namespace for a command class: the CATEGORY of the
    emucmd.cmds.<namespace> package its module lives in."""
    package = cls.__module__.rpartition(".")[0]
    while package and package.rpartition(".")[0] != CMDS_PACKAGE:
        package = package.rpartition(".")[0]

    if not package:
        raise ValueError(
            f"{cls.__name__} lives in {cls.__module__}, outside any {CMDS_PACKAGE}.<namespace> package"
        )

    try:
        namespace = importlib.import_module(package).CATEGORY
    except ImportError as e:
        raise ValueError(f"Cannot import namespace package {package} for {cls.__name__}") from e
    except AttributeError as e:
        raise ValueError(f"Namespace package {package} has no CATEGORY") from e

    return namespace


def command(names: list[str] | str, category: str | None = None):
    """Register an IOp subclass under one or more method names.

    Method names are "<namespace>.<name>". The namespace comes from the
    CATEGORY of the enclosing emucmd.cmds.<namespace> package unless
    `category` is given, so

        @command(names="quickSave")
        @dataclass
        class IOpQuickSave(IOp):
            ...

    in emucmd/cmds/state/quick.py answers to "state.quickSave".
    """
    if isinstance(names, str):
        names = [names]

    def decorator(cls):
        cls.__command_category__ = category or namespace_of(cls)
        cls.__command_names__ = names
        _COMMAND_REGISTRY.append(cls)
        return cls

    return decorator


def methods_of(cls: type["IOp"]) -> list[str]:
    """Full dot-namespaced method names a registered command answers to."""
    return [f"{cls.__command_category__}.{name}" for name in cls.__command_names__]  # type: ignore[attr-defined]


@dataclass(frozen=True)
class PArg:
    """One parameter read from `Operation.params` into an IOp attribute."""

    name: str
    default: Any = None

    # attribute name on the IOp if it differs from the param key
    dest: str | None = None

    # applied to supplied (non-None) values only; never to MISSING
    convert: Callable[[Any], Any] | None = None

    desc: str = ""


@dataclass
class IOp:
    """Common base class for all default command operations.

    Provides parameter binding and capability-checked access to the host.

    All commands must:
    - Inherit from this class
    - Be decorated with @command() to register
    - Implement argmap() to declare the params they read (if any)
    - Implement run() to execute the command
    """

    # Note: this is a quoted annotation so python ignores but mypy can still use it
    state: "CommandHandler"
    op: Operation

    def __post_init__(self):
        """Bind declared params and populate host shortcuts."""
        assert self.state
        self.emu = self.state.emulator
        self.params = self.op.params

        for arg in self.argmap():
            val = self.params.get(arg.name, arg.default)
            if arg.convert and val is not None and val is not MISSING:
                val = arg.convert(val)

            setattr(self, arg.dest or arg.name, val)

    def argmap(self) -> list[PArg]:
        return []

    def run(self) -> Any:
        raise NotImplementedError(f"{self.__class__.__name__} has no run()")

    @property
    def gameManager(self) -> Any | None:
        return component(self.emu, "gameManager")

    def call(self, target: Any, name: str, *args) -> Any:
        """Invoke `target.name(*args)` if the host provides it.

        Returns CapabilityAbsent(name) instead of raising when it does not.
        """
        fn = capability(target, name)
        if fn is None:
            return CapabilityAbsent(name)

        return fn(*args)

    @classmethod
    def handler(cls) -> Handler:
        """Adapt this command class to the plain `handler(context, op)` form
        stored in the command table."""

        def run(context: "CommandHandler", op: Operation) -> Any:
            return cls(context, op).run()

        run.__name__ = cls.__name__
        run.__qualname__ = f"{cls.__qualname__}.handler"
        run.__doc__ = cls.__doc__
        return run
