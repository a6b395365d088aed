"""Command line session driving a CommandHandler.

Lines have the form

    <method> [json-object | key=value ...]

for example

    control.pause
    state.quickSave slot=2
    input.simulate {"player": 0, "button": 17, "state": "pressed"}

Blank lines and lines starting with '#' are ignored. `.commands` lists every
method in the table and `.quit` ends the session.
"""

import importlib
import inspect
import json
import os
import pathlib
import shlex
import sys
from dataclasses import dataclass, field
from typing import Any

import prettyprinter as pp  # type: ignore
import whenever
from loguru import logger
from prompt_toolkit import PromptSession

from emucmd.autostart import load_autostart, run_autostart
from emucmd.config import config_from_environment, parse_flag
from emucmd.handler import CommandHandler, StrictCommandHandler
from emucmd.host import CapabilityAbsent


class CommandLineError(ValueError):
    pass


def parseParamValue(raw: str) -> Any:
    """JSON-decode a `key=value` value, falling back to the raw string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def parseCommandLine(line: str) -> tuple[str, dict[str, Any]] | None:
    """Split a command line into (method, params).

    Returns None for blank lines and comments.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    method, _, rest = line.partition(" ")
    rest = rest.strip()

    if not rest:
        return method, {}

    if rest.startswith("{"):
        try:
            params = json.loads(rest)
        except ValueError as e:
            raise CommandLineError(f"[{method}] Invalid JSON params: {e}") from e

        if not isinstance(params, dict):
            raise CommandLineError(f"[{method}] JSON params must be an object")

        return method, params

    params = {}
    for token in shlex.split(rest):
        key, sep, val = token.partition("=")
        if not sep or not key:
            raise CommandLineError(f"[{method}] Expected key=value, got: {token}")

        params[key] = parseParamValue(val)

    return method, params


def loadHost(target: str) -> Any:
    """Resolve a 'module:attribute' import path to a host object.

    Classes and plain functions are treated as zero-argument factories.
    """
    modname, sep, attrpath = target.partition(":")
    if not sep or not modname or not attrpath:
        raise CommandLineError(f"Host must be given as module:attribute, got: {target}")

    obj: Any = importlib.import_module(modname)
    for attr in attrpath.split("."):
        obj = getattr(obj, attr)

    if inspect.isclass(obj) or inspect.isfunction(obj):
        obj = obj()

    return obj


@dataclass
class EmuCmdlineApp:
    host: Any
    strict: bool = False
    handlerConfig: dict[str, Any] = field(default_factory=dict)
    autostart: pathlib.Path | None = None
    logdir: pathlib.Path | None = None

    handler: CommandHandler = field(init=False)

    def __post_init__(self):
        if self.strict:
            self.handler = StrictCommandHandler(self.host, onCommand=self.onCommand)
        else:
            self.handler = CommandHandler(
                self.host, onCommand=self.onCommand, handlerConfig=self.handlerConfig
            )

    @classmethod
    def fromEnvironment(cls, environ=os.environ) -> "EmuCmdlineApp":
        target = environ.get("EMUCMD_HOST")
        if not target:
            raise CommandLineError("Please provide the host import path in EMUCMD_HOST")

        autostart = environ.get("EMUCMD_AUTOSTART")
        return cls(
            host=loadHost(target),
            strict=parse_flag(environ.get("EMUCMD_STRICT", "0")) is True,
            handlerConfig=config_from_environment(environ),
            autostart=pathlib.Path(autostart) if autostart else None,
            logdir=pathlib.Path(environ.get("EMUCMD_LOGDIR", "runlogs")),
        )

    def setupLogging(self) -> None:
        if not self.logdir:
            return

        now = whenever.ZonedDateTime.now("UTC")
        LOGDIR = self.logdir / f"{now.year}" / f"{now.month:02}"
        LOGDIR.mkdir(exist_ok=True, parents=True)
        stamp = f"{now.year:04}{now.month:02}{now.day:02}T{now.hour:02}{now.minute:02}{now.second:02}Z"
        LOG_FILE_TEMPLATE = str(LOGDIR / f"emucmd-{stamp}")

        logger.remove()
        logger.add(sys.stderr, colorize=True, level="INFO")

        # full session history including TRACE command input not echoed to the console
        logger.add(sink=LOG_FILE_TEMPLATE + "-emucmd.log", level="TRACE", colorize=False)

        logger.info("Logging session with prefix: {}", LOG_FILE_TEMPLATE)

    def onCommand(self, event) -> None:
        # failures are already reported by the handler policy or runSingleCommand()
        if event.error is not None:
            return

        if isinstance(event.result, CapabilityAbsent):
            logger.warning("[{}] Host has no {}", event.method, event.result.capability)
        elif event.result is not None:
            logger.info("[{}] {}", event.method, pp.pformat(event.result))

    def setup(self) -> None:
        self.setupLogging()
        logger.info("Ready: {}", self.handler)

        if self.autostart:
            run_autostart(self.handler, load_autostart(self.autostart))

    def showCommands(self) -> None:
        for method in self.handler.methods():
            doc = (inspect.getdoc(self.handler.commands[method]) or "").split("\n")[0]
            logger.info("{:<28} {}", method, doc)

    def runSingleCommand(self, line: str) -> bool:
        """Run one input line. Returns False when the session should end."""
        logger.trace("INPUT: {}", line)

        match line.strip():
            case ".quit" | ".exit":
                return False
            case ".commands":
                self.showCommands()
                return True

        try:
            parsed = parseCommandLine(line)
            if parsed:
                method, params = parsed
                self.handler.exec(method, params)
        except Exception as e:
            logger.error("{}", e)

        return True

    def runall(self, lines=None) -> None:
        """Dispatch lines until input ends or `.quit`.

        Reads from an interactive prompt on a tty, else from `lines` (or stdin).
        """
        if lines is None and sys.stdin.isatty():
            session: PromptSession = PromptSession()
            while True:
                try:
                    line = session.prompt("emucmd> ")
                except KeyboardInterrupt:
                    continue
                except EOFError:
                    break

                if not self.runSingleCommand(line):
                    break

            return

        for line in lines if lines is not None else sys.stdin:
            if not self.runSingleCommand(line):
                break
