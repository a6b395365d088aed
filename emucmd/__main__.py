#!/usr/bin/env python3

import os
import sys

from dotenv import load_dotenv
from loguru import logger

import emucmd.cli as cli

# just load our dot files into the environment too
load_dotenv(".env.emucmd")

CONFIG_DEFAULT = dict(EMUCMD_LOGDIR="runlogs", EMUCMD_STRICT="0")

# populate config with defaults if they aren't in the environment
CONFIG = {**CONFIG_DEFAULT, **os.environ}


def runit():
    """Entry point for emucmd script and __main__ for entire package."""
    try:
        app = cli.EmuCmdlineApp.fromEnvironment(CONFIG)
    except cli.CommandLineError as e:
        logger.error("{}", e)
        sys.exit(1)

    app.setup()

    try:
        app.runall()
    except (KeyboardInterrupt, SystemExit):
        # known-good exit condition
        ...
    except Exception:
        logger.exception("Uncaught exception in command session")


if __name__ == "__main__":
    runit()
