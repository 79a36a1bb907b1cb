# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Top-level module for ReqScan.

This module
- initializes logging for the command-line tool
- tracks the version of the package
- provides a way to configure logging for the command-line tool
"""

import importlib.metadata
import logging
import os
import sys
from typing import Any

import tomli
from colorama import Fore, Style, init

APP_NAME = "ReqScan"
VERBOSITY_LEVEL = 1


def is_debug_logging_enabled() -> bool:
    return VERBOSITY_LEVEL > 1


def _get_project_meta() -> Any:
    """Read version information from the project configuration file."""
    try:
        with open("pyproject.toml", mode="rb") as pyproject:
            return tomli.load(pyproject)["project"]
    except (OSError, KeyError, tomli.TOMLDecodeError):
        return None


def get_app_version() -> str:
    """Get the version string of this application"""
    version = ""
    try:
        # this will only work when the package has been installed
        version = importlib.metadata.version("reqscan")
    except importlib.metadata.PackageNotFoundError:
        pass

    if not version:
        pkg_meta = _get_project_meta()
        if pkg_meta and "version" in pkg_meta:
            version = str(pkg_meta["version"])

    if not version:
        version = "0.0.0-no-version"

    return version


def get_app_signature() -> str:
    """Get the signature of this application."""
    return f"{APP_NAME}, {get_app_version()}"


# There is nothing lower than logging.DEBUG (10) in the logging library,
# but we want an extra level to avoid being too verbose when using -vv.
_EXTRA_VERBOSE = 5
logging.addLevelName(_EXTRA_VERBOSE, "VERBOSE")

_VERBOSITY_TO_LOG_LEVEL = {
    # warnings and errors only
    0: logging.WARNING,
    # output more than warnings but not debugging info
    1: logging.INFO,
    # output debugging information
    2: logging.DEBUG,
    # output extra verbose debugging information
    3: _EXTRA_VERBOSE,
}


def is_running_in_ci() -> bool:
    """Check if the application is running in a CI environment."""
    return "GITLAB_CI" in os.environ or os.environ.get("CI") == "true"


def ensure_color_console_output() -> None:
    """Ensure that the console output is colored."""
    if is_running_in_ci():
        if "NO_COLOR" not in os.environ:
            # colorama's TTY detection does not work on CI runners
            os.environ["PYCHARM_HOSTED"] = "1"


ensure_color_console_output()
init()


class ConsoleHandler(logging.Handler):
    """Handler that writes errors to stderr, warnings to both streams
    and all other records to stdout."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            if record.levelno >= logging.ERROR:
                sys.stderr.write(msg + "\n")
            elif record.levelno >= logging.WARNING:
                sys.stderr.write(msg + "\n")
                print(msg)
            else:
                print(msg)
        except Exception:
            self.handleError(record)


class ColorFormatter(logging.Formatter):
    """
    A logging formatter for color console output.
    Critical messages and errors are displayed in red.
    Warnings are displayed in yellow.
    Infos are displayed in white.
    Debug messages are displayed in blue.
    """
    def __init__(self, verbosity: int) -> None:
        super().__init__()
        self.verbosity = verbosity
        self.fmt = "%(asctime)s:%(levelname)s:%(name)s: %(message)s"
        if self.verbosity <= 1:
            self.fmt = "%(message)s"

    def get_color_format(self, levelno: int, fmt: str) -> str:
        if levelno >= logging.ERROR:
            color = Fore.LIGHTRED_EX
        elif levelno >= logging.WARNING:
            color = Fore.LIGHTYELLOW_EX
        elif levelno >= logging.INFO:
            color = Fore.LIGHTWHITE_EX
        elif levelno >= logging.DEBUG:
            color = Fore.LIGHTBLUE_EX
        else:
            color = Fore.WHITE

        return color + fmt + Style.RESET_ALL

    def format(self, record: logging.LogRecord) -> str:
        formatter = logging.Formatter(self.get_color_format(record.levelno, self.fmt))
        return formatter.format(record)


class ColoredLogger(logging.Logger):
    """
    A color console logger that uses ColorFormatter
    to display colored log messages and ConsoleHandler
    to route them to stdout and stderr.
    """
    def __init__(self, name: str) -> None:
        logging.Logger.__init__(self, name, logging.DEBUG)

        self.propagate = False
        self.setVerbosity(1)

    def getVerbosity(self) -> int:
        return self.__verbosity

    def setVerbosity(self, value: int) -> None:
        self.__verbosity = value
        console = ConsoleHandler()
        console.setFormatter(ColorFormatter(self.__verbosity))
        self.handlers.clear()
        self.addHandler(console)


def _clamp_verbosity(verbosity: int) -> int:
    return max(0, min(3, verbosity))


def configure_logging(verbosity: int) -> logging.Logger:
    """
    Configure logging.

    :param int verbosity:
        How verbose to be in logging information.
    """
    logging.setLoggerClass(ColoredLogger)

    global VERBOSITY_LEVEL
    VERBOSITY_LEVEL = _clamp_verbosity(verbosity)

    log_level = _VERBOSITY_TO_LOG_LEVEL[VERBOSITY_LEVEL]
    logging.basicConfig(level=log_level)

    logger = logging.getLogger(__name__)
    logger.setVerbosity(VERBOSITY_LEVEL)  # type: ignore
    logger.setLevel(log_level)

    global LOG
    LOG = logger

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get one of our colored loggers for the specified name."""
    logging.setLoggerClass(ColoredLogger)
    logger = logging.getLogger(name)
    if isinstance(logger, ColoredLogger):
        logger.setVerbosity(VERBOSITY_LEVEL)
    logger.setLevel(_VERBOSITY_TO_LOG_LEVEL[VERBOSITY_LEVEL])
    return logger


LOG = configure_logging(1)
