# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import datetime
from typing import Any

from colorama import Fore, Style

import reqscan


def _get_debug_prefix() -> str:
    """Returns a prefix similar to the one from logging."""
    d = datetime.datetime.now()
    ms = d.strftime("%f")[:3]
    return d.strftime("%Y-%m-%d %H:%M:%S,") + ms + ":TEXT:" + reqscan.APP_NAME + ": "


def _print_colored(color: str, *args: Any, **kwargs: Any) -> None:
    if reqscan.is_debug_logging_enabled():
        print(_get_debug_prefix(), end="")
    print(color, end="")
    print(*args, **kwargs, end="")
    print(Style.RESET_ALL)


def print_red(*args: Any, **kwargs: Any) -> None:
    """Print the given text in red color."""
    _print_colored(Fore.LIGHTRED_EX, *args, **kwargs)


def print_yellow(*args: Any, **kwargs: Any) -> None:
    """Print the given text in yellow color."""
    _print_colored(Fore.LIGHTYELLOW_EX, *args, **kwargs)


def print_green(*args: Any, **kwargs: Any) -> None:
    """Print the given text in green color."""
    _print_colored(Fore.LIGHTGREEN_EX, *args, **kwargs)


def print_text(*args: Any, **kwargs: Any) -> None:
    """Print the given text."""
    if reqscan.is_debug_logging_enabled():
        print(_get_debug_prefix(), end="")
    print(*args, **kwargs)
