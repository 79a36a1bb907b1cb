# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Custom argument parser."""

import argparse
import textwrap
from typing import Any, Dict, List


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that prints a compact option table and a command overview."""
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.options: List[Dict[str, Any]] = []
        super().__init__(*args, **kwargs, add_help=False)
        self.program = dict(kwargs)
        self.command_help = ""

    def add_command_help(self, command_help: str) -> None:
        self.command_help = command_help

    def add_argument(self, *args: Any, **kwargs: Any) -> Any:
        action = super().add_argument(*args, **kwargs)
        option: Dict[str, Any] = {"flags": list(args)}
        option.update(kwargs)
        self.options.append(option)
        return action

    @staticmethod
    def _format_flags(option: Dict[str, Any]) -> str:
        if option.get("action") == "store_true" or "nargs" in option:
            return ", ".join(option["flags"])
        if "metavar" in option:
            return ", ".join(f"{flag} {option['metavar']}" for flag in option["flags"])
        if "dest" in option:
            return ", ".join(f"{flag} {option['dest'].upper()}" for flag in option["flags"])
        return ", ".join(option["flags"])

    def print_help(self, file: Any = None) -> None:
        wrapper = textwrap.TextWrapper(width=100)

        if "usage" in self.program:
            print("Usage: %s" % self.program["usage"])
        print()

        if "description" in self.program:
            print(self.program["description"])
            print()

        if self.command_help:
            print(self.command_help)
            print()

        print("Options:")
        flags = [self._format_flags(option) for option in self.options]
        maxlen = max(len(item) for item in flags) if flags else 0
        for option, flag_text in zip(self.options, flags):
            wrapper.initial_indent = ("  %-" + str(maxlen) + "s  ") % flag_text
            wrapper.subsequent_indent = len(wrapper.initial_indent) * " "
            if "help" in option:
                print(wrapper.fill(option["help"]))
            else:
                print(wrapper.initial_indent)
