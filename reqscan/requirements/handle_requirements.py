# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

from typing import Any

import reqscan.requirements.clean_requirements
import reqscan.requirements.show_lines
import reqscan.requirements.show_requirements

COMMANDS = ("show", "lines", "clean")


def run_requirements_command(args: Any) -> None:
    command = args.command[0].lower()

    if command == "show":
        """Show the requirements of a requirements file"""
        app = reqscan.requirements.show_requirements.ShowRequirements()
        app.run(args)
        return

    if command == "lines":
        """Show the cleaned requirement lines"""
        app2 = reqscan.requirements.show_lines.ShowLines()
        app2.run(args)
        return

    if command == "clean":
        """Write a cleaned requirements file"""
        app3 = reqscan.requirements.clean_requirements.CleanRequirements()
        app3.run(args)
        return
