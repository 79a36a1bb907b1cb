# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

from typing import Any

import reqscan
from reqscan.common.print import print_text, print_yellow
from reqscan.common.script_base import ScriptBase
from reqscan.requirements.lines import RequirementsIterator

LOG = reqscan.get_logger(__name__)


class ShowLines(ScriptBase):
    """Show the logical requirement lines of a requirements file."""

    def run(self, args: Any) -> None:
        """Main method()"""
        if args.debug:
            global LOG
            LOG = reqscan.get_logger(__name__)

        print_text("\n" + reqscan.get_app_signature() + " - Show requirement lines\n")

        if args.help:
            print("usage: reqscan lines [-i INPUTFILE] [-v]")
            print("")
            print("Show the requirement lines as passed to the requirement parser,")
            print("with continuation lines joined and comments and hashes removed")
            print("")
            print("optional arguments:")
            print("    -h, --help            show this help message and exit")
            print("    -i INPUTFILE, --inputfile INPUTFILE")
            print("                            input file (requirements.txt)")
            print("    -v                    verbose output, show the stripped trivia")
            return

        self.verbose = args.verbose
        text = self.read_text(args)

        count = 0
        for line in RequirementsIterator(text):
            count += 1
            print_text("  " + line.as_str().strip())
            trivia = line.trivia.strip()
            if self.verbose and trivia:
                print_yellow("    stripped: " + trivia)
            LOG.debug(f"    {len(line)} characters, {'joined' if line.owned else 'single'} line")

        print_text(f"\n{count} lines found.")
        print()
