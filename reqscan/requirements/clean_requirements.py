# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import sys
from typing import Any

import reqscan
from reqscan.common.print import print_red, print_text
from reqscan.common.script_base import ScriptBase
from reqscan.main.result_codes import ResultCode
from reqscan.requirements.collection import Requirements

LOG = reqscan.get_logger(__name__)


class CleanRequirements(ScriptBase):
    """
    Write a requirements file without comments, hashes and
    continuation lines, one normalized requirement per line.
    """

    @staticmethod
    def write_requirements(requirements: Requirements, outputfile: str) -> None:
        with open(outputfile, "w", encoding="utf-8") as outfile:
            for req in requirements:
                outfile.write(str(req) + "\n")

    def run(self, args: Any) -> None:
        """Main method()"""
        if args.debug:
            global LOG
            LOG = reqscan.get_logger(__name__)

        print_text("\n" + reqscan.get_app_signature() + " - Clean requirements file\n")

        if args.help:
            print("usage: reqscan clean [-i INPUTFILE] [-o OUTPUTFILE]")
            print("")
            print("Write a cleaned requirements file: one normalized requirement")
            print("per line, no comments, no hashes")
            print("")
            print("optional arguments:")
            print("    -h, --help            show this help message and exit")
            print("    -i INPUTFILE, --inputfile INPUTFILE")
            print("                            input file (requirements.txt)")
            print("    -o OUTPUTFILE, --outputfile OUTPUTFILE")
            print("                            output file to write to")
            return

        self.check_input_file(args)
        if not args.outputfile:
            print_red("No output file specified!")
            sys.exit(ResultCode.RESULT_COMMAND_ERROR)

        print_text("Reading input file " + args.inputfile)
        requirements = self.read_requirements(args)

        print_text("Writing cleaned requirements to " + args.outputfile)
        try:
            self.write_requirements(requirements, args.outputfile)
        except OSError as ex:
            print_red("Error writing file: " + repr(ex))
            sys.exit(ResultCode.RESULT_ERROR_WRITING_FILE)

        print_text(" " + self.get_count_text(requirements) + " written to file.")
        print()
