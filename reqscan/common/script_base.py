# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""
Base class for the ReqScan commands.
"""

import os
import sys
from typing import Any

from packaging.requirements import InvalidRequirement

from reqscan.common.print import print_red
from reqscan.main.exceptions import ReqScanException
from reqscan.main.result_codes import ResultCode
from reqscan.requirements.collection import Requirements
from reqscan.requirements.reader import read_requirements_text


class ScriptBase:
    """Base class for the ReqScan commands."""

    def __init__(self) -> None:
        self.verbose = False

    @staticmethod
    def check_input_file(args: Any) -> str:
        """Ensure that an existing input file has been specified."""
        if not args.inputfile:
            print_red("No input file specified!")
            sys.exit(ResultCode.RESULT_COMMAND_ERROR)

        if not os.path.isfile(args.inputfile):
            print_red("Input file not found!")
            sys.exit(ResultCode.RESULT_FILE_NOT_FOUND)

        return args.inputfile

    def read_text(self, args: Any) -> str:
        """Read the raw text of the input file."""
        filename = self.check_input_file(args)
        try:
            return read_requirements_text(filename)
        except ReqScanException as ex:
            print_red(str(ex))
            sys.exit(ResultCode.RESULT_FILE_NOT_FOUND)

    def read_requirements(self, args: Any) -> Requirements:
        """Read and parse the input file, exits on the first invalid requirement."""
        text = self.read_text(args)
        try:
            return Requirements.parse(text)
        except InvalidRequirement as ex:
            print_red("Invalid requirement: " + str(ex))
            sys.exit(ResultCode.RESULT_ERROR_READING_REQUIREMENTS)

    @staticmethod
    def get_count_text(requirements: Requirements) -> str:
        count = len(requirements)
        if count == 1:
            return "1 requirement"
        else:
            return f"{count} requirements"
