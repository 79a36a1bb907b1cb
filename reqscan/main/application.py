# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Module containing the application logic for ReqScan."""

import sys
import time
from typing import Any, List, Optional

import reqscan
from reqscan.common.print import print_red
from reqscan.main import options
from reqscan.main.result_codes import ResultCode
from reqscan.requirements import handle_requirements

LOG = reqscan.get_logger(__name__)


class Application(object):
    def __init__(self, program: str = reqscan.APP_NAME, version: Optional[str] = None) -> None:
        """Initialize our application."""

        #: The timestamp when the Application instance was instantiated.
        self.start_time = time.time()
        #: The name of the program being run
        self.program = program
        #: The version of the program being run
        self.version = version or reqscan.get_app_version()

        #: The user-supplied options parsed into an instance of
        #: :class:`argparse.Namespace`
        self.options: Any = None

    def check_for_version_display(self, argv: List[str]) -> bool:
        """Check for --version option"""
        if "--version" in argv:
            print("\n" + reqscan.APP_NAME + " - Requirements File Scanner\n")
            print("version", self.version)
            return True

        return False

    def check_for_global_help(self, argv: List[str]) -> bool:
        """Check for -h option without any command"""
        # it must be a single help parameter
        return len(argv) == 1 and argv[0] in ("-h", "--help")

    def exit(self) -> None:
        """Handle finalization and exiting the program."""
        LOG.debug(f"Finished after {time.time() - self.start_time:.2f}s")

    def has_debug_switch(self, argv: List[str]) -> bool:
        return any(arg.lower() == "-x" for arg in argv)

    def initialize(self, argv: List[str]) -> None:
        if self.has_debug_switch(argv):
            reqscan.configure_logging(2)
        else:
            reqscan.configure_logging(1)

    def emit_exit_code(self, system_exit_exception: Optional[SystemExit]) -> None:
        if system_exit_exception is None:
            if self.options and self.options.ex:
                print("Exit code = 0")
            return

        if isinstance(system_exit_exception.code, str):
            print(system_exit_exception.code)

        if isinstance(system_exit_exception.code, int):
            if self.options and self.options.ex:
                print("Exit code = " + str(system_exit_exception.code))
            sys.exit(system_exit_exception.code)

        if self.options and self.options.ex:
            print("Exit code = 1")
        sys.exit(ResultCode.RESULT_GENERAL_ERROR)

    def _run(self, argv: List[str]) -> None:
        self.initialize(argv)

        cmdline = options.CommandlineSupport()

        if self.check_for_version_display(argv):
            return

        if self.check_for_global_help(argv):
            cmdline.parser.print_help()
            return

        if len(argv) < 1:
            LOG.error("No command specified!")
            cmdline.parser.print_help()
            return

        self.options = cmdline.process_commandline(argv)

        command = self.options.command[0].lower()
        if command in handle_requirements.COMMANDS:
            handle_requirements.run_requirements_command(self.options)
        else:
            print_red("Unknown command: " + command)
            sys.exit(ResultCode.RESULT_COMMAND_ERROR)

    def run(self, argv: List[str]) -> None:
        """Run our application.
        This method will also handle KeyboardInterrupt exceptions for the
        entirety of the ReqScan application.
        """
        system_exit_exception = None
        try:
            self._run(argv)
        except KeyboardInterrupt:
            print("... stopped")
            LOG.critical("Caught keyboard interrupt from user")
            system_exit_exception = SystemExit(ResultCode.RESULT_GENERAL_ERROR)
        except SystemExit as sysex:
            system_exit_exception = sysex

        self.emit_exit_code(system_exit_exception)
