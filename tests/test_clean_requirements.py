# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import os

from reqscan.main.result_codes import ResultCode
from reqscan.requirements.clean_requirements import CleanRequirements
from tests.test_base import AppArguments, TestBase


class TestCleanRequirements(TestBase):
    INPUTFILE = "test_clean_input.txt"
    OUTPUTFILE = "test_clean_output.txt"

    def tearDown(self) -> None:
        self.delete_file(self.INPUTFILE)
        self.delete_file(self.OUTPUTFILE)

    @staticmethod
    def get_args() -> AppArguments:
        args = AppArguments()
        args.command = ["clean"]
        return args

    def test_show_help(self) -> None:
        sut = CleanRequirements()
        args = self.get_args()
        args.help = True

        out = self.capture_stdout(sut.run, args)
        self.assertTrue("usage: reqscan clean" in out)

    def test_no_output_file_specified(self) -> None:
        self.write_textfile("flask==2.0\n", self.INPUTFILE)
        sut = CleanRequirements()
        args = self.get_args()
        args.inputfile = self.INPUTFILE

        with self.assertRaises(SystemExit) as ctx:
            self.capture_stdout(sut.run, args)
        self.assertEqual(ResultCode.RESULT_COMMAND_ERROR, ctx.exception.code)
        self.assertFalse(os.path.exists(self.OUTPUTFILE))

    def test_invalid_requirement_writes_nothing(self) -> None:
        self.write_textfile("flask==2.0\nflask=2.0\n", self.INPUTFILE)
        sut = CleanRequirements()
        args = self.get_args()
        args.inputfile = self.INPUTFILE
        args.outputfile = self.OUTPUTFILE

        with self.assertRaises(SystemExit) as ctx:
            self.capture_stdout(sut.run, args)
        self.assertEqual(ResultCode.RESULT_ERROR_READING_REQUIREMENTS, ctx.exception.code)
        self.assertFalse(os.path.exists(self.OUTPUTFILE))

    def test_clean(self) -> None:
        self.write_textfile(self.get_pip_compile_output(), self.INPUTFILE)
        sut = CleanRequirements()
        args = self.get_args()
        args.inputfile = self.INPUTFILE
        args.outputfile = self.OUTPUTFILE

        out = self.capture_stdout(sut.run, args)
        self.assertTrue("5 requirements written to file." in out)

        with open(self.OUTPUTFILE, encoding="utf-8") as fin:
            lines = fin.read().splitlines()
        self.assertEqual(5, len(lines))
        self.assertEqual("attrs==23.1.0", lines[0])
        self.assertEqual('exceptiongroup==1.1.3; python_version < "3.11"', lines[2])
        self.assertEqual("typing-extensions==4.7.1", lines[4])
