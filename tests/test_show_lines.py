# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

from reqscan.main.result_codes import ResultCode
from reqscan.requirements.show_lines import ShowLines
from tests.test_base import AppArguments, TestBase


class TestShowLines(TestBase):
    INPUTFILE = "test_show_lines.txt"

    def tearDown(self) -> None:
        self.delete_file(self.INPUTFILE)

    @staticmethod
    def get_args() -> AppArguments:
        args = AppArguments()
        args.command = ["lines"]
        return args

    def test_show_help(self) -> None:
        sut = ShowLines()
        args = self.get_args()
        args.help = True

        out = self.capture_stdout(sut.run, args)
        self.assertTrue("usage: reqscan lines" in out)

    def test_file_not_found(self) -> None:
        sut = ShowLines()
        args = self.get_args()
        args.inputfile = "DOESNOTEXIST"

        with self.assertRaises(SystemExit) as ctx:
            self.capture_stdout(sut.run, args)
        self.assertEqual(ResultCode.RESULT_FILE_NOT_FOUND, ctx.exception.code)

    def test_show_lines(self) -> None:
        self.write_textfile(self.get_pip_compile_output(), self.INPUTFILE)
        sut = ShowLines()
        args = self.get_args()
        args.inputfile = self.INPUTFILE

        out = self.capture_stdout(sut.run, args)
        self.assertTrue("  attrs==23.1.0\n" in out)
        self.assertTrue('  exceptiongroup==1.1.3 ; python_version < "3.11"\n' in out)
        self.assertTrue("5 lines found." in out)
        self.assertFalse("stripped:" in out)

    def test_invalid_lines_are_shown(self) -> None:
        self.write_textfile("not a requirement  # but shown\r\n", self.INPUTFILE)
        sut = ShowLines()
        args = self.get_args()
        args.inputfile = self.INPUTFILE
        args.verbose = True

        out = self.capture_stdout(sut.run, args)
        self.assertTrue("  not a requirement\n" in out)
        self.assertTrue("stripped: # but shown" in out)
        self.assertTrue("1 lines found." in out)
