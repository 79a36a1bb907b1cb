# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

from packaging.requirements import InvalidRequirement

from reqscan.main.exceptions import ReqScanException
from reqscan.requirements.reader import read_requirements_file, read_requirements_text
from tests.test_base import TestBase


class TestReader(TestBase):
    INPUTFILE = "test_reader_requirements.txt"

    def tearDown(self) -> None:
        self.delete_file(self.INPUTFILE)

    def test_file_not_found(self) -> None:
        with self.assertRaises(ReqScanException):
            read_requirements_text("DOESNOTEXIST")

    def test_empty_file(self) -> None:
        self.write_textfile("", self.INPUTFILE)
        self.assertEqual("", read_requirements_text(self.INPUTFILE))
        self.assertEqual(0, len(read_requirements_file(self.INPUTFILE)))

    def test_line_endings_are_kept(self) -> None:
        self.write_textfile("a==1\r\nb==2\r\n", self.INPUTFILE)
        self.assertEqual("a==1\r\nb==2\r\n", read_requirements_text(self.INPUTFILE))

    def test_byte_order_mark_is_removed(self) -> None:
        self.write_textfile("flask==2.0\n", self.INPUTFILE, encoding="utf-8-sig")
        self.assertEqual("flask==2.0\n", read_requirements_text(self.INPUTFILE))

    def test_utf16(self) -> None:
        self.write_textfile("# Abhängigkeiten\nflask==2.0\n", self.INPUTFILE, encoding="utf-16")
        self.assertEqual("# Abhängigkeiten\nflask==2.0\n", read_requirements_text(self.INPUTFILE))

    def test_read_requirements_file(self) -> None:
        self.write_textfile(self.get_pip_compile_output(), self.INPUTFILE)
        sut = read_requirements_file(self.INPUTFILE)
        self.assertEqual(5, len(sut))
        self.assertEqual("attrs", sut[0].name)

    def test_invalid_requirement(self) -> None:
        self.write_textfile("flask==2.0\n==1.0\n", self.INPUTFILE)
        with self.assertRaises(InvalidRequirement):
            read_requirements_file(self.INPUTFILE)
