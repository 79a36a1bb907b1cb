# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

import reqscan
from reqscan import configure_logging, get_logger
from tests.test_base import TestBase


class TestLogging(TestBase):
    DEBUG_MSG = "Debug message"
    INFO_MSG = "Info message"
    WARNING_MSG = "Warning message"
    ERROR_MSG = "Error message"
    CRITICAL_MSG = "Critical message"

    def tearDown(self) -> None:
        configure_logging(1)

    def create_output(self) -> None:
        LOG = configure_logging(2)
        LOG.debug(self.DEBUG_MSG)
        LOG.info(self.INFO_MSG)
        LOG.warning(self.WARNING_MSG)
        LOG.error(self.ERROR_MSG)
        LOG.critical(self.CRITICAL_MSG)

    def test_error_critical(self) -> None:
        out = self.capture_stderr(self.create_output)
        self.assertTrue(self.CRITICAL_MSG in out)
        self.assertTrue(self.ERROR_MSG in out)
        self.assertTrue(self.WARNING_MSG in out)
        self.assertFalse(self.INFO_MSG in out)
        self.assertFalse(self.DEBUG_MSG in out)

    def test_info_debug(self) -> None:
        out = self.capture_stdout(self.create_output)
        self.assertFalse(self.CRITICAL_MSG in out)
        self.assertFalse(self.ERROR_MSG in out)
        self.assertTrue(self.WARNING_MSG in out)
        self.assertTrue(self.INFO_MSG in out)
        self.assertTrue(self.DEBUG_MSG in out)

    def test_no_debug_output_by_default(self) -> None:
        def create_default_output() -> None:
            configure_logging(1)
            log = get_logger("reqscan.tests")
            log.debug(self.DEBUG_MSG)
            log.info(self.INFO_MSG)

        out = self.capture_stdout(create_default_output)
        self.assertFalse(self.DEBUG_MSG in out)
        self.assertTrue(self.INFO_MSG in out)
        self.assertFalse(reqscan.is_debug_logging_enabled())

    def test_verbosity_is_clamped(self) -> None:
        configure_logging(7)
        self.assertEqual(3, reqscan.VERBOSITY_LEVEL)
        configure_logging(-1)
        self.assertEqual(0, reqscan.VERBOSITY_LEVEL)
