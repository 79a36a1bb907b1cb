# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Exception for ReqScan."""


class ReqScanException(Exception):
    def __init__(self, msg: str = "") -> None:
        super().__init__(msg)
