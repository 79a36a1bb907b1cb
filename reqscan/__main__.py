# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Module allowing for ``python -m reqscan ...``."""
from reqscan.main import cli

cli.main()
