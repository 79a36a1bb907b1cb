# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

class ResultCode(object):
    # application result codes

    # default
    RESULT_OPERATION_SUCCEEDED = 0

    # general errors as defined in https://tldp.org/LDP/abs/html/exitcodes.html
    RESULT_GENERAL_ERROR = 1

    # predefined errors from /usr/include/sysexits.h
    RESULT_COMMAND_ERROR = 64  # command was used incorrectly
    RESULT_ERROR_READING_REQUIREMENTS = 65  # input data was incorrect
    RESULT_FILE_NOT_FOUND = 66  # input file did not exist or was not readable
    RESULT_ERROR_WRITING_FILE = 73  # output file cannot be created
