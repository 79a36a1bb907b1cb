# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""
Read requirements files from disk.
"""

import chardet
from packaging.requirements import Requirement

from reqscan import get_logger
from reqscan.main.exceptions import ReqScanException
from reqscan.requirements.collection import Requirements, SpecifierParser

LOG = get_logger(__name__)

DEFAULT_ENCODING = "utf-8"


def read_requirements_text(filename: str) -> str:
    """
    Read the contents of a requirements file.

    The encoding of the file is guessed, UTF-8 is used when
    no encoding can be detected.

    :param filename: the requirements file.
    :return: the decoded text of the file.
    :raises ReqScanException: if the file cannot be read or decoded.
    """
    try:
        with open(filename, "rb") as fin:
            rawdata = fin.read()
    except OSError as ex:
        raise ReqScanException(f"Unable to read {filename}: {ex}") from ex

    if not rawdata:
        return ""

    encoding = chardet.detect(rawdata)["encoding"] or DEFAULT_ENCODING
    LOG.debug(f"Reading {filename} using encoding {encoding}")
    try:
        text = rawdata.decode(encoding)
    except (UnicodeDecodeError, LookupError) as ex:
        raise ReqScanException(f"Unable to decode {filename}: {ex}") from ex

    # byte order mark
    if text.startswith("\ufeff"):
        text = text[1:]

    return text


def read_requirements_file(filename: str, parser: SpecifierParser = Requirement) -> Requirements:
    """
    Read and parse a requirements file.

    :raises ReqScanException: if the file cannot be read.
    :raises packaging.requirements.InvalidRequirement: if a line is not a valid requirement.
    """
    return Requirements.parse(read_requirements_text(filename), parser)
