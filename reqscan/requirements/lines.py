# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""
Split the raw text of a requirements file into logical requirement lines.

Physical lines ending in a backslash are joined with the following lines,
blank and fully commented lines are skipped, and for every logical line the
length of the actual requirement specifier is computed, i.e. the part before
an inline comment or the ``--hash`` options.
"""

import re
from typing import Iterator, Optional, Tuple

_NEWLINE = re.compile(r"\r\n?|\n")
_HASH_OPTION = "--hash"


def strip_trivia(text: str, start: int = 0, end: Optional[int] = None) -> int:
    """
    Strip trivia (comments and ``--hash`` options) from the requirement
    line ``text[start:end]``.

    Only the first ``#`` of the line is checked: it starts a comment when it
    is preceded by whitespace, otherwise it belongs to the requirement
    (URL fragment, ...) and the line is not cut at all.

    :param text: the text containing the line.
    :param start: offset of the first character of the line.
    :param end: offset after the last character of the line, default is the end of text.
    :return: the length of the requirement itself, trailing whitespace included.
    :rtype: int
    """
    if end is None:
        end = len(text)
    cut = end

    position = text.find("#", start, cut)
    if position > start and text[position - 1].isspace():
        cut = position

    position = text.find(_HASH_OPTION, start, cut)
    if position >= 0:
        cut = position

    return cut - start


class RequirementLine:
    """
    A logical line of a requirements file.

    A line that did not need any joining only references the raw text
    (``owned`` is False) and is not copied before its text is requested.
    Joined continuation lines own their text.
    """

    __slots__ = ("_text", "_start", "_end", "owned", "length")

    def __init__(self, text: str, start: int = 0, end: Optional[int] = None, owned: bool = False) -> None:
        if end is None:
            end = len(text)
        self._text = text
        self._start = start
        self._end = end
        #: True if the line text has been assembled from continuation lines
        self.owned = owned
        #: length of the requirement without comment and hash options
        self.length = strip_trivia(text, start, end)

    @classmethod
    def borrowed(cls, text: str, start: int, end: int) -> "RequirementLine":
        return cls(text, start, end, owned=False)

    @classmethod
    def joined(cls, text: str) -> "RequirementLine":
        return cls(text, owned=True)

    @property
    def line(self) -> str:
        """The line as written, including comments and ``--hash`` options."""
        if self._start == 0 and self._end == len(self._text):
            return self._text
        return self._text[self._start:self._end]

    @property
    def trivia(self) -> str:
        """Everything that has been stripped from the line."""
        return self._text[self._start + self.length:self._end]

    def as_str(self) -> str:
        """Return the parseable requirement."""
        return self._text[self._start:self._start + self.length]

    def __len__(self) -> int:
        return self._end - self._start

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        kind = "owned" if self.owned else "borrowed"
        return f"RequirementLine({self.line!r}, length={self.length}, {kind})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequirementLine):
            return NotImplemented
        return self.line == other.line and self.length == other.length

    def __hash__(self) -> int:
        return hash((self.line, self.length))


def find_newline(text: str, pos: int) -> Optional[Tuple[int, int]]:
    """
    Find the next line break at or after ``pos``.

    :return: the offset of the line break and its width
        (2 for ``\\r\\n``, 1 for ``\\n`` and ``\\r``) or None.
    """
    match = _NEWLINE.search(text, pos)
    if match is None:
        return None
    return match.start(), match.end() - match.start()


def _is_comment(text: str, start: int, end: int) -> bool:
    return text[start:end].lstrip().startswith("#")


def _is_blank(text: str, start: int, end: int) -> bool:
    return not text[start:end].strip()


def _is_continued(text: str, start: int, newline: int) -> bool:
    return newline > start and text[newline - 1] == "\\"


class RequirementsIterator:
    """
    Iterate over the logical lines of a requirements file.

    The iterator is single pass: once exhausted it stays exhausted.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.index = 0

    def __iter__(self) -> Iterator[RequirementLine]:
        return self

    def __next__(self) -> RequirementLine:
        text = self.text
        while self.index < len(text):
            start = self.index
            found = find_newline(text, start)
            if found is None:
                # the rest of the text is the last line
                self.index = len(text)
                if _is_comment(text, start, len(text)) or _is_blank(text, start, len(text)):
                    break
                return RequirementLine.borrowed(text, start, len(text))

            newline, width = found
            self.index = newline + width

            if _is_comment(text, start, newline):
                if _is_continued(text, start, newline):
                    # a commented line never starts a requirement, neither
                    # do the lines continuing it
                    self._join_continuation()
                continue

            if _is_blank(text, start, newline):
                continue

            if _is_continued(text, start, newline):
                return RequirementLine.joined(text[start:newline - 1] + self._join_continuation())

            return RequirementLine.borrowed(text, start, newline)

        raise StopIteration

    def _join_continuation(self) -> str:
        """
        Collect the lines following a continued line, up to and including
        the first line not ending in a backslash.
        """
        text = self.text
        fragments = []
        while self.index < len(text):
            start = self.index
            found = find_newline(text, start)
            if found is None:
                fragments.append(text[start:])
                self.index = len(text)
                break

            newline, width = found
            self.index = newline + width
            if _is_continued(text, start, newline):
                fragments.append(text[start:newline - 1])
            else:
                fragments.append(text[start:newline])
                break

        return "".join(fragments)


def iter_requirement_lines(text: str) -> Iterator[str]:
    """Yield the parseable part of each logical requirement line."""
    for line in RequirementsIterator(text):
        yield line.as_str()
