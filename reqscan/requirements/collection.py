# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""The parsed contents of a requirements file."""

from collections.abc import Sequence
from typing import Any, Callable, Iterator, Tuple, Union, overload

from packaging.requirements import Requirement

from reqscan.requirements.lines import RequirementsIterator

SpecifierParser = Callable[[str], Any]


class Requirements(Sequence):
    """
    Immutable, ordered collection of the requirements of a requirements file.

    Entries are kept in file order. By default every entry is a
    ``packaging.requirements.Requirement``.
    """

    def __init__(self, entries: Tuple[Any, ...] = ()) -> None:
        self._entries = tuple(entries)

    @classmethod
    def parse(cls, text: str, parser: SpecifierParser = Requirement) -> "Requirements":
        """
        Parse the text of a requirements file.

        :param text: the contents of the requirements file.
        :param parser: parses a single requirement specifier,
            ``packaging.requirements.Requirement`` by default.
        :return: all requirements of the file.
        :raises packaging.requirements.InvalidRequirement: for the first line that is
            not a valid requirement specifier (or whatever the given parser raises).
        """
        return cls(tuple(parser(line.as_str()) for line in RequirementsIterator(text)))

    from_str = parse

    @overload
    def __getitem__(self, index: int) -> Any:
        ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Any, ...]:
        ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Requirements):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Requirements({list(self._entries)!r})"
