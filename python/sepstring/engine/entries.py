"""Value entries -- the items submitted for encoding.

An entry sequence is a plain list that mixes four variants: ``Plain`` and
``Keyed`` carry data, ``StartOfLine`` and ``EndOfLine`` mark row boundaries.
Markers are their own classes so no real value can ever be mistaken for one.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Plain:
    value: Any = None


@dataclass(frozen=True)
class Keyed:
    key: str
    value: Any = None


@dataclass(frozen=True)
class StartOfLine:
    pass


@dataclass(frozen=True)
class EndOfLine:
    pass


Entry = Union[Plain, Keyed, StartOfLine, EndOfLine]

START_OF_LINE = StartOfLine()
END_OF_LINE = EndOfLine()


def is_line_marker(entry: Entry) -> bool:
    return isinstance(entry, (StartOfLine, EndOfLine))


def plain_entries(values: Iterable[Any]) -> list[Entry]:
    """Wrap each value as a Plain entry."""
    return [Plain(v) for v in values]


def keyed_entries(mapping: Mapping[str, Any]) -> list[Entry]:
    """Wrap each mapping item as a Keyed entry, in mapping order."""
    return [Keyed(str(k), v) for k, v in mapping.items()]


def line_entries(values: Iterable[Any]) -> list[Entry]:
    """One row: start marker, the values, end marker."""
    return [START_OF_LINE, *plain_entries(values), END_OF_LINE]
