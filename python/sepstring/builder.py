"""Fluent configuration builder and the Encoder / Decoder facades.

``Builder`` is an immutable value: every ``with_*`` call returns a new
builder, so a partially configured builder can be shared and extended
safely. ``Encoder`` collects entries and renders them; ``Decoder`` turns
strings back into values. Both hold a finished Configuration.

Usage::

    encoder = Builder.start().separated_by(",").with_closed_loop().encoder()
    encoder.add_all(["A", "B", "C"])
    encoder.encode()          # "A,B,C,A"
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from typing import Any, Callable

from .engine import (
    Configuration,
    DecodeResult,
    Entry,
    Keyed,
    LoopMode,
    Plain,
    encode,
    keyed_entries,
    line_entries,
    parse,
    parse_to_lines,
    parse_to_list,
    parse_to_map,
    plain_entries,
)


class Builder:
    """Immutable fluent builder for a Configuration."""

    def __init__(self, config: Configuration | None = None) -> None:
        self._config = config if config is not None else Configuration()

    @classmethod
    def start(cls) -> Builder:
        return cls()

    @classmethod
    def from_yaml(cls, text: str) -> Builder:
        return cls(Configuration.from_yaml(text))

    @property
    def config(self) -> Configuration:
        return self._config

    def _with(self, **changes: Any) -> Builder:
        return Builder(self._config.replace(**changes))

    # --- separators and affixes ---

    def separated_by(self, separator: str | None) -> Builder:
        """Set the separator; None keeps the current one, "" means none."""
        if separator is None:
            return self
        return self._with(separator=separator)

    def with_prefix(self, prefix: str) -> Builder:
        return self._with(prefix=prefix)

    def with_suffix(self, suffix: str) -> Builder:
        return self._with(suffix=suffix)

    def with_key_value_separator(self, separator: str) -> Builder:
        return self._with(key_value_separator=separator)

    # --- quoting and escaping ---

    def with_wrapping(self, before: str, after: str | None = None) -> Builder:
        """Wrap each term; ``after`` defaults to ``before``."""
        return self._with(wrap_before=before, wrap_after=before if after is None else after)

    def with_this_before_each_term(self, before: str) -> Builder:
        return self._with(wrap_before=before)

    def with_this_after_each_term(self, after: str) -> Builder:
        return self._with(wrap_after=after)

    def with_escape_char(self, escape: str) -> Builder:
        return self._with(escape_char=escape)

    # --- nulls and empties ---

    def with_nulls_as(self, representation: str) -> Builder:
        """Render None as ``representation`` (implies retaining nulls)."""
        return self._with(null_representation=representation, retain_nulls=True)

    def with_nulls_retained(self, retain: bool = True) -> Builder:
        return self._with(retain_nulls=retain)

    def use_when_empty(self, empty_value: str) -> Builder:
        return self._with(empty_value=empty_value)

    # --- loops ---

    def with_closed_loop(self) -> Builder:
        return self._with(loop_mode=LoopMode.CLOSED)

    def with_open_loop(self) -> Builder:
        return self._with(loop_mode=LoopMode.OPEN)

    def with_no_loop(self) -> Builder:
        return self._with(loop_mode=LoopMode.NONE)

    # --- filtering ---

    def with_blanks_trimmed(self) -> Builder:
        return self._with(trim_blanks=True)

    def with_only_unique_values(self) -> Builder:
        return self._with(unique_values_only=True)

    # --- lines ---

    def with_line_start(self, sequence: str) -> Builder:
        return self._with(line_start=sequence)

    def with_line_end(self, sequence: str) -> Builder:
        return self._with(line_end=sequence)

    def with_default_line_end(self, sequence: str) -> Builder:
        return self._with(default_line_end=sequence)

    # --- formatting ---

    def set_format_for(self, cls: type, formatter: Callable[[Any], str]) -> Builder:
        """Use ``formatter`` instead of ``str`` for values of type ``cls``."""
        return self._with(formatters=self._config.formatters.with_format(cls, formatter))

    # --- results ---

    def build(self) -> Configuration:
        return self._config

    def encoder(self) -> Encoder:
        return Encoder(self._config)

    def decoder(self) -> Decoder:
        return Decoder(self._config)


class Encoder:
    """Collects entries and encodes them with a fixed Configuration.

    Adding entries and encoding are serialized per instance.
    """

    def __init__(self, config: Configuration | None = None, entries: Iterable[Entry] | None = None) -> None:
        self._config = config if config is not None else Configuration()
        self._entries: list[Entry] = list(entries or [])
        self._lock = threading.Lock()

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def entries(self) -> list[Entry]:
        with self._lock:
            return list(self._entries)

    # --- adding ---

    def add(self, value: Any) -> Encoder:
        with self._lock:
            self._entries.append(Plain(value))
        return self

    def add_pair(self, key: str, value: Any) -> Encoder:
        with self._lock:
            self._entries.append(Keyed(key, value))
        return self

    def add_all(
        self,
        values: Iterable[Any],
        processor: Callable[[Any], str] | None = None,
    ) -> Encoder:
        """Add each value; ``processor`` maps a value to its text first."""
        if processor is not None:
            values = [processor(value) for value in values]
        with self._lock:
            self._entries.extend(plain_entries(values))
        return self

    def add_map(self, mapping: Mapping[str, Any]) -> Encoder:
        with self._lock:
            self._entries.extend(keyed_entries(mapping))
        return self

    def add_line(self, *values: Any) -> Encoder:
        """Add one row; with no values, an empty row.

        The first row added without a configured line end switches the
        configuration to its ``default_line_end``.
        """
        with self._lock:
            if self._config.line_end == "":
                self._config = self._config.replace(line_end=self._config.default_line_end)
            self._entries.extend(line_entries(values))
        return self

    def insert(self, index: int, value: Any) -> Encoder:
        with self._lock:
            self._entries.insert(index, Plain(value))
        return self

    def insert_all(self, index: int, values: Iterable[Any]) -> Encoder:
        with self._lock:
            self._entries[index:index] = plain_entries(values)
        return self

    # --- removing ---

    def remove(self, index: int) -> Encoder:
        """Remove the entry at ``index``; out of range does nothing."""
        with self._lock:
            if -len(self._entries) <= index < len(self._entries):
                del self._entries[index]
        return self

    def remove_all(self, values: Iterable[Any]) -> Encoder:
        """Remove every plain entry whose value matches one of ``values``.

        None matches "" (and "" matches None).
        """
        targets = {_match_key(v) for v in values}
        with self._lock:
            self._entries = [
                e for e in self._entries
                if not (isinstance(e, Plain) and _match_key(e.value) in targets)
            ]
        return self

    def clear(self) -> Encoder:
        with self._lock:
            self._entries.clear()
        return self

    # --- state ---

    def is_empty(self) -> bool:
        """True when no value entries remain (line markers do not count)."""
        with self._lock:
            return not any(isinstance(e, (Plain, Keyed)) for e in self._entries)

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # --- encoding ---

    def encode(self, *values: Any) -> str:
        """Encode the collected entries, or just ``values`` when given.

        Encoding ``values`` leaves the collected entries untouched.
        """
        if values:
            return encode(self._config, plain_entries(values))
        with self._lock:
            return encode(self._config, self._entries)

    def __str__(self) -> str:
        return self.encode()

    def builder(self) -> Builder:
        return Builder(self._config)

    def decoder(self) -> Decoder:
        return Decoder(self._config)


class Decoder:
    """Decodes strings with a fixed Configuration."""

    def __init__(self, config: Configuration | None = None) -> None:
        self._config = config if config is not None else Configuration()

    @property
    def config(self) -> Configuration:
        return self._config

    def parse(self, text: str | None) -> DecodeResult:
        return parse(self._config, text)

    def decode(self, text: str | None) -> list[str]:
        return parse_to_list(self._config, text)

    def decode_to_lines(self, text: str | None) -> list[list[str]]:
        return parse_to_lines(self._config, text)

    def decode_to_map(self, text: str | None) -> dict[str, str]:
        return parse_to_map(self._config, text)

    def builder(self) -> Builder:
        return Builder(self._config)

    def encoder(self) -> Encoder:
        return Encoder(self._config)


def _match_key(value: Any) -> str:
    return "" if value is None else str(value)
