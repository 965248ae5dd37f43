"""Decoder -- a delimited string back to flat values and rows.

A single left-to-right scan. At each position the rules below are tried in
order and the first match wins:

1. an escaped character is taken verbatim
2. the escape sequence starts an escape
3. the line-start marker is skipped (outside values and quotes)
4. ``wrap_before`` opens (or, when symmetric, toggles) quoting
5. ``wrap_after`` closes quoting; with no separator it also ends the value
6. the separator ends the value unless quoted
7. the line-end sequence ends the value and the row
8. spaces count only inside a value
9. anything else is value content

Malformed input never raises; an unterminated quote or escape simply runs
to the end of the text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import Configuration

logger = logging.getLogger(__name__)


@dataclass
class DecodeResult:
    values: list[str] = field(default_factory=list)
    lines: list[list[str]] = field(default_factory=list)


class _Collector:
    """Receives finalized values, applying uniqueness and row grouping."""

    def __init__(self, config: Configuration, result: DecodeResult) -> None:
        self.config = config
        self.result = result
        self.row: list[str] = []
        self.seen: set[str] = set()

    def add(self, value: str, quoted: bool, into_row: bool = True) -> None:
        if self.config.trim_blanks and not quoted:
            value = value.rstrip(" ")
        if self.config.unique_values_only:
            if value in self.seen:
                return
            self.seen.add(value)
        self.result.values.append(value)
        if into_row:
            self.row.append(value)

    def close_row(self) -> None:
        self.result.lines.append(self.row)
        self.row = []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse(config: Configuration, text: str | None) -> DecodeResult:
    """Decode ``text`` into flat values and rows under ``config``."""
    result = DecodeResult()
    if not text:
        return result

    body = strip_affixes(config, text)
    collector = _Collector(config, result)

    esc = config.escape_char
    sep = config.separator
    line_start = config.line_start
    line_end = config.line_end
    quote_start = config.wrap_before
    quote_end = config.wrap_after
    symmetric = config.has_symmetric_wrapping

    buf: list[str] = []
    in_value = False
    in_quotes = False
    in_escape = False
    quoted = False

    def finish_value() -> None:
        nonlocal buf, in_value, quoted
        collector.add("".join(buf), quoted)
        buf = []
        in_value = False
        quoted = False

    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if in_escape:
            buf.append(ch)
            in_value = True
            in_escape = False
            i += 1
        elif esc and body.startswith(esc, i):
            in_escape = True
            i += len(esc)
        elif line_start and not in_value and not in_quotes and body.startswith(line_start, i):
            i += len(line_start)
        elif quote_start and body.startswith(quote_start, i):
            if symmetric:
                in_quotes = not in_quotes
            elif not in_quotes:
                in_quotes = True
            if in_quotes:
                quoted = True
            elif not sep:
                finish_value()
            i += len(quote_start)
        elif quote_end and body.startswith(quote_end, i):
            if symmetric:
                in_quotes = not in_quotes
            elif in_quotes:
                in_quotes = False
            if not sep:
                finish_value()
            i += len(quote_end)
        elif sep and body.startswith(sep, i):
            if in_quotes:
                buf.append(sep)
            else:
                # also covers a repeated separator, which yields an empty value
                finish_value()
            i += len(sep)
        elif line_end and not in_quotes and body.startswith(line_end, i):
            # without a separator the closing wrap already ended the value
            if sep or in_value or buf:
                finish_value()
            collector.close_row()
            i += len(line_end)
        elif ch == " ":
            if in_value or in_quotes:
                buf.append(ch)
                in_value = True
            i += 1
        else:
            in_value = True
            buf.append(ch)
            i += 1

    if in_quotes or in_escape:
        logger.debug("Unterminated %s at end of input", "quote" if in_quotes else "escape")

    # the trailing value always counts, so every decoded string has one
    tail = "".join(buf)
    into_row = bool(
        tail
        or in_value
        or (sep and collector.row)
        or (not collector.row and not result.lines)
    )
    had_row = bool(collector.row)
    collector.add(tail, quoted, into_row=into_row)
    # text ending right after a line end leaves no further row to close
    if into_row or had_row:
        collector.close_row()
    return result


def parse_to_list(config: Configuration, text: str | None) -> list[str]:
    return parse(config, text).values


def parse_to_lines(config: Configuration, text: str | None) -> list[list[str]]:
    return parse(config, text).lines


def parse_to_map(config: Configuration, text: str | None) -> dict[str, str]:
    """Decode ``text`` and split each value into a key and a value.

    A value with one ``key_value_separator`` gives a pair, a value without
    one maps to ``""``, anything else is dropped. Trailing empty parts are
    ignored when counting, so ``"a=="`` maps ``a`` to ``""`` and a bare
    ``"="`` is dropped. Later keys overwrite earlier ones.
    """
    mapping: dict[str, str] = {}
    if not text:
        return mapping
    kv_sep = config.key_value_separator
    for value in parse(config, text).values:
        if not kv_sep:
            mapping[value] = ""
            continue
        parts = value.split(kv_sep)
        if value:
            while parts and parts[-1] == "":
                parts.pop()
        if len(parts) == 2:
            mapping[parts[0]] = parts[1]
        elif len(parts) == 1:
            mapping[parts[0]] = ""
    return mapping


def strip_affixes(config: Configuration, text: str) -> str:
    """Remove a literal leading prefix and trailing suffix."""
    body = text
    if config.has_prefix and body.startswith(config.prefix):
        body = body[len(config.prefix):]
    if config.has_suffix and body.endswith(config.suffix):
        body = body[: len(body) - len(config.suffix)]
    if body is not text:
        logger.debug("Stripped prefix/suffix, %d of %d chars remain", len(body), len(text))
    return body
