"""Encoder -- entry sequence to a single delimited string."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .config import Configuration, LoopMode
from .control import control_sequences, substitute
from .entries import EndOfLine, Entry, Keyed, StartOfLine

logger = logging.getLogger(__name__)


def encode(config: Configuration, entries: Iterable[Entry]) -> str:
    """Encode entries into one string under ``config``.

    An empty sequence encodes as ``config.empty_value``. With
    ``unique_values_only`` the first repeated rendered value ends the
    encoding: it and everything after it are dropped.
    """
    entries = list(entries)
    if not entries:
        return config.empty_value

    table = control_sequences(config)
    parts: list[str] = []
    sep = ""
    first: str | None = None
    last: str | None = None
    rendered_count = 0
    seen: set[str] = set()

    for entry in entries:
        if isinstance(entry, EndOfLine):
            parts.append(config.line_end)
            sep = ""
            continue
        if isinstance(entry, StartOfLine):
            parts.append(config.line_start)
            sep = ""
            continue

        rendered = render_entry(config, entry, table)
        if config.trim_blanks and rendered == "":
            continue
        if config.unique_values_only:
            if rendered in seen:
                # TODO: confirm whether a repeat should be skipped instead of ending the encode
                logger.debug("Repeated value %r ends encoding", rendered)
                break
            seen.add(rendered)

        wrapped = config.wrap_before + rendered + config.wrap_after
        if first is None:
            first = wrapped
        last = wrapped
        rendered_count += 1
        parts.append(sep)
        parts.append(wrapped)
        sep = config.separator

    body = "".join(parts)

    if config.loop_mode is LoopMode.CLOSED:
        if first is not None and first != last:
            logger.debug("Closing loop with %r", first)
            body = body + sep + first
    elif config.loop_mode is LoopMode.OPEN:
        if rendered_count > 1 and first == last:
            tail = config.separator + last
            if body.endswith(tail):
                logger.debug("Opening loop, dropping trailing %r", last)
                body = body[: len(body) - len(tail)]

    return config.prefix + body + config.suffix


def render_entry(
    config: Configuration,
    entry: Entry,
    table: list[tuple[str, str]] | None = None,
) -> str:
    """Render a Plain or Keyed entry to its escaped, unwrapped form."""
    if table is None:
        table = control_sequences(config)
    text = ""
    if isinstance(entry, Keyed):
        text = substitute(entry.key, table) + config.key_value_separator
    value = substitute(value_text(config, entry.value), table)
    if config.trim_blanks:
        value = value.strip(" ")
    return text + value


def value_text(config: Configuration, value: Any) -> str:
    """String form of a raw value before any escaping."""
    if value is None:
        return config.null_representation if config.retain_nulls else config.empty_value
    text = config.formatters.format(value)
    if text == "":
        return config.empty_value
    return text
