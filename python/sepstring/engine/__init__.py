"""sepstring.engine -- the encode/decode core.

Pure functions over a frozen Configuration; nothing here keeps state
between calls.
"""

from .config import Configuration, LoopMode
from .control import control_sequences, substitute
from .decoder import DecodeResult, parse, parse_to_lines, parse_to_list, parse_to_map
from .encoder import encode, render_entry, value_text
from .entries import (
    END_OF_LINE,
    START_OF_LINE,
    EndOfLine,
    Entry,
    Keyed,
    Plain,
    StartOfLine,
    is_line_marker,
    keyed_entries,
    line_entries,
    plain_entries,
)
from .formatters import FormatterRegistry

__all__ = [
    "Configuration",
    "LoopMode",
    "FormatterRegistry",
    "control_sequences",
    "substitute",
    "encode",
    "render_entry",
    "value_text",
    "DecodeResult",
    "parse",
    "parse_to_list",
    "parse_to_lines",
    "parse_to_map",
    "Entry",
    "Plain",
    "Keyed",
    "StartOfLine",
    "EndOfLine",
    "START_OF_LINE",
    "END_OF_LINE",
    "is_line_marker",
    "plain_entries",
    "keyed_entries",
    "line_entries",
]
