"""sepstring -- configurable delimited-string encoding and decoding."""

from . import presets
from .builder import Builder, Decoder, Encoder
from .engine import (
    Configuration,
    DecodeResult,
    EndOfLine,
    Keyed,
    LoopMode,
    Plain,
    StartOfLine,
    encode,
    parse,
    parse_to_lines,
    parse_to_list,
    parse_to_map,
)

__all__ = [
    "Builder", "Encoder", "Decoder",
    "Configuration", "LoopMode", "DecodeResult",
    "Plain", "Keyed", "StartOfLine", "EndOfLine",
    "encode", "parse", "parse_to_list", "parse_to_lines", "parse_to_map",
    "presets",
]
