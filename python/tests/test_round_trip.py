"""Encode/decode symmetry across configurations."""

import pytest

import sepstring
from sepstring import Configuration, LoopMode
from sepstring.engine import line_entries, plain_entries


CONFIGS = [
    Configuration(separator=","),
    Configuration(separator=", ", escape_char="\\"),
    Configuration(separator=",", wrap_before='"', wrap_after='"', escape_char="\\"),
    Configuration(separator=";", wrap_before="[", wrap_after="]", prefix="{", suffix="}", escape_char="^"),
    Configuration(separator="", wrap_before="<td>", wrap_after="</td>"),
    Configuration(separator="|", key_value_separator="=", escape_char="\\\\"),
]


@pytest.mark.parametrize("config", CONFIGS)
def test_plain_values_round_trip(config):
    """Decoding gives back exactly the values; with no separator the end of
    text adds one trailing empty value after the last closing wrap."""
    values = ["alpha", "beta gamma", "delta"]
    encoded = sepstring.encode(config, plain_entries(values))
    expected = values + [""] if config.separator == "" else values
    assert sepstring.parse_to_list(config, encoded) == expected


@pytest.mark.parametrize("config", CONFIGS)
def test_empty_sequence_encodes_empty_value(config):
    assert sepstring.encode(config, []) == config.empty_value


def test_escaped_values_round_trip():
    config = Configuration(separator=",", wrap_before='"', wrap_after='"', escape_char="\\", key_value_separator="=")
    values = ["a,b", 'q"uote', "es\\cape", "k=v", "  padded  "]
    encoded = sepstring.encode(config, plain_entries(values))
    assert sepstring.parse_to_list(config, encoded) == values


def test_escape_without_quotes_round_trip():
    config = Configuration(separator=",", escape_char="\\")
    encoded = sepstring.encode(config, plain_entries(["a,b", "c"]))
    assert encoded == "a\\,b,c"
    assert sepstring.parse_to_list(config, encoded) == ["a,b", "c"]


def test_null_representation_decodes_as_text():
    config = Configuration(separator=",", retain_nulls=True, null_representation="[NULL]")
    encoded = sepstring.encode(config, plain_entries(["a", None]))
    assert encoded == "a,[NULL]"
    assert sepstring.parse_to_list(config, encoded) == ["a", "[NULL]"]


def test_rows_round_trip():
    config = Configuration(separator=",", line_end="\n")
    rows = [["a", "b"], ["c", "d"]]
    entries = line_entries(rows[0]) + line_entries(rows[1])
    result = sepstring.parse(config, sepstring.encode(config, entries))
    assert result.lines == rows
    assert result.values == ["a", "b", "c", "d", ""]


def test_closed_loop_round_trip():
    config = Configuration(separator=",", loop_mode=LoopMode.CLOSED)
    encoded = sepstring.encode(config, plain_entries(["1 2", "3 4", "5 6"]))
    assert sepstring.parse_to_list(config, encoded) == ["1 2", "3 4", "5 6", "1 2"]


def test_map_round_trip():
    config = Configuration(key_value_separator=":")
    encoded = sepstring.encode(config, [sepstring.Keyed("x", 1), sepstring.Keyed("y", "two")])
    assert sepstring.parse_to_map(config, encoded) == {"x": "1", "y": "two"}
