"""Tests for sepstring.engine.config -- Configuration, LoopMode, YAML loading."""

import dataclasses

import pytest

from sepstring.engine.config import Configuration, LoopMode
from sepstring.engine.formatters import FormatterRegistry


# --- defaults ---

def test_defaults():
    config = Configuration()
    assert config.separator == " "
    assert config.prefix == ""
    assert config.suffix == ""
    assert config.wrap_before == ""
    assert config.wrap_after == ""
    assert config.escape_char == ""
    assert config.key_value_separator == ""
    assert config.null_representation == "null"
    assert config.retain_nulls is False
    assert config.empty_value == ""
    assert config.loop_mode == LoopMode.NONE
    assert config.trim_blanks is False
    assert config.unique_values_only is False
    assert config.line_start == ""
    assert config.line_end == ""
    assert config.default_line_end == "\n"
    assert len(config.formatters) == 0


def test_derived_flags():
    config = Configuration()
    assert not config.has_escape
    assert not config.has_wrapping
    assert not config.has_prefix
    assert not config.has_suffix
    assert config.is_not_loop
    assert not config.is_closed_loop
    assert not config.is_open_loop

    config = Configuration(escape_char="\\", wrap_before="<", wrap_after=">", prefix="(", loop_mode=LoopMode.OPEN)
    assert config.has_escape
    assert config.has_wrapping
    assert not config.has_symmetric_wrapping
    assert config.has_prefix
    assert config.is_open_loop


def test_frozen():
    config = Configuration()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.separator = ","


def test_replace_returns_new_configuration():
    config = Configuration()
    changed = config.replace(separator=",")
    assert changed.separator == ","
    assert config.separator == " "


def test_equal_configurations_hash_equal():
    first = Configuration(separator=",", loop_mode=LoopMode.CLOSED)
    second = Configuration(separator=",", loop_mode=LoopMode.CLOSED)
    assert hash(first) == hash(second)
    assert hash(Configuration()) == hash(Configuration())
    assert {first: "commas"}[second] == "commas"
    assert len({first, second, Configuration()}) == 2


def test_configuration_with_formatters_is_hashable():
    registry = FormatterRegistry().with_format(int, hex)
    config = Configuration(formatters=registry)
    assert hash(config) == hash(Configuration(formatters=registry))
    assert config in {config}


# --- dict form ---

def test_to_dict():
    d = Configuration(loop_mode=LoopMode.CLOSED).to_dict()
    assert d["loop_mode"] == "closed"
    assert d["separator"] == " "
    assert "formatters" not in d


def test_from_dict_accepts_dashes():
    config = Configuration.from_dict({"wrap-before": "<", "wrap-after": ">", "trim-blanks": True})
    assert config.wrap_before == "<"
    assert config.wrap_after == ">"
    assert config.trim_blanks is True


def test_from_dict_none_string_becomes_empty():
    assert Configuration.from_dict({"escape_char": None}).escape_char == ""


def test_from_dict_unknown_key():
    with pytest.raises(ValueError, match="Unknown configuration key"):
        Configuration.from_dict({"colour": "red"})


def test_from_dict_bad_loop_mode():
    with pytest.raises(ValueError, match="Unknown loop mode"):
        Configuration.from_dict({"loop_mode": "sideways"})


def test_from_dict_wrong_bool_type():
    with pytest.raises(ValueError, match="Expected true/false"):
        Configuration.from_dict({"trim_blanks": "sometimes"})


def test_from_dict_wrong_string_type():
    with pytest.raises(ValueError, match="Expected a string"):
        Configuration.from_dict({"separator": 5})


# --- YAML ---

def test_from_yaml():
    text = 'separator: ","\nloop_mode: closed\ntrim-blanks: true\nescape_char: "\\\\"\n'
    config = Configuration.from_yaml(text)
    assert config.separator == ","
    assert config.loop_mode == LoopMode.CLOSED
    assert config.trim_blanks is True
    assert config.escape_char == "\\"


def test_from_yaml_empty_gives_defaults():
    assert Configuration.from_yaml("") == Configuration()


def test_from_yaml_not_a_mapping():
    with pytest.raises(ValueError, match="must be a mapping"):
        Configuration.from_yaml("- a\n- b\n")


def test_from_yaml_invalid():
    with pytest.raises(ValueError, match="Invalid configuration YAML"):
        Configuration.from_yaml("separator: [")


def test_yaml_round_trip():
    config = Configuration(
        separator=", ",
        wrap_before='"',
        wrap_after='"',
        escape_char="\\",
        line_end="\r\n",
        loop_mode=LoopMode.OPEN,
        unique_values_only=True,
    )
    assert Configuration.from_yaml(config.to_yaml()) == config
