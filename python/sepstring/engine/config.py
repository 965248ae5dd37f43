"""Configuration -- the read-only bag of formatting rules.

A Configuration is built once (usually through :class:`sepstring.Builder`)
and handed to ``encode`` / ``parse``. It is frozen; changing a rule means
creating a new Configuration with :meth:`Configuration.replace`.

Configurations can also be loaded from YAML::

    separator: ", "
    wrap_before: '"'
    wrap_after: '"'
    escape_char: "\\\\"
    loop_mode: closed
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import yaml

from .formatters import FormatterRegistry

logger = logging.getLogger(__name__)


class LoopMode(Enum):
    NONE = "none"
    CLOSED = "closed"
    OPEN = "open"


_BOOL_FIELDS = ("retain_nulls", "trim_blanks", "unique_values_only")


@dataclass(frozen=True)
class Configuration:
    separator: str = " "
    prefix: str = ""
    suffix: str = ""
    wrap_before: str = ""
    wrap_after: str = ""
    escape_char: str = ""
    key_value_separator: str = ""
    null_representation: str = "null"
    retain_nulls: bool = False
    empty_value: str = ""
    loop_mode: LoopMode = LoopMode.NONE
    trim_blanks: bool = False
    unique_values_only: bool = False
    line_start: str = ""
    line_end: str = ""
    default_line_end: str = "\n"
    formatters: FormatterRegistry = field(default_factory=FormatterRegistry)

    # ------------------------------------------------------------------
    # Derived flags
    # ------------------------------------------------------------------

    @property
    def has_escape(self) -> bool:
        return self.escape_char != ""

    @property
    def has_wrapping(self) -> bool:
        return self.wrap_before != "" or self.wrap_after != ""

    @property
    def has_symmetric_wrapping(self) -> bool:
        return self.wrap_before == self.wrap_after

    @property
    def has_prefix(self) -> bool:
        return self.prefix != ""

    @property
    def has_suffix(self) -> bool:
        return self.suffix != ""

    @property
    def is_closed_loop(self) -> bool:
        return self.loop_mode is LoopMode.CLOSED

    @property
    def is_open_loop(self) -> bool:
        return self.loop_mode is LoopMode.OPEN

    @property
    def is_not_loop(self) -> bool:
        return self.loop_mode is LoopMode.NONE

    def replace(self, **changes: Any) -> Configuration:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    # ------------------------------------------------------------------
    # Dict / YAML form
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize every field except the formatters."""
        d: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            if f.name == "formatters":
                continue
            value = getattr(self, f.name)
            d[f.name] = value.value if isinstance(value, LoopMode) else value
        return d

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Configuration:
        """Build a Configuration from a plain mapping.

        Keys are field names; dashes are accepted in place of underscores.
        Raises ValueError for unknown keys, wrong value types or an unknown
        loop mode.
        """
        known = {f.name for f in dataclasses.fields(cls)} - {"formatters"}
        kwargs: dict[str, Any] = {}
        for raw_key, value in d.items():
            key = str(raw_key).replace("-", "_")
            if key not in known:
                raise ValueError(f"Unknown configuration key: '{raw_key}'")
            if key == "loop_mode":
                kwargs[key] = _parse_loop_mode(value)
            elif key in _BOOL_FIELDS:
                if not isinstance(value, bool):
                    raise ValueError(f"Expected true/false for '{raw_key}', got {value!r}")
                kwargs[key] = value
            else:
                if value is None:
                    value = ""
                if not isinstance(value, str):
                    raise ValueError(f"Expected a string for '{raw_key}', got {value!r}")
                kwargs[key] = value
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, text: str) -> Configuration:
        """Build a Configuration from a YAML mapping."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid configuration YAML: {exc}") from exc
        if data is None:
            logger.debug("Empty configuration YAML, using defaults")
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Configuration YAML must be a mapping")
        return cls.from_dict(data)


def _parse_loop_mode(value: Any) -> LoopMode:
    if isinstance(value, LoopMode):
        return value
    if value is None:
        return LoopMode.NONE
    try:
        return LoopMode(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown loop mode: '{value}'") from None
