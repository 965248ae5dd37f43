"""Per-type value formatters.

A registry maps a runtime type to a callable producing that value's string
form. Lookup tries the exact type first, then walks the MRO, so a formatter
registered for ``int`` does not shadow one registered for ``bool``.
"""

from __future__ import annotations

from typing import Any, Callable


class FormatterRegistry:
    """Immutable type -> formatter mapping."""

    def __init__(self, formatters: dict[type, Callable[[Any], str]] | None = None) -> None:
        self._formatters: dict[type, Callable[[Any], str]] = dict(formatters or {})

    def with_format(self, cls: type, formatter: Callable[[Any], str]) -> FormatterRegistry:
        """Return a new registry with ``formatter`` registered for ``cls``."""
        if not isinstance(cls, type):
            raise TypeError(f"Expected a type, got {cls!r}")
        if not callable(formatter):
            raise TypeError(f"Formatter for {cls.__name__} is not callable")
        updated = dict(self._formatters)
        updated[cls] = formatter
        return FormatterRegistry(updated)

    def formatter_for(self, value: Any) -> Callable[[Any], str] | None:
        """Find the formatter for a value, or None when only ``str`` applies."""
        exact = self._formatters.get(type(value))
        if exact is not None:
            return exact
        for cls in type(value).__mro__[1:]:
            found = self._formatters.get(cls)
            if found is not None:
                return found
        return None

    def format(self, value: Any) -> str:
        formatter = self.formatter_for(value)
        if formatter is None:
            return str(value)
        return formatter(value)

    def __contains__(self, cls: object) -> bool:
        return cls in self._formatters

    def __len__(self) -> int:
        return len(self._formatters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatterRegistry):
            return NotImplemented
        return self._formatters == other._formatters

    def __hash__(self) -> int:
        return hash(frozenset(self._formatters.items()))

    def __repr__(self) -> str:
        names = ", ".join(cls.__name__ for cls in self._formatters)
        return f"FormatterRegistry({names})"
