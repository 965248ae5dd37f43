"""Control-sequence table and substitution.

Every configured literal with structural meaning gets an escaped
replacement. The escape sequence itself always comes first: escaping it
after anything else would double the escapes that were just inserted.
"""

from __future__ import annotations

from .config import Configuration


def control_sequences(config: Configuration) -> list[tuple[str, str]]:
    """Return the ordered (literal, replacement) pairs for a configuration.

    Empty literals are skipped and a repeated literal keeps its first
    position.
    """
    esc = config.escape_char
    candidates = [
        esc,
        config.separator,
        config.key_value_separator,
        config.prefix,
        config.suffix,
        config.empty_value,
        config.wrap_after,
        config.wrap_before,
    ]
    table: list[tuple[str, str]] = []
    seen: set[str] = set()
    for literal in candidates:
        if not literal or literal in seen:
            continue
        seen.add(literal)
        table.append((literal, esc + literal))
    return table


def substitute(text: str, table: list[tuple[str, str]]) -> str:
    """Apply each replacement of the table in order."""
    for literal, replacement in table:
        text = text.replace(literal, replacement)
    return text
