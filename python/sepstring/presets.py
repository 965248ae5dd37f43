"""Ready-made builders for common layouts.

Each preset returns a :class:`Builder`, so it can be refined further::

    presets.csv().with_closed_loop().encoder()
"""

from __future__ import annotations

from typing import Callable

from .builder import Builder


def start() -> Builder:
    return Builder.start()


def for_separator(separator: str) -> Builder:
    return Builder().separated_by(separator)


def starts_with(prefix: str) -> Builder:
    return Builder().with_prefix(prefix)


def by_spaces() -> Builder:
    return for_separator(" ")


def by_commas() -> Builder:
    return for_separator(",")


def by_comma_space() -> Builder:
    return for_separator(", ")


def by_tabs() -> Builder:
    return for_separator("\t")


def by_lines() -> Builder:
    return for_separator("\n")


def by_commas_with_quoted_terms_and_backslash_escape() -> Builder:
    return by_commas().with_wrapping('"').with_escape_char("\\")


def by_commas_with_quoted_terms_and_double_backslash_escape() -> Builder:
    """Like the backslash variant, but the escape sequence is two backslashes."""
    return by_commas().with_wrapping('"').with_escape_char("\\\\")


# Long-form names for the simple separators.

def space_separated() -> Builder:
    return by_spaces()


def comma_separated() -> Builder:
    return by_commas()


def tab_separated() -> Builder:
    return by_tabs()


def line_separated() -> Builder:
    return by_lines()


def csv() -> Builder:
    """Comma separated, double-quoted terms, backslash escape, ``=`` for pairs."""
    return by_commas_with_quoted_terms_and_backslash_escape().with_key_value_separator("=")


def tsv() -> Builder:
    """Tab separated, double-quoted terms, backslash escape, ``=`` for pairs."""
    return by_tabs().with_wrapping('"').with_escape_char("\\").with_key_value_separator("=")


def html_ordered_list() -> Builder:
    return (
        by_lines()
        .with_wrapping("<li>", "</li>")
        .with_prefix("<ol>\n")
        .with_suffix("\n</ol>\n")
    )


def html_unordered_list() -> Builder:
    return (
        by_lines()
        .with_wrapping("<li>", "</li>")
        .with_prefix("<ul>\n")
        .with_suffix("\n</ul>\n")
    )


def html_table() -> Builder:
    """One ``<tr>`` per row added with ``add_line``, one ``<td>`` per value."""
    return (
        for_separator("")
        .with_line_start("<tr>")
        .with_line_end("</tr>\n")
        .with_wrapping("<td>", "</td>")
        .with_prefix("<table>\n")
        .with_suffix("</table>\n")
    )


_PRESETS: dict[str, Callable[[], Builder]] = {
    "spaces": by_spaces,
    "commas": by_commas,
    "comma-space": by_comma_space,
    "tabs": by_tabs,
    "lines": by_lines,
    "space-separated": space_separated,
    "comma-separated": comma_separated,
    "tab-separated": tab_separated,
    "line-separated": line_separated,
    "quoted-commas": by_commas_with_quoted_terms_and_backslash_escape,
    "quoted-commas-double-backslash": by_commas_with_quoted_terms_and_double_backslash_escape,
    "csv": csv,
    "tsv": tsv,
    "html-ordered-list": html_ordered_list,
    "html-unordered-list": html_unordered_list,
    "html-table": html_table,
}


def named(name: str) -> Builder:
    """Look up a preset by name (``csv``, ``tsv``, ``html-table``, ...).

    Raises KeyError for an unknown name.
    """
    factory = _PRESETS.get(name.replace("_", "-").lower())
    if factory is None:
        raise KeyError(f"Unknown preset: '{name}'")
    return factory()


def preset_names() -> list[str]:
    return sorted(_PRESETS)
