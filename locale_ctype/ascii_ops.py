"""ASCII-domain classification and casing used by the fast path."""

from __future__ import annotations

from .const import ASCII_BLANK, ASCII_SPACE


def ascii_isspace(ordinal: int) -> bool:
    """Return whether an ASCII ordinal is space, \\f, \\n, \\r, \\t or \\v."""
    return ordinal in ASCII_SPACE


def ascii_isblank(ordinal: int) -> bool:
    """Return whether an ASCII ordinal is space or horizontal tab."""
    return ordinal in ASCII_BLANK


def ascii_toupper(ordinal: int) -> int:
    """Map a-z to A-Z; every other ordinal is returned unchanged."""
    if 0x61 <= ordinal <= 0x7A:
        return ordinal - 0x20
    return ordinal


def ascii_tolower(ordinal: int) -> int:
    """Map A-Z to a-z; every other ordinal is returned unchanged."""
    if 0x41 <= ordinal <= 0x5A:
        return ordinal + 0x20
    return ordinal
