"""
Whitespace trimming and padding helpers used by the regularizer.
"""

from __future__ import annotations

WHITESPACE = " \t\n"


def trim_start(text: str) -> str:
    """Remove leading spaces, tabs and newlines."""
    return text.lstrip(WHITESPACE)


def trim_end(text: str) -> str:
    """Remove trailing spaces, tabs and newlines."""
    return text.rstrip(WHITESPACE)


def pad_token(token: str, width: int) -> str:
    """
    Right-pad a token with spaces to exactly `width` characters.

    Tokens longer than `width` are cut down to `width`.
    """
    return token[:width].ljust(width)


def round_to_grid(width: int, tab_width: int) -> int:
    """Round a column width up to the next multiple of `tab_width`."""
    if width % tab_width == 0:
        return width
    return (width // tab_width + 1) * tab_width
