"""
Data model for the regularizer: per-group settings and parsed lines.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GroupSettings:
    """
    Trim/pad configuration for one capture group.

    When `padding_before` is set, leading whitespace of the captured text is
    trimmed and that many spaces are prepended. `padding_after` does the same
    for trailing whitespace. `None` leaves that side of the token untouched.
    """

    padding_before: int | None = None
    padding_after: int | None = None

    def __post_init__(self) -> None:
        for name in ("padding_before", "padding_after"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @classmethod
    def parse(cls, text: str) -> GroupSettings:
        """
        Parse the `BEFORE:AFTER` form, e.g. `":1"`, `"0:1"` or `"2:"`.

        An empty side means the padding is absent. A bare number is taken
        as the trailing padding.
        """
        before, sep, after = text.partition(":")
        if not sep:
            before, after = "", before
        try:
            return cls(
                padding_before=_parse_padding(before),
                padding_after=_parse_padding(after),
            )
        except ValueError as exc:
            raise ValueError(f"Invalid group settings {text!r}: {exc}") from exc


def _parse_padding(value: str) -> int | None:
    value = value.strip()
    if not value:
        return None
    return int(value)


@dataclass(frozen=True)
class Raw:
    """A line left out of alignment (empty, or the pattern did not match)."""

    content: str


@dataclass(frozen=True)
class Sections:
    """A matched line split into one token per participating capture group."""

    tokens: tuple[str, ...]

    @property
    def column_count(self) -> int:
        return len(self.tokens)


ParsedLine = Raw | Sections


def describe(line: ParsedLine) -> str:
    """Render a parsed line for debugging, columns separated by `|`."""
    if isinstance(line, Raw):
        return line.content
    return "|".join(line.tokens)
