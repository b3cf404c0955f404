"""
Core alignment logic: split text into columns with a regular expression and
pad every column to a common, tab-grid rounded width.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from .models import GroupSettings, ParsedLine, Raw, Sections, describe
from .whitespace import pad_token, round_to_grid, trim_end, trim_start

logger = logging.getLogger(__name__)

DEFAULT_TAB_WIDTH = 4


class MissingGroupSettingsError(IndexError):
    """Raised when fewer group settings are given than the pattern has groups."""

    def __init__(self, group_count: int, settings_count: int):
        super().__init__(
            f"Pattern has {group_count} capture group(s) "
            f"but only {settings_count} group setting(s) were given"
        )
        self.group_count = group_count
        self.settings_count = settings_count


def parse_line(
    line: str, pattern: re.Pattern[str], group_settings: Sequence[GroupSettings]
) -> ParsedLine:
    """
    Split one line into column tokens using the first match of `pattern`.

    Groups that did not take part in the match produce no token, but the
    settings for later groups are still looked up by their group number.
    """
    if not line:
        return Raw(line)

    match = pattern.search(line)
    if match is None:
        return Raw(line)

    tokens = []
    for index in range(1, pattern.groups + 1):
        if match.start(index) == -1:
            continue

        token = match.group(index)
        settings = group_settings[index - 1]
        if settings.padding_before is not None:
            token = trim_start(token)
        if settings.padding_after is not None:
            token = trim_end(token)
        before = " " * (settings.padding_before or 0)
        after = " " * (settings.padding_after or 0)
        tokens.append(before + token + after)

    return Sections(tuple(tokens))


def max_column_width(parsed_lines: Sequence[ParsedLine], index: int) -> int:
    """Longest token at `index` among the lines that have that many columns."""
    return max(
        (
            len(line.tokens[index])
            for line in parsed_lines
            if isinstance(line, Sections) and line.column_count > index
        ),
        default=0,
    )


def column_widths(parsed_lines: Sequence[ParsedLine], tab_width: int) -> list[int]:
    """Compute the final, grid-rounded width of every column."""
    column_count = max(
        (line.column_count for line in parsed_lines if isinstance(line, Sections)),
        default=0,
    )
    return [
        round_to_grid(max_column_width(parsed_lines, index), tab_width)
        for index in range(column_count)
    ]


def pad_columns(
    parsed_lines: Sequence[ParsedLine], widths: Sequence[int]
) -> list[ParsedLine]:
    """Pad (or truncate) every token to its column width. Raw lines pass through."""
    padded: list[ParsedLine] = []
    for line in parsed_lines:
        if isinstance(line, Sections):
            line = Sections(
                tuple(pad_token(token, width) for token, width in zip(line.tokens, widths))
            )
        padded.append(line)
    return padded


def join_lines(parsed_lines: Sequence[ParsedLine]) -> str:
    """Reassemble parsed lines into text, one output line per input line."""
    result = []
    for line in parsed_lines:
        if isinstance(line, Sections):
            result.append(trim_end("".join(line.tokens)))
        else:
            result.append(line.content)
    return "\n".join(result)


@dataclass(frozen=True)
class Regularizer:
    """
    Aligns text into columns defined by the capture groups of a pattern.

    Args:
        tab_width: Column widths are rounded up to multiples of this value.
            Non-positive values fall back to DEFAULT_TAB_WIDTH.
    """

    tab_width: int = DEFAULT_TAB_WIDTH

    @property
    def effective_tab_width(self) -> int:
        return self.tab_width if self.tab_width > 0 else DEFAULT_TAB_WIDTH

    def regularize(
        self,
        text: str,
        group_settings: Sequence[GroupSettings],
        pattern: re.Pattern[str] | str,
    ) -> str:
        """
        Align `text` on the capture groups of `pattern`.

        Args:
            text: Input text, lines separated by '\\n'
            group_settings: One entry per capture group, in group order
            pattern: Compiled pattern, or a pattern string to compile

        Returns:
            The aligned text, with the same number of lines as the input

        Raises:
            MissingGroupSettingsError: If there are fewer settings than groups
            re.error: If `pattern` is a string that does not compile
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        if len(group_settings) < pattern.groups:
            raise MissingGroupSettingsError(pattern.groups, len(group_settings))

        lines = text.split("\n")
        parsed_lines = [parse_line(line, pattern, group_settings) for line in lines]
        widths = column_widths(parsed_lines, self.effective_tab_width)
        logger.debug(
            "Aligning %d line(s) into %d column(s), widths %s",
            len(lines),
            len(widths),
            widths,
        )

        padded = pad_columns(parsed_lines, widths)
        if logger.isEnabledFor(logging.DEBUG):
            for line in padded:
                logger.debug("%s", describe(line))

        return join_lines(padded)


def regularize(
    text: str,
    group_settings: Sequence[GroupSettings],
    pattern: re.Pattern[str] | str,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> str:
    """Align `text` with a one-off Regularizer. See Regularizer.regularize."""
    return Regularizer(tab_width).regularize(text, group_settings, pattern)
