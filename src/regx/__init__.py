"""
RegX - Align lines of text into columns using regular expression capture groups.

Each capture group becomes a column; columns are padded to a common width
rounded up to the tab grid.
"""

from .models import GroupSettings, ParsedLine, Raw, Sections, describe
from .regularizer import (
    DEFAULT_TAB_WIDTH,
    MissingGroupSettingsError,
    Regularizer,
    regularize,
)

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_TAB_WIDTH",
    "GroupSettings",
    "MissingGroupSettingsError",
    "ParsedLine",
    "Raw",
    "Regularizer",
    "Sections",
    "describe",
    "regularize",
]
