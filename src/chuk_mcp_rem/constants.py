"""
Constants and enums for the rem conversion system.

No magic strings - use enums and module constants for constrained values.
"""

from enum import Enum


class Unit(str, Enum):
    """Length units the converter understands."""

    PX = "px"
    PT = "pt"
    REM = "rem"


class OutputMode(str, Enum):
    """
    Which declarations are emitted per property.

    PX_AND_REM emits the px fallback first so rem-aware engines
    override it (last declaration wins).
    """

    REM = "rem"  # rem line only
    PX_AND_REM = "px_and_rem"  # px fallback, then rem
    PX = "px"  # px fallback only


# Browser default root font size
DEFAULT_BASE_FONT_SIZE = 16.0

# 1pt = 4/3 px (CSS reference pixel at 96dpi)
PT_TO_PX_NUMERATOR = 4
PT_TO_PX_DENOMINATOR = 3

# Fractional digits kept when printing converted numbers
NUMBER_PRECISION = 10

# Properties whose values keep full precision (never rounded)
NO_ROUND_PROPERTIES: frozenset[str] = frozenset(
    {
        "font-size",
        "letter-spacing",
        "word-spacing",
    }
)

IMPORTANT_MARKER = "!important"


class ErrorMessages:
    """Standardized error messages."""

    PROFILE_NOT_FOUND = "Profile '{name}' not found."
    PROFILE_EXISTS = "Profile already exists in project: {name}"
    PROFILE_INVALID = "Library profile '{name}' does not validate; not copied."
    NO_PROJECT_PATH = "No project path configured"
    INVALID_BASE_FONT_SIZE = "Invalid base font size: {value!r}. Expected a positive px length."


class SuccessMessages:
    """Standardized success messages."""

    CONVERTED = "Converted '{property}' ({count} declaration(s))."
    PROFILE_COPIED = "Copied profile '{name}' to {path}."
