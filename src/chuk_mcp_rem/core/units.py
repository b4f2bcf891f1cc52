"""
Unit arithmetic - rounding, px/pt to rem conversion, number formatting.

Rounding always happens in px space; rem results are never rounded,
only trimmed for printing.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from chuk_mcp_rem.constants import (
    NUMBER_PRECISION,
    PT_TO_PX_DENOMINATOR,
    PT_TO_PX_NUMERATOR,
    Unit,
)


def round_half_away(magnitude: float) -> float:
    """
    Snap to the nearest integer, halves away from zero.

    20.5 -> 21, -20.5 -> -21 (unlike the built-in round(), which
    rounds halves to even). Works on the exact binary value, so
    0.49999999999999994 stays 0. Whole and non-finite input is returned as is.
    """
    if not math.isfinite(magnitude) or float(magnitude).is_integer():
        return magnitude
    return float(Decimal(magnitude).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def to_px(magnitude: float, unit: Unit) -> float:
    """Convert a px or pt magnitude to px."""
    if unit == Unit.PT:
        return magnitude * PT_TO_PX_NUMERATOR / PT_TO_PX_DENOMINATOR
    if unit == Unit.PX:
        return magnitude
    raise ValueError(f"Cannot convert {unit.value} to px")


def to_rem(magnitude: float, unit: Unit, base_font_size: float) -> float:
    """
    Convert a px or pt magnitude to rem.

    Args:
        magnitude: The numeric value
        unit: Unit.PX or Unit.PT
        base_font_size: Root font size in px (must be positive)

    Returns:
        The rem magnitude, unrounded
    """
    return to_px(magnitude, unit) / base_font_size


def format_number(value: float) -> str:
    """
    Print a number the way CSS authors write it.

    No leading '+', no trailing zeros, no trailing '.0', no '-0'.
    """
    text = f"{value:.{NUMBER_PRECISION}f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def format_length(value: float, unit: Unit) -> str:
    """Print a length; zero is printed without a unit."""
    number = format_number(value)
    if number == "0":
        return "0"
    return f"{number}{unit.value}"
