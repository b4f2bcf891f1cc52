"""
Core conversion primitives.

These are the leaf operations everything else composes on:
- classify: Length / Unitless / Opaque token classification
- round_half_away: px snapping
- to_px / to_rem: unit arithmetic
- format_number / format_length: CSS number printing
- should_round: per-property rounding policy
"""

from chuk_mcp_rem.core.length import Classified, Length, Opaque, Unitless, classify, is_length
from chuk_mcp_rem.core.policy import should_round
from chuk_mcp_rem.core.units import (
    format_length,
    format_number,
    round_half_away,
    to_px,
    to_rem,
)

__all__ = [
    # Classification
    "Classified",
    "Length",
    "Unitless",
    "Opaque",
    "classify",
    "is_length",
    # Units
    "round_half_away",
    "to_px",
    "to_rem",
    "format_number",
    "format_length",
    # Policy
    "should_round",
]
