"""
Numeric classifier - Length, Unitless and Opaque tokens.

Every value atom falls into exactly one of three kinds:
- Length: a decimal number immediately followed by px or pt
- Unitless: a bare decimal number (never treated as implicit px)
- Opaque: anything else, carried verbatim

Only Length tokens are eligible for conversion.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from chuk_mcp_rem.constants import Unit

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

_LENGTH_RE = re.compile(rf"^(?P<number>{_NUMBER})(?P<unit>px|pt)$", re.IGNORECASE)
_UNITLESS_RE = re.compile(rf"^{_NUMBER}$")


@dataclass(frozen=True)
class Length:
    """
    A convertible length: magnitude plus an explicit px or pt unit.

    The source text is kept so an unconverted Length can still be
    printed exactly as written.
    """

    magnitude: float
    unit: Unit
    text: str

    def __post_init__(self) -> None:
        if self.unit not in (Unit.PX, Unit.PT):
            raise ValueError(f"Length unit must be px or pt, got {self.unit}")


@dataclass(frozen=True)
class Unitless:
    """A bare number such as `0`, `1.5` or `-2`."""

    magnitude: float
    text: str


@dataclass(frozen=True)
class Opaque:
    """Keywords, colors, URLs, percentages, functions, anything else."""

    text: str


Classified = Length | Unitless | Opaque


def classify(text: str) -> Classified:
    """
    Classify a token's textual form.

    Never raises: anything that does not look like a number is Opaque,
    and so is a number too large for a float (`1e999px`).
    """
    match = _LENGTH_RE.match(text)
    if match:
        magnitude = float(match.group("number"))
        if not math.isfinite(magnitude):
            return Opaque(text)
        return Length(
            magnitude=magnitude,
            unit=Unit(match.group("unit").lower()),
            text=text,
        )
    if _UNITLESS_RE.match(text):
        magnitude = float(text)
        if not math.isfinite(magnitude):
            return Opaque(text)
        return Unitless(magnitude=magnitude, text=text)
    return Opaque(text)


def is_length(text: str) -> bool:
    """Check whether a token would be converted."""
    return isinstance(classify(text), Length)
