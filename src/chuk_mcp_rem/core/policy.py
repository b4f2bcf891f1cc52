"""
Property policy - which properties round their lengths before conversion.

A static, total lookup: font-size, letter-spacing and word-spacing keep
full precision, everything else (including unknown and custom properties)
is rounded.
"""

from __future__ import annotations

from chuk_mcp_rem.constants import NO_ROUND_PROPERTIES


def should_round(property_name: str | None) -> bool:
    """
    Return True if lengths in this property are snapped to whole px.

    Matching is exact and case-sensitive; vendor-prefixed and shorthand
    names are not folded onto the listed properties. A missing property
    name (bare value conversion) uses the default policy.
    """
    if property_name is None:
        return True
    return property_name not in NO_ROUND_PROPERTIES
