"""
Profile system - named conversion presets.

Profiles bundle a base font size and output mode under a name, so a
project can pick 'legacy' or 'ten-base' instead of repeating settings.
"""

from chuk_mcp_rem.profiles.loader import ProfileLoader

__all__ = [
    "ProfileLoader",
]
