"""
Models for the rem conversion system.

This module provides:
- Token, SpaceList, CommaList: the recursive value tree
- Value: a value tree plus its `!important` decoration
- ConversionConfig: global settings (base font size, output mode)
- ConversionContext: per-property settings derived from the config
- Profile: a named ConversionConfig preset
"""

from chuk_mcp_rem.models.config import ConversionConfig, ConversionContext
from chuk_mcp_rem.models.profile import Profile, ProfileMetadata
from chuk_mcp_rem.models.value import CommaList, SpaceList, Token, Value, ValueNode

__all__ = [
    "CommaList",
    "ConversionConfig",
    "ConversionContext",
    "Profile",
    "ProfileMetadata",
    "SpaceList",
    "Token",
    "Value",
    "ValueNode",
]
