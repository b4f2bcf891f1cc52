"""
MCP tool implementations.

Tools are organized by domain:
- conversion - Declaration, value and baseline conversion
- profiles - Profile discovery and customization
"""

from chuk_mcp_rem.tools.conversion import register_conversion_tools
from chuk_mcp_rem.tools.profiles import register_profile_tools

__all__ = [
    "register_conversion_tools",
    "register_profile_tools",
]
