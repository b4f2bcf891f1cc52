#!/usr/bin/env python3
"""
Async Rem MCP Server using chuk-mcp-server

This server provides MCP tools for converting px and pt lengths in CSS
values to rem. Only explicit px/pt lengths change; keywords, colors,
URLs, percentages, unitless numbers and `!important` pass through.

The server provides tools for:
- Converting single declarations and whole declaration maps
- Converting bare values
- Printing the root font-size baseline
- Listing, describing and customizing conversion profiles
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_rem.profiles import ProfileLoader
from chuk_mcp_rem.tools import register_conversion_tools, register_profile_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-rem")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
PROFILES_DIR = BASE_PATH / "profiles"
PROFILES_LIBRARY_PATH = Path(__file__).parent / "profiles" / "library"

# Create loader
profile_loader = ProfileLoader(
    library_path=PROFILES_LIBRARY_PATH,
    project_path=PROFILES_DIR,
)

# Register all tools
conversion_tools = register_conversion_tools(mcp, profile_loader)
profile_tools = register_profile_tools(mcp, profile_loader)

# Export tool functions for direct access
rem_convert = conversion_tools["rem_convert"]
rem_convert_declarations = conversion_tools["rem_convert_declarations"]
rem_convert_value = conversion_tools["rem_convert_value"]
rem_baseline = conversion_tools["rem_baseline"]

rem_list_profiles = profile_tools["rem_list_profiles"]
rem_describe_profile = profile_tools["rem_describe_profile"]
rem_copy_profile_to_project = profile_tools["rem_copy_profile_to_project"]

logger.info("CHUK Rem MCP Server initialized")
logger.info(f"  Profiles library: {PROFILES_LIBRARY_PATH}")
logger.info(f"  Project profiles dir: {PROFILES_DIR}")
