"""
Profile tools - MCP tools for profile discovery.

Tools for listing profiles, describing one, and copying a library
profile into the project for customization.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_rem.constants import ErrorMessages, SuccessMessages
from chuk_mcp_rem.profiles import ProfileLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_profile_tools(
    mcp: ChukMCPServer,
    profile_loader: ProfileLoader,
) -> dict[str, Any]:
    """
    Register profile tools with the MCP server.

    Args:
        mcp: The MCP server instance
        profile_loader: The profile loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def rem_list_profiles() -> str:
        """
        List available conversion profiles.

        Returns:
            JSON string with list of profile summaries

        Example:
            rem_list_profiles()
        """
        try:
            profiles = profile_loader.list_profiles()

            return json.dumps(
                {
                    "status": "success",
                    "profiles": [
                        {
                            "name": p.name,
                            "description": p.description,
                            "base_font_size": p.base_font_size,
                            "output_mode": p.output_mode.value,
                        }
                        for p in profiles
                    ],
                    "count": len(profiles),
                }
            )
        except Exception as e:
            logger.exception("Failed to list profiles")
            return json.dumps({"status": "error", "message": str(e)})

    tools["rem_list_profiles"] = rem_list_profiles

    @mcp.tool  # type: ignore[arg-type]
    async def rem_describe_profile(name: str) -> str:
        """
        Get the settings of a profile.

        Args:
            name: Profile name

        Returns:
            JSON string with profile details

        Example:
            rem_describe_profile(name="legacy")
        """
        try:
            profile = profile_loader.get_profile(name)
            if profile is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.PROFILE_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "profile": {
                        "name": profile.name,
                        "description": profile.description,
                        "base_font_size": profile.config.base_font_size,
                        "output_mode": profile.config.output_mode.value,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe profile")
            return json.dumps({"status": "error", "message": str(e)})

    tools["rem_describe_profile"] = rem_describe_profile

    @mcp.tool  # type: ignore[arg-type]
    async def rem_copy_profile_to_project(name: str) -> str:
        """
        Copy a library profile into the project for customization.

        Args:
            name: Library profile name

        Returns:
            JSON string with the path of the copied file

        Example:
            rem_copy_profile_to_project(name="legacy")
        """
        try:
            path = profile_loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.PROFILE_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "message": SuccessMessages.PROFILE_COPIED.format(name=name, path=path),
                }
            )
        except Exception as e:
            logger.exception("Failed to copy profile")
            return json.dumps({"status": "error", "message": str(e)})

    tools["rem_copy_profile_to_project"] = rem_copy_profile_to_project

    return tools
