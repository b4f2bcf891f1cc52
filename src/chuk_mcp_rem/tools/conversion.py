"""
Conversion tools - MCP tools for px/pt to rem conversion.

Tools for converting single declarations, several declarations at
once, bare values, and for printing the root font-size baseline.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_rem.compiler import RemConverter
from chuk_mcp_rem.constants import SuccessMessages
from chuk_mcp_rem.models.config import ConversionConfig
from chuk_mcp_rem.profiles import ProfileLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _resolve_config(
    loader: ProfileLoader,
    profile: str | None,
    base_font_size: float | str | None,
    output_mode: str | None,
) -> ConversionConfig:
    """Start from a profile (or the defaults) and apply explicit overrides."""
    config = loader.get_config(profile)
    return config.with_overrides(base_font_size=base_font_size, output_mode=output_mode)


def register_conversion_tools(
    mcp: ChukMCPServer,
    profile_loader: ProfileLoader,
) -> dict[str, Any]:
    """
    Register conversion tools with the MCP server.

    Args:
        mcp: The MCP server instance
        profile_loader: The profile loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def rem_convert(
        property: str,
        value: str,
        profile: str | None = None,
        base_font_size: float | str | None = None,
        output_mode: str | None = None,
    ) -> str:
        """
        Convert the px/pt lengths of one CSS declaration to rem.

        Keywords, colors, URLs, percentages, unitless numbers and
        `!important` are left untouched.

        Args:
            property: CSS property name (e.g. 'margin', 'font-size')
            value: CSS value (e.g. '20px auto')
            profile: Optional profile name (default: 16px base, rem only)
            base_font_size: Override the root font size (e.g. 16 or '10px')
            output_mode: Override the output mode ('rem', 'px_and_rem', 'px')

        Returns:
            JSON string with the converted value and declaration lines

        Example:
            rem_convert(property="margin", value="20px auto")
        """
        try:
            config = _resolve_config(profile_loader, profile, base_font_size, output_mode)
            result = RemConverter(config).convert(property, value)

            return json.dumps(
                {
                    "status": "success",
                    "conversion": result.to_dict(),
                    "message": SuccessMessages.CONVERTED.format(
                        property=property, count=len(result.declarations)
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to convert declaration")
            return json.dumps({"status": "error", "message": str(e)})

    tools["rem_convert"] = rem_convert

    @mcp.tool  # type: ignore[arg-type]
    async def rem_convert_declarations(
        declarations: dict[str, str],
        profile: str | None = None,
        base_font_size: float | str | None = None,
        output_mode: str | None = None,
    ) -> str:
        """
        Convert several CSS declarations at once.

        Each property follows its own rounding policy; output keeps the
        order of the input mapping.

        Args:
            declarations: Mapping of property name to value
            profile: Optional profile name
            base_font_size: Override the root font size
            output_mode: Override the output mode

        Returns:
            JSON string with per-property results and all declaration lines

        Example:
            rem_convert_declarations(declarations={"margin": "20px", "font-size": "14px"})
        """
        try:
            config = _resolve_config(profile_loader, profile, base_font_size, output_mode)
            results = RemConverter(config).convert_many(declarations)

            return json.dumps(
                {
                    "status": "success",
                    "conversions": [r.to_dict() for r in results],
                    "declarations": [line for r in results for line in r.declarations],
                    "count": len(results),
                }
            )
        except Exception as e:
            logger.exception("Failed to convert declarations")
            return json.dumps({"status": "error", "message": str(e)})

    tools["rem_convert_declarations"] = rem_convert_declarations

    @mcp.tool  # type: ignore[arg-type]
    async def rem_convert_value(
        value: str,
        profile: str | None = None,
        base_font_size: float | str | None = None,
    ) -> str:
        """
        Convert a bare CSS value to rem, without a property.

        Lengths are rounded to whole px before conversion.

        Args:
            value: CSS value (e.g. '12pt 24px')
            profile: Optional profile name
            base_font_size: Override the root font size

        Returns:
            JSON string with the converted value

        Example:
            rem_convert_value(value="24px")
        """
        try:
            config = _resolve_config(profile_loader, profile, base_font_size, None)
            converted = RemConverter(config).convert_value(value)

            return json.dumps(
                {
                    "status": "success",
                    "original": value,
                    "value": converted.render(),
                }
            )
        except Exception as e:
            logger.exception("Failed to convert value")
            return json.dumps({"status": "error", "message": str(e)})

    tools["rem_convert_value"] = rem_convert_value

    @mcp.tool  # type: ignore[arg-type]
    async def rem_baseline(
        profile: str | None = None,
        base_font_size: float | str | None = None,
    ) -> str:
        """
        Get the root font-size declaration for a base font size.

        Put it on the `html` element so 1rem equals the base.

        Args:
            profile: Optional profile name
            base_font_size: Override the root font size

        Returns:
            JSON string with the declaration

        Example:
            rem_baseline(base_font_size="10px")
        """
        try:
            config = _resolve_config(profile_loader, profile, base_font_size, None)
            converter = RemConverter(config)

            return json.dumps(
                {
                    "status": "success",
                    "base_font_size": config.base_font_size,
                    "declaration": converter.baseline_declaration(),
                }
            )
        except Exception as e:
            logger.exception("Failed to build baseline")
            return json.dumps({"status": "error", "message": str(e)})

    tools["rem_baseline"] = rem_baseline

    return tools
