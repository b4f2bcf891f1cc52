#!/usr/bin/env python3
"""
Entry point for the CHUK Rem MCP Server.

Runs the MCP server (stdio or http transport), or converts a single
declaration straight from the command line:

    chuk-mcp-rem --transport http --port 8000
    chuk-mcp-rem --convert margin "20px auto" --profile legacy
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _convert_once(args: argparse.Namespace) -> int:
    """Print the declarations for one property and exit."""
    from chuk_mcp_rem.compiler import RemConverter
    from chuk_mcp_rem.profiles import ProfileLoader

    try:
        loader = ProfileLoader(project_path=Path.cwd() / "profiles")
        config = loader.get_config(args.profile)
        config = config.with_overrides(
            base_font_size=args.base_font_size,
            output_mode=args.output_mode,
        )
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    property_name, value = args.convert
    for line in RemConverter(config).render(property_name, value):
        print(line)
    return 0


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Rem MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--convert",
        nargs=2,
        metavar=("PROPERTY", "VALUE"),
        help="Convert one declaration, print it and exit",
    )
    parser.add_argument("--profile", help="Profile to convert with (with --convert)")
    parser.add_argument("--base-font-size", help="Root font size, e.g. 16px (with --convert)")
    parser.add_argument(
        "--output-mode",
        choices=["rem", "px_and_rem", "px"],
        help="Declarations to emit (with --convert)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.convert:
        sys.exit(_convert_once(args))

    # Import after argument parsing to avoid issues
    from chuk_mcp_rem.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Rem MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Rem MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
