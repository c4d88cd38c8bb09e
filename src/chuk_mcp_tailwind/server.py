#!/usr/bin/env python3
"""
Command-line entry point for the Tailwind-to-Flutter MCP server.

Picks the transport and where project themes live, then hands off
to the server defined in async_server.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from chuk_mcp_tailwind.constants import THEMES_DIR_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-tailwind",
        description="Serve Tailwind -> Flutter conversion over MCP",
    )
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio")
    parser.add_argument("--port", type=int, default=8000, help="HTTP port (http only)")
    parser.add_argument(
        "--themes-dir",
        type=Path,
        default=None,
        help="Project themes directory (default: ./themes)",
    )
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the server."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # async_server reads this when it builds the theme loader
    if args.themes_dir is not None:
        os.environ[THEMES_DIR_ENV] = str(args.themes_dir.resolve())

    from chuk_mcp_tailwind.async_server import mcp

    logger.info(f"Serving Tailwind conversion over {args.transport}")
    if args.transport == "stdio":
        asyncio.run(mcp.run_stdio())
    else:
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
