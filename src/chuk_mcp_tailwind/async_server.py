#!/usr/bin/env python3
"""
Async Tailwind-to-Flutter MCP Server using chuk-mcp-server

This server converts Tailwind CSS utility classes into Flutter layout
expressions: sizes, BoxConstraints, Border objects and radii.

The server provides tools for:
- Converting class strings to Flutter values, objects or lists
- Inspecting how each class token was interpreted
- Listing, describing and customizing lookup-table themes
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tailwind.constants import THEMES_DIR_ENV
from chuk_mcp_tailwind.themes import ThemeLoader
from chuk_mcp_tailwind.tools import register_conversion_tools, register_theme_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tailwind")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
THEMES_DIR = Path(os.environ.get(THEMES_DIR_ENV) or BASE_PATH / "themes")
THEMES_LIBRARY_PATH = Path(__file__).parent / "themes" / "library"

theme_loader = ThemeLoader(
    library_path=THEMES_LIBRARY_PATH,
    project_path=THEMES_DIR,
)

# Register all tools
conversion_tools = register_conversion_tools(mcp, theme_loader)
theme_tools = register_theme_tools(mcp, theme_loader)

# Export tool functions for direct access
tailwind_convert = conversion_tools["tailwind_convert"]
tailwind_explain = conversion_tools["tailwind_explain"]

tailwind_list_themes = theme_tools["tailwind_list_themes"]
tailwind_describe_theme = theme_tools["tailwind_describe_theme"]
tailwind_copy_theme_to_project = theme_tools["tailwind_copy_theme_to_project"]

logger.info("CHUK Tailwind MCP Server initialized")
logger.info(f"  Themes library: {THEMES_LIBRARY_PATH}")
logger.info(f"  Project themes dir: {THEMES_DIR}")
