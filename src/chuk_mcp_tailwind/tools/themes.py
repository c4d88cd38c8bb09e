"""
Theme tools - MCP tools for theme discovery and customization.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tailwind.constants import ErrorMessages
from chuk_mcp_tailwind.themes import ThemeLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theme_tools(
    mcp: ChukMCPServer,
    theme_loader: ThemeLoader,
) -> dict[str, Any]:
    """
    Register theme tools with the MCP server.

    Args:
        mcp: The MCP server instance
        theme_loader: The theme loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tailwind_list_themes() -> str:
        """
        List available themes.

        Returns all themes from the library and project with
        basic metadata.

        Returns:
            JSON string with list of theme summaries

        Example:
            tailwind_list_themes()
        """
        try:
            themes = theme_loader.list_themes()

            return json.dumps(
                {
                    "status": "success",
                    "themes": [t.model_dump() for t in themes],
                    "count": len(themes),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tailwind_list_themes"] = tailwind_list_themes

    @mcp.tool  # type: ignore[arg-type]
    async def tailwind_describe_theme(name: str) -> str:
        """
        Get the full lookup tables of a theme.

        Args:
            name: Theme name

        Returns:
            JSON string with spacing unit, keywords, sizes and radii

        Example:
            tailwind_describe_theme(name="tailwind")
        """
        try:
            theme = theme_loader.get_theme(name)
            if theme is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.THEME_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "theme": theme.model_dump()})
        except Exception as e:
            logger.exception("Failed to describe theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tailwind_describe_theme"] = tailwind_describe_theme

    @mcp.tool  # type: ignore[arg-type]
    async def tailwind_copy_theme_to_project(name: str) -> str:
        """
        Copy a library theme into the project for customization.

        Edit the copied YAML to change or add table entries; the
        project copy then shadows the library theme.

        Args:
            name: Library theme name

        Returns:
            JSON string with the path of the copied file

        Example:
            tailwind_copy_theme_to_project(name="tailwind")
        """
        try:
            path = theme_loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.THEME_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": f"Copied theme '{name}' to project.",
                    "path": str(path),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tailwind_copy_theme_to_project"] = tailwind_copy_theme_to_project

    return tools
