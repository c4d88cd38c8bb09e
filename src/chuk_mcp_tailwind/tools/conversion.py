"""
Conversion tools - MCP tools for turning class strings into Flutter.

Tools for converting a class string and for inspecting how each
token was interpreted.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tailwind.constants import DEFAULT_THEME, ErrorMessages
from chuk_mcp_tailwind.core import TailwindConverter
from chuk_mcp_tailwind.themes import ThemeLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_conversion_tools(
    mcp: ChukMCPServer,
    theme_loader: ThemeLoader,
) -> dict[str, Any]:
    """
    Register conversion tools with the MCP server.

    Args:
        mcp: The MCP server instance
        theme_loader: The theme loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def get_converter(theme: str | None) -> TailwindConverter | None:
        # Theme caching lives in the loader
        theme_obj = theme_loader.get_theme(theme or DEFAULT_THEME)
        if theme_obj is None:
            return None
        return TailwindConverter(theme_obj)

    @mcp.tool  # type: ignore[arg-type]
    async def tailwind_convert(classes: str, theme: str | None = None) -> str:
        """
        Convert Tailwind utility classes to a Flutter expression.

        Handles sizes and spacing (w-4, p-2, w-px, w-1/2), constraints
        (max-w-lg, min-h-screen), radius (rounded-lg) and borders
        (border-t-2, border-[3px]). Unrecognised classes are ignored.

        The result is a single value, a single object, or a list when
        several independent values are produced.

        Args:
            classes: Space-separated class string
            theme: Optional theme name (default: 'tailwind')

        Returns:
            JSON string with the Flutter output and its kind

        Example:
            tailwind_convert(classes="max-w-lg border-t-2 rounded-lg")
        """
        try:
            converter = get_converter(theme)
            if converter is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.THEME_NOT_FOUND.format(name=theme),
                    }
                )

            result = converter.convert(classes)

            return json.dumps(
                {
                    "status": "success",
                    "output": result.output_text,
                    "kind": result.output_kind.value,
                    "label": result.label,
                    "copyable": result.copyable,
                    "entries": result.entries,
                    "theme": converter.theme.name,
                }
            )
        except Exception as e:
            logger.exception("Failed to convert classes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tailwind_convert"] = tailwind_convert

    @mcp.tool  # type: ignore[arg-type]
    async def tailwind_explain(classes: str, theme: str | None = None) -> str:
        """
        Show how each class token is interpreted.

        Useful for finding out why a class did not appear in the
        output - dropped tokens are reported with "dropped": true.

        Args:
            classes: Space-separated class string
            theme: Optional theme name (default: 'tailwind')

        Returns:
            JSON string with one entry per token

        Example:
            tailwind_explain(classes="p-4 flex w-1/0")
        """
        try:
            converter = get_converter(theme)
            if converter is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.THEME_NOT_FOUND.format(name=theme),
                    }
                )

            reports = converter.explain(classes)

            return json.dumps(
                {
                    "status": "success",
                    "tokens": [
                        {
                            "token": report.token,
                            "dropped": report.dropped,
                            "parsed": (
                                report.parsed.model_dump(mode="json")
                                if report.parsed is not None
                                else None
                            ),
                        }
                        for report in reports
                    ],
                    "dropped": sum(1 for report in reports if report.dropped),
                    "count": len(reports),
                }
            )
        except Exception as e:
            logger.exception("Failed to explain classes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tailwind_explain"] = tailwind_explain

    return tools
