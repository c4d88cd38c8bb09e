"""
MCP tool implementations.

Tools are organized by domain:
- conversion - Class string conversion and token inspection
- themes - Theme discovery and customization
"""

from chuk_mcp_tailwind.tools.conversion import register_conversion_tools
from chuk_mcp_tailwind.tools.themes import register_theme_tools

__all__ = [
    "register_conversion_tools",
    "register_theme_tools",
]
