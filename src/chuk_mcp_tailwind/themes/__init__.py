"""
Theme system - swappable lookup tables for the converter.

A theme is the keyword, size and radius tables plus the spacing
unit. The built-in "tailwind" theme is the stock scale.
"""

from chuk_mcp_tailwind.themes.loader import ThemeLoader

__all__ = ["ThemeLoader"]
