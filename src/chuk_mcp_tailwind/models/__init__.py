"""
Pydantic models for the converter.

This module provides:
- ParsedToken: Tagged union of per-family parse results
- Theme: Lookup tables and spacing unit
- ConversionResult: Rendered output with its kind
"""

from chuk_mcp_tailwind.models.result import ConversionResult, TokenReport
from chuk_mcp_tailwind.models.theme import Theme, ThemeMetadata
from chuk_mcp_tailwind.models.token import (
    BorderToken,
    ConstraintToken,
    KeywordToken,
    LayoutValue,
    OtherToken,
    ParsedToken,
    RadiusToken,
    SpacingToken,
)

__all__ = [
    "BorderToken",
    "ConstraintToken",
    "ConversionResult",
    "KeywordToken",
    "LayoutValue",
    "OtherToken",
    "ParsedToken",
    "RadiusToken",
    "SpacingToken",
    "Theme",
    "ThemeMetadata",
    "TokenReport",
]
