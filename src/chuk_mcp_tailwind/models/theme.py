"""
Theme model - the lookup tables a conversion runs against.

A theme bundles the keyword, size and radius tables with the
spacing unit. The built-in defaults reproduce the stock Tailwind
scale; YAML themes override individual entries.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_tailwind.constants import (
    DEFAULT_KEYWORD_MAP,
    DEFAULT_RADIUS_MAP,
    DEFAULT_SIZE_MAP,
    DEFAULT_SPACING_UNIT,
    DEFAULT_THEME,
)


class Theme(BaseModel):
    """
    Complete set of lookup tables for a conversion.

    Tables are read-only once the theme is built; the parser never
    mutates them.
    """

    name: str = Field(DEFAULT_THEME, description="Theme name")
    description: str = Field("", description="Human-readable description")
    spacing_unit: float = Field(
        DEFAULT_SPACING_UNIT, description="Logical pixels per numeric class unit"
    )
    keywords: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_KEYWORD_MAP),
        description="Whole-token keyword literals",
    )
    sizes: dict[str, float | str] = Field(
        default_factory=lambda: dict(DEFAULT_SIZE_MAP),
        description="Constraint size suffixes",
    )
    radii: dict[str, float | str] = Field(
        default_factory=lambda: dict(DEFAULT_RADIUS_MAP),
        description="Radius suffixes",
    )

    model_config = {"frozen": True}


class ThemeMetadata(BaseModel):
    """
    Lightweight theme metadata for listing/discovery.
    """

    name: str = Field(..., description="Theme name")
    description: str = Field("", description="Human-readable description")
    spacing_unit: float = Field(DEFAULT_SPACING_UNIT, description="Spacing unit")
    keyword_count: int = Field(0, description="Number of keyword entries")
    size_count: int = Field(0, description="Number of size entries")
    radius_count: int = Field(0, description="Number of radius entries")

    @classmethod
    def from_theme(cls, theme: Theme) -> ThemeMetadata:
        """Create metadata from a full theme."""
        return cls(
            name=theme.name,
            description=theme.description,
            spacing_unit=theme.spacing_unit,
            keyword_count=len(theme.keywords),
            size_count=len(theme.sizes),
            radius_count=len(theme.radii),
        )
