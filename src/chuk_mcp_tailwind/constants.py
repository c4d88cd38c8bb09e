"""
Constants and enums for the converter.

No magic strings - use enums and typed tables for constrained values.
"""

from enum import Enum


class Side(str, Enum):
    """Border side. Declaration order is the rendering order."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class ConstraintKey(str, Enum):
    """BoxConstraints named arguments."""

    MIN_WIDTH = "minWidth"
    MIN_HEIGHT = "minHeight"
    MAX_WIDTH = "maxWidth"
    MAX_HEIGHT = "maxHeight"


class OutputKind(str, Enum):
    """Shape of a conversion result."""

    EMPTY = "empty"
    SINGLE = "single"
    AGGREGATE = "aggregate"


ALL_SIDES: frozenset[Side] = frozenset(Side)

# Border side letters (border-t-2, border-x, ...)
SIDE_LETTERS: dict[str, frozenset[Side]] = {
    "t": frozenset({Side.TOP}),
    "r": frozenset({Side.RIGHT}),
    "b": frozenset({Side.BOTTOM}),
    "l": frozenset({Side.LEFT}),
    "x": frozenset({Side.LEFT, Side.RIGHT}),
    "y": frozenset({Side.TOP, Side.BOTTOM}),
}

# Flutter literals
INFINITY = "double.infinity"
NAN = "double.nan"
SCREEN_SIZE = "MediaQuery.of(context).size"
SCREEN_WIDTH = f"{SCREEN_SIZE}.width"
SCREEN_HEIGHT = f"{SCREEN_SIZE}.height"
CIRCLE_SHAPE = "BoxShape.circle"
ZERO_VALUE = "0.0"

# One numeric class unit = 4 logical pixels
DEFAULT_SPACING_UNIT = 4.0

# Name looked up in the radius table for a bare "rounded"
DEFAULT_RADIUS_NAME = "rounded"

# Single-pixel shorthand (w-px, p-px)
PIXEL_TOKEN = "px"

# Whole-token keywords
DEFAULT_KEYWORD_MAP: dict[str, str] = {
    "w-full": INFINITY,
    "h-full": INFINITY,
    "w-screen": SCREEN_WIDTH,
    "h-screen": SCREEN_HEIGHT,
}

# Radius suffix -> corner radius (or shape literal)
DEFAULT_RADIUS_MAP: dict[str, float | str] = {
    "sm": 4.0,
    "rounded": 6.0,
    "md": 8.0,
    "lg": 12.0,
    "xl": 16.0,
    "2xl": 24.0,
    "3xl": 32.0,
    "full": CIRCLE_SHAPE,
}

# Constraint size suffix -> logical pixels (or literal)
DEFAULT_SIZE_MAP: dict[str, float | str] = {
    "xs": 320.0,
    "sm": 384.0,
    "md": 448.0,
    "lg": 512.0,
    "xl": 576.0,
    "2xl": 672.0,
    "3xl": 768.0,
    "4xl": 896.0,
    "5xl": 1024.0,
    "6xl": 1152.0,
    "7xl": 1280.0,
    "full": INFINITY,
    "screen": SCREEN_SIZE,  # specialised per axis
}

# Presentation labels by output kind
OUTPUT_LABELS: dict[OutputKind, str] = {
    OutputKind.EMPTY: "Flutter Value",
    OutputKind.SINGLE: "Flutter Value / Object",
    OutputKind.AGGREGATE: "Flutter List<dynamic>",
}

DEFAULT_THEME = "tailwind"

# Overrides the project themes directory
THEMES_DIR_ENV = "CHUK_TAILWIND_THEMES_DIR"


class ErrorMessages:
    """Standardized error messages."""

    THEME_NOT_FOUND = "Theme '{name}' not found."
    THEME_EXISTS = "Theme already exists in project: {name}"
    NO_PROJECT_PATH = "No project path configured"
