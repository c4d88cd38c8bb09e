"""
Token parser - one utility class to one ParsedToken.

Rules are tried in a fixed order and the first that fires wins:

1. Whole-token keyword (w-full, h-screen)
2. Border family (border, border-2, border-x, border-t-[3px])
3. Constraint family (max-w-lg, min-h-10)
4. Radius family (rounded, rounded-lg, rounded-full)
5. Generic numeric tail (p-4, w-px, w-1/3)

A token that matches nothing is dropped, not reported as an error.
Only the constraint family falls through to later rules on a miss.
"""

from __future__ import annotations

import logging
import re

from chuk_mcp_tailwind.constants import (
    ALL_SIDES,
    DEFAULT_RADIUS_NAME,
    PIXEL_TOKEN,
    SCREEN_SIZE,
    SIDE_LETTERS,
    ConstraintKey,
)
from chuk_mcp_tailwind.core.formatter import format_percentage
from chuk_mcp_tailwind.models.theme import Theme
from chuk_mcp_tailwind.models.token import (
    BorderToken,
    ConstraintToken,
    KeywordToken,
    OtherToken,
    ParsedToken,
    RadiusToken,
    SpacingToken,
)

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_ARBITRARY_RE = re.compile(r"^\[(.+)\]$")

_PX_SUFFIX = "px"
_DEFAULT_BORDER_WIDTH = 1.0

_CONSTRAINT_KEYS: dict[tuple[str, str], ConstraintKey] = {
    ("min", "width"): ConstraintKey.MIN_WIDTH,
    ("min", "height"): ConstraintKey.MIN_HEIGHT,
    ("max", "width"): ConstraintKey.MAX_WIDTH,
    ("max", "height"): ConstraintKey.MAX_HEIGHT,
}


def parse_number(text: str) -> float | None:
    """
    Parse a plain decimal literal.

    Only a whole-string number counts: "4", "1.5", ".5", "+2", "1e3".
    Anything with trailing text ("2xl", "123xyz") is not a number.

    Returns:
        The value, or None if the text is not a number
    """
    if not _NUMBER_RE.match(text):
        return None
    return float(text)


def resolve_border_width(text: str) -> float:
    """
    Resolve a border width segment to logical pixels.

    Tailwind border widths are pixels already, so there is no spacing
    scale. Unresolvable widths fall back to 1.

    Args:
        text: Width segment ("2", "0", "[3px]", "[3]")

    Returns:
        Width in logical pixels
    """
    arbitrary = _ARBITRARY_RE.match(text)
    if arbitrary:
        raw = arbitrary.group(1)
        if raw.endswith(_PX_SUFFIX):
            width = parse_number(raw[: -len(_PX_SUFFIX)])
            if width is not None:
                return width
        width = parse_number(raw)
        return width if width is not None else _DEFAULT_BORDER_WIDTH

    width = parse_number(text)
    return width if width is not None else _DEFAULT_BORDER_WIDTH


class TokenParser:
    """
    Parses single utility-class tokens against a theme's tables.

    The parser is stateless apart from the theme it reads, so one
    instance can be shared freely.
    """

    def __init__(self, theme: Theme | None = None):
        """
        Initialize the parser.

        Args:
            theme: Lookup tables to use (default: built-in Tailwind scale)
        """
        self.theme = theme or Theme()

    def parse(self, token: str) -> ParsedToken | None:
        """
        Parse one token.

        Args:
            token: A single class name, any case

        Returns:
            The parsed token, or None if no rule matched
        """
        token = token.strip().lower()
        if not token:
            return None

        if token in self.theme.keywords:
            return KeywordToken(text=self.theme.keywords[token])

        parts = token.split("-")
        prefix = parts[0]

        if prefix == "border":
            return self._parse_border(parts)

        if prefix in ("max", "min") and len(parts) > 1:
            constraint = self._parse_constraint(parts)
            if constraint is not None:
                return constraint

        if prefix == "rounded":
            return self._parse_radius(parts)

        parsed = self._parse_numeric(parts[-1])
        if parsed is None:
            logger.debug(f"Dropped unrecognised token: {token}")
        return parsed

    def _parse_border(self, parts: list[str]) -> BorderToken:
        """Parse border, border-2, border-x, border-t-4, border-[3px]."""
        sides = ALL_SIDES
        width_text = "1"

        if len(parts) >= 2:
            side_or_width = parts[1]
            if side_or_width in SIDE_LETTERS:
                sides = SIDE_LETTERS[side_or_width]
                width_text = parts[2] if len(parts) > 2 else "1"
            else:
                width_text = side_or_width

        return BorderToken(sides=sides, width=resolve_border_width(width_text))

    def _parse_constraint(self, parts: list[str]) -> ConstraintToken | None:
        """Parse max-w-lg, min-h-screen, max-w-96. None on a miss."""
        axis = "width" if parts[1] == "w" else "height"
        key = _CONSTRAINT_KEYS[(parts[0], axis)]
        size_name = "-".join(parts[2:])

        if size_name in self.theme.sizes:
            value = self.theme.sizes[size_name]
            if value == SCREEN_SIZE:
                value = f"{SCREEN_SIZE}.{axis}"
            return ConstraintToken(key=key, value=value)

        number = parse_number(size_name)
        if number is not None:
            return ConstraintToken(key=key, value=number * self.theme.spacing_unit)

        return None

    def _parse_radius(self, parts: list[str]) -> RadiusToken | None:
        """Parse rounded, rounded-lg, rounded-full."""
        radius_name = "-".join(parts[1:]) or DEFAULT_RADIUS_NAME
        if radius_name in self.theme.radii:
            return RadiusToken(value=self.theme.radii[radius_name])

        logger.debug(f"Unknown radius: {radius_name}")
        return None

    def _parse_numeric(self, tail: str) -> SpacingToken | OtherToken | None:
        """Parse the last segment: px, a fraction or a bare number."""
        if tail == PIXEL_TOKEN:
            return SpacingToken(value=1.0)

        fraction = _FRACTION_RE.match(tail)
        if fraction:
            numerator = float(fraction.group(1))
            denominator = float(fraction.group(2))
            if denominator == 0:
                return None
            return OtherToken(value=format_percentage(numerator / denominator))

        number = parse_number(tail)
        if number is not None:
            return SpacingToken(value=number * self.theme.spacing_unit)

        return None


_default_parser = TokenParser()


def parse_token(token: str) -> ParsedToken | None:
    """Parse one token against the built-in tables."""
    return _default_parser.parse(token)
