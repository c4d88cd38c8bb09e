"""
Aggregator - folds parsed tokens into borders, constraints and values.

The fold is a single pass in token order. Later tokens overwrite
earlier ones per border side and per constraint key; everything
else is formatted and appended.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from chuk_mcp_tailwind.constants import ConstraintKey, Side
from chuk_mcp_tailwind.core.formatter import format_value
from chuk_mcp_tailwind.models.token import (
    BorderToken,
    ConstraintToken,
    LayoutValue,
    ParsedToken,
)


@dataclass
class BorderAccumulator:
    """Per-side border widths. None means the side was never set."""

    top: float | None = None
    right: float | None = None
    bottom: float | None = None
    left: float | None = None

    def apply(self, token: BorderToken) -> None:
        """Overwrite the width of every side the token covers."""
        for side in token.sides:
            setattr(self, side.value, token.width)

    def width(self, side: Side) -> float | None:
        """Width of one side."""
        return getattr(self, side.value)

    def resolved(self) -> dict[Side, float]:
        """Sides that have a width, in top/right/bottom/left order."""
        return {side: w for side in Side if (w := self.width(side)) is not None}

    def is_empty(self) -> bool:
        return not self.resolved()

    def uniform_width(self) -> float | None:
        """The shared width if all four sides are set and equal."""
        widths = self.resolved()
        if len(widths) != len(Side):
            return None
        values = set(widths.values())
        return values.pop() if len(values) == 1 else None


@dataclass
class ConstraintAccumulator:
    """Constraint key to value; first-seen key order is kept."""

    values: dict[ConstraintKey, LayoutValue] = field(default_factory=dict)

    def apply(self, token: ConstraintToken) -> None:
        self.values[token.key] = token.value

    def is_empty(self) -> bool:
        return not self.values

    def items(self) -> list[tuple[ConstraintKey, LayoutValue]]:
        return list(self.values.items())


@dataclass
class Aggregate:
    """Output of one aggregation pass."""

    borders: BorderAccumulator = field(default_factory=BorderAccumulator)
    constraints: ConstraintAccumulator = field(default_factory=ConstraintAccumulator)
    others: list[str] = field(default_factory=list)


def aggregate(tokens: Iterable[ParsedToken]) -> Aggregate:
    """
    Fold parsed tokens in order.

    Args:
        tokens: Parsed tokens in input order

    Returns:
        Border widths, constraints and formatted other values
    """
    result = Aggregate()

    for token in tokens:
        if isinstance(token, ConstraintToken):
            result.constraints.apply(token)
        elif isinstance(token, BorderToken):
            result.borders.apply(token)
        else:
            result.others.append(format_value(token.value))

    return result
