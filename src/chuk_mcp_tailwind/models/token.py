"""
Parsed token model - the tagged result of parsing one utility class.

Each variant carries only the data its family needs, so a border
can never also carry a radius. The ``kind`` field discriminates.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_serializer

from chuk_mcp_tailwind.constants import ConstraintKey, Side

# A resolved number or a pre-formatted Dart literal
LayoutValue = float | str


class KeywordToken(BaseModel):
    """Whole-token keyword mapped straight to a Dart literal (w-full)."""

    kind: Literal["keyword"] = "keyword"
    text: str = Field(..., description="Pre-formatted Dart expression")

    model_config = {"frozen": True}

    @property
    def value(self) -> LayoutValue:
        return self.text


class BorderToken(BaseModel):
    """Border width applied to a set of sides (border-t-2)."""

    kind: Literal["border"] = "border"
    sides: frozenset[Side] = Field(..., description="Sides this token affects")
    width: float = Field(1.0, description="Width in logical pixels")

    model_config = {"frozen": True}

    @field_serializer("sides")
    def _serialize_sides(self, sides: frozenset[Side]) -> list[Side]:
        # Stable top/right/bottom/left order instead of hash order
        return [side for side in Side if side in sides]


class ConstraintToken(BaseModel):
    """A single BoxConstraints argument (max-w-lg)."""

    kind: Literal["constraint"] = "constraint"
    key: ConstraintKey = Field(..., description="Constraint argument name")
    value: LayoutValue = Field(..., description="Resolved size or literal")

    model_config = {"frozen": True}


class RadiusToken(BaseModel):
    """Corner radius or shape literal (rounded-lg, rounded-full)."""

    kind: Literal["radius"] = "radius"
    value: LayoutValue = Field(..., description="Radius or shape literal")

    model_config = {"frozen": True}


class SpacingToken(BaseModel):
    """Numeric size already scaled to logical pixels (p-4, w-px)."""

    kind: Literal["spacing"] = "spacing"
    value: float = Field(..., description="Size in logical pixels")

    model_config = {"frozen": True}


class OtherToken(BaseModel):
    """Catch-all formatted value, e.g. a percentage string (w-1/2)."""

    kind: Literal["other"] = "other"
    value: LayoutValue = Field(..., description="Value or literal")

    model_config = {"frozen": True}


ParsedToken = Annotated[
    KeywordToken | BorderToken | ConstraintToken | RadiusToken | SpacingToken | OtherToken,
    Field(discriminator="kind"),
]
