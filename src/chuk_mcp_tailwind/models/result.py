"""
Conversion result models.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_tailwind.constants import OUTPUT_LABELS, OutputKind
from chuk_mcp_tailwind.models.token import ParsedToken


class ConversionResult(BaseModel):
    """
    Rendered output of one conversion.

    Consumers must check ``output_kind``: the text is not always a
    single expression.
    """

    output_text: str = Field(..., description="Rendered Dart expression or list")
    output_kind: OutputKind = Field(..., description="Empty, single or aggregate")
    entries: list[str] = Field(default_factory=list, description="Individual expressions")

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        """Display label for the output kind."""
        return OUTPUT_LABELS[self.output_kind]

    @property
    def copyable(self) -> bool:
        """Whether there is anything worth copying."""
        return self.output_kind != OutputKind.EMPTY


class TokenReport(BaseModel):
    """How a single class token was interpreted."""

    token: str = Field(..., description="Token as written")
    parsed: ParsedToken | None = Field(None, description="Parse result, None if dropped")

    @property
    def dropped(self) -> bool:
        return self.parsed is None
