"""
Converter - the single entry point from class string to Dart.

Conversion is a pure function of the input text and the theme:
split on whitespace, parse each token, fold, compose.
"""

from __future__ import annotations

import logging

from chuk_mcp_tailwind.core.aggregator import aggregate
from chuk_mcp_tailwind.core.composer import compose_aggregate
from chuk_mcp_tailwind.core.parser import TokenParser
from chuk_mcp_tailwind.models.result import ConversionResult, TokenReport
from chuk_mcp_tailwind.models.theme import Theme

logger = logging.getLogger(__name__)


class TailwindConverter:
    """
    Converts utility-class strings to Flutter expressions.

    Holds no per-call state; every conversion builds fresh
    accumulators.
    """

    def __init__(self, theme: Theme | None = None):
        """
        Initialize the converter.

        Args:
            theme: Lookup tables to use (default: built-in Tailwind scale)
        """
        self.parser = TokenParser(theme)

    @property
    def theme(self) -> Theme:
        return self.parser.theme

    def convert(self, input_text: str) -> ConversionResult:
        """
        Convert a whitespace-separated class string.

        Args:
            input_text: e.g. "p-4 rounded-lg border-t-2"

        Returns:
            Rendered result; EMPTY with "0.0" when nothing matched
        """
        tokens = input_text.split()
        parsed = [p for p in (self.parser.parse(t) for t in tokens) if p is not None]
        result = compose_aggregate(aggregate(parsed))
        logger.debug(
            f"Converted {len(tokens)} tokens ({len(tokens) - len(parsed)} dropped) "
            f"-> {result.output_kind.value}"
        )
        return result

    def explain(self, input_text: str) -> list[TokenReport]:
        """
        Report how each token was interpreted, in order.

        Args:
            input_text: Whitespace-separated class string

        Returns:
            One report per token, with parsed=None for dropped tokens
        """
        return [
            TokenReport(token=token, parsed=self.parser.parse(token))
            for token in input_text.split()
        ]


_default_converter = TailwindConverter()


def convert(input_text: str) -> ConversionResult:
    """Convert a class string using the built-in tables."""
    return _default_converter.convert(input_text)
