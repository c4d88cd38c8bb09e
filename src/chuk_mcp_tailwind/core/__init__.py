"""
Conversion engine.

- TokenParser: one class token to a ParsedToken
- aggregate: fold tokens into borders, constraints and values
- format_value: numbers and literals to Dart text
- compose: pick the output shape
- TailwindConverter / convert: the whole pipeline
"""

from chuk_mcp_tailwind.core.aggregator import (
    Aggregate,
    BorderAccumulator,
    ConstraintAccumulator,
    aggregate,
)
from chuk_mcp_tailwind.core.composer import compose, compose_aggregate
from chuk_mcp_tailwind.core.converter import TailwindConverter, convert
from chuk_mcp_tailwind.core.formatter import format_number, format_percentage, format_value
from chuk_mcp_tailwind.core.parser import TokenParser, parse_number, parse_token

__all__ = [
    # Parsing
    "TokenParser",
    "parse_number",
    "parse_token",
    # Aggregation
    "Aggregate",
    "BorderAccumulator",
    "ConstraintAccumulator",
    "aggregate",
    # Formatting
    "format_number",
    "format_percentage",
    "format_value",
    # Composition
    "compose",
    "compose_aggregate",
    # Pipeline
    "TailwindConverter",
    "convert",
]
