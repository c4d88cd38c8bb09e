"""
Result composer - decides the final output shape.

Entries are gathered as constraints, then border, then the other
values in order. Zero entries give the "0.0" sentinel, one entry is
returned verbatim, and more become a Dart list literal.
"""

from __future__ import annotations

from chuk_mcp_tailwind.constants import ZERO_VALUE, OutputKind
from chuk_mcp_tailwind.core.aggregator import (
    Aggregate,
    BorderAccumulator,
    ConstraintAccumulator,
)
from chuk_mcp_tailwind.core.formatter import format_number, format_value
from chuk_mcp_tailwind.models.result import ConversionResult


def render_constraints(constraints: ConstraintAccumulator) -> str | None:
    """Render BoxConstraints(...), or None if there are no constraints."""
    if constraints.is_empty():
        return None
    pairs = ", ".join(f"{key.value}: {format_value(value)}" for key, value in constraints.items())
    return f"BoxConstraints({pairs})"


def render_border(borders: BorderAccumulator) -> str | None:
    """Render Border.all(...) or Border(...), or None if no side is set."""
    if borders.is_empty():
        return None

    uniform = borders.uniform_width()
    if uniform is not None:
        return f"Border.all(width: {format_number(uniform)})"

    sides = ", ".join(
        f"{side.value}: BorderSide(width: {format_number(width)})"
        for side, width in borders.resolved().items()
    )
    return f"Border({sides})"


def compose(
    borders: BorderAccumulator,
    constraints: ConstraintAccumulator,
    others: list[str],
) -> ConversionResult:
    """
    Build the final result from aggregated parts.

    Args:
        borders: Accumulated border widths
        constraints: Accumulated constraints
        others: Formatted values in input order

    Returns:
        Conversion result with its output kind
    """
    entries: list[str] = []

    constraint_expr = render_constraints(constraints)
    if constraint_expr is not None:
        entries.append(constraint_expr)

    border_expr = render_border(borders)
    if border_expr is not None:
        entries.append(border_expr)

    entries.extend(others)

    if not entries:
        return ConversionResult(output_text=ZERO_VALUE, output_kind=OutputKind.EMPTY)
    if len(entries) == 1:
        return ConversionResult(
            output_text=entries[0], output_kind=OutputKind.SINGLE, entries=entries
        )
    return ConversionResult(
        output_text=f"[{', '.join(entries)}]",
        output_kind=OutputKind.AGGREGATE,
        entries=entries,
    )


def compose_aggregate(parts: Aggregate) -> ConversionResult:
    """Compose directly from an aggregation pass."""
    return compose(parts.borders, parts.constraints, parts.others)
