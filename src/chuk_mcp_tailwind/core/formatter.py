"""
Value formatting - numbers and literals to Dart source text.

Numbers always carry exactly one decimal place (4 -> "4.0") so Dart
reads them as doubles. Literal strings are already valid Dart and
pass through untouched.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from chuk_mcp_tailwind.constants import INFINITY, NAN
from chuk_mcp_tailwind.models.token import LayoutValue

_ONE_PLACE = Decimal("0.1")
_WHOLE = Decimal("1")

# Wide enough for any finite double
_CONTEXT = Context(prec=400)


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return NAN
    return INFINITY if value > 0 else f"-{INFINITY}"


def _fixed(value: float, quantum: Decimal) -> str:
    # Exact binary value, halves away from zero
    if value == 0:
        value = 0.0
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT))


def format_number(value: float) -> str:
    """Render a number fixed-point with one decimal place."""
    value = float(value)
    if not math.isfinite(value):
        return _non_finite(value)
    return _fixed(value, _ONE_PLACE)


def format_percentage(fraction: float) -> str:
    """Render a 0-1 fraction as a quoted whole percentage ('33%')."""
    percent = fraction * 100
    if not math.isfinite(percent):
        return _non_finite(percent)
    return f"'{_fixed(percent, _WHOLE)}%'"


def format_value(value: LayoutValue) -> str:
    """Render a number or pass a literal through."""
    if isinstance(value, str):
        return value
    return format_number(value)
