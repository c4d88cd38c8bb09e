"""
Tailwind CSS utility classes to Flutter layout expressions.

    >>> from chuk_mcp_tailwind import convert
    >>> convert("p-4 rounded-lg").output_text
    '[16.0, 12.0]'
"""

from chuk_mcp_tailwind.constants import OutputKind
from chuk_mcp_tailwind.core import TailwindConverter, TokenParser, convert, parse_token
from chuk_mcp_tailwind.models import ConversionResult, ParsedToken, Theme

__all__ = [
    "ConversionResult",
    "OutputKind",
    "ParsedToken",
    "TailwindConverter",
    "Theme",
    "TokenParser",
    "convert",
    "parse_token",
]
