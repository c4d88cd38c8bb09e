#!/usr/bin/env python3
"""
Example: Converting Tailwind classes to Flutter.

Shows the three output shapes (empty, single, aggregate) and how
each token was interpreted.

Usage:
    python examples/convert_classes.py
"""

from chuk_mcp_tailwind import OutputKind, TailwindConverter

SAMPLES = [
    "",
    "p-4",
    "w-1/3",
    "max-w-sm max-w-lg",
    "border-t-2 border-4",
    "border-t-2 border-l-6",
    "border-[3px]",
    "p-4 rounded-lg",
    "min-h-screen max-w-2xl border-x rounded-full w-full flex",
]


def main() -> None:
    """Convert a handful of class strings."""
    print("CHUK Tailwind -> Flutter Demo")
    print("=" * 40)
    print()

    converter = TailwindConverter()

    for classes in SAMPLES:
        result = converter.convert(classes)
        print(f"{classes or '(empty)'}")
        print(f"  {result.label}: {result.output_text}")
        if result.output_kind == OutputKind.AGGREGATE:
            for entry in result.entries:
                print(f"    - {entry}")
        print()

    print("Token breakdown:")
    for report in converter.explain(SAMPLES[-1]):
        kind = report.parsed.kind if report.parsed else "dropped"
        print(f"  {report.token:<16} {kind}")


if __name__ == "__main__":
    main()
