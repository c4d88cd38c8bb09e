#!/usr/bin/env python3
"""
Example: Customizing lookup tables with a project theme.

Copies the built-in theme into a temporary project, edits it, and
converts the same classes with both.

Usage:
    python examples/custom_theme.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_tailwind import TailwindConverter
from chuk_mcp_tailwind.themes import ThemeLoader

CLASSES = "p-4 rounded-lg max-w-prose"


def main() -> None:
    """Compare the stock theme with an edited project copy."""
    library_path = Path(__file__).parent.parent / "src/chuk_mcp_tailwind/themes/library"

    with tempfile.TemporaryDirectory() as tmp:
        loader = ThemeLoader(library_path=library_path, project_path=Path(tmp))

        stock = loader.get_theme("tailwind")
        if not stock:
            print("Failed to load theme")
            return
        print(f"stock:  {TailwindConverter(stock).convert(CLASSES).output_text}")

        path = loader.copy_to_project("tailwind")
        if path is None:
            print("Failed to copy theme")
            return
        path.write_text(
            path.read_text()
            .replace("spacing_unit: 4", "spacing_unit: 8")
            .replace("  lg: 12", "  lg: 20")
            .replace("sizes:\n", "sizes:\n  prose: 640\n")
        )
        loader.clear_cache()

        custom = loader.get_theme("tailwind")
        if not custom:
            print("Failed to load edited theme")
            return
        print(f"custom: {TailwindConverter(custom).convert(CLASSES).output_text}")


if __name__ == "__main__":
    main()
