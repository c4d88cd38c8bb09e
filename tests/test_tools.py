"""
Tests for MCP tools.

Tests the MCP tool implementations for conversion and themes.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_tailwind.themes import ThemeLoader
from chuk_mcp_tailwind.tools import register_conversion_tools, register_theme_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def theme_loader(library_path: Path, temp_dir: Path) -> ThemeLoader:
    """Loader over the real library and an empty project directory."""
    return ThemeLoader(library_path=library_path, project_path=temp_dir / "themes")


class TestConversionTools:
    """Tests for conversion tools."""

    @pytest.mark.asyncio
    async def test_convert(self, theme_loader: ThemeLoader):
        """Convert returns output, kind and entries."""
        mcp = MockMCPServer("test")
        tools = register_conversion_tools(mcp, theme_loader)

        result = await tools["tailwind_convert"](classes="p-4 rounded-lg")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["output"] == "[16.0, 12.0]"
        assert data["kind"] == "aggregate"
        assert data["label"] == "Flutter List<dynamic>"
        assert data["copyable"] is True
        assert data["entries"] == ["16.0", "12.0"]
        assert data["theme"] == "tailwind"

    @pytest.mark.asyncio
    async def test_convert_empty(self, theme_loader: ThemeLoader):
        """Empty input is a success with the 0.0 sentinel."""
        mcp = MockMCPServer("test")
        tools = register_conversion_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_convert"](classes="  "))
        assert data["status"] == "success"
        assert data["output"] == "0.0"
        assert data["kind"] == "empty"
        assert data["copyable"] is False

    @pytest.mark.asyncio
    async def test_convert_unknown_theme(self, theme_loader: ThemeLoader):
        """Unknown theme is an error."""
        mcp = MockMCPServer("test")
        tools = register_conversion_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_convert"](classes="p-4", theme="nope"))
        assert data["status"] == "error"
        assert "nope" in data["message"]

    @pytest.mark.asyncio
    async def test_convert_project_theme(self, theme_loader: ThemeLoader, temp_dir: Path):
        """A project theme is picked up by name."""
        themes_dir = temp_dir / "themes"
        themes_dir.mkdir()
        (themes_dir / "dense.yaml").write_text("name: dense\nspacing_unit: 2\n")

        mcp = MockMCPServer("test")
        tools = register_conversion_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_convert"](classes="p-4", theme="dense"))
        assert data["status"] == "success"
        assert data["output"] == "8.0"
        assert data["theme"] == "dense"

    @pytest.mark.asyncio
    async def test_explain(self, theme_loader: ThemeLoader):
        """Explain reports each token and whether it was dropped."""
        mcp = MockMCPServer("test")
        tools = register_conversion_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_explain"](classes="border-x-2 flex max-w-lg"))
        assert data["status"] == "success"
        assert data["count"] == 3
        assert data["dropped"] == 1

        border, flex, constraint = data["tokens"]
        assert border["parsed"]["kind"] == "border"
        assert border["parsed"]["sides"] == ["right", "left"]
        assert border["parsed"]["width"] == 2.0
        assert flex["dropped"] is True
        assert flex["parsed"] is None
        assert constraint["parsed"] == {"kind": "constraint", "key": "maxWidth", "value": 512.0}

    @pytest.mark.asyncio
    async def test_explain_sides_in_fixed_order(self, theme_loader: ThemeLoader):
        """Border sides are listed top, right, bottom, left."""
        mcp = MockMCPServer("test")
        tools = register_conversion_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_explain"](classes="border border-y"))
        assert data["tokens"][0]["parsed"]["sides"] == ["top", "right", "bottom", "left"]
        assert data["tokens"][1]["parsed"]["sides"] == ["top", "bottom"]

    @pytest.mark.asyncio
    async def test_convert_sees_edited_theme(self, theme_loader: ThemeLoader):
        """Edits to a copied project theme apply once the loader cache is cleared."""
        mcp = MockMCPServer("test")
        tools = register_conversion_tools(mcp, theme_loader)
        theme_tools = register_theme_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_convert"](classes="p-4"))
        assert data["output"] == "16.0"

        copied = json.loads(await theme_tools["tailwind_copy_theme_to_project"](name="tailwind"))
        path = Path(copied["path"])
        path.write_text(path.read_text().replace("spacing_unit: 4", "spacing_unit: 8"))
        theme_loader.clear_cache()

        data = json.loads(await tools["tailwind_convert"](classes="p-4"))
        assert data["output"] == "32.0"

        data = json.loads(await tools["tailwind_explain"](classes="p-4"))
        assert data["tokens"][0]["parsed"]["value"] == 32.0

    def test_tools_registered(self, theme_loader: ThemeLoader):
        """Tools are registered on the server."""
        mcp = MockMCPServer("test")
        register_conversion_tools(mcp, theme_loader)
        assert set(mcp.tools) == {"tailwind_convert", "tailwind_explain"}


class TestThemeTools:
    """Tests for theme tools."""

    @pytest.mark.asyncio
    async def test_list_themes(self, theme_loader: ThemeLoader):
        """Lists the library theme."""
        mcp = MockMCPServer("test")
        tools = register_theme_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_list_themes"]())
        assert data["status"] == "success"
        assert data["count"] >= 1
        assert "tailwind" in [t["name"] for t in data["themes"]]

    @pytest.mark.asyncio
    async def test_describe_theme(self, theme_loader: ThemeLoader):
        """Describe returns the tables."""
        mcp = MockMCPServer("test")
        tools = register_theme_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_describe_theme"](name="tailwind"))
        assert data["status"] == "success"
        assert data["theme"]["spacing_unit"] == 4.0
        assert data["theme"]["radii"]["full"] == "BoxShape.circle"
        assert data["theme"]["sizes"]["lg"] == 512.0

    @pytest.mark.asyncio
    async def test_describe_missing(self, theme_loader: ThemeLoader):
        """Describe of an unknown theme is an error."""
        mcp = MockMCPServer("test")
        tools = register_theme_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_describe_theme"](name="nope"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_copy_theme(self, theme_loader: ThemeLoader, temp_dir: Path):
        """Copy writes the project file once, then refuses."""
        mcp = MockMCPServer("test")
        tools = register_theme_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_copy_theme_to_project"](name="tailwind"))
        assert data["status"] == "success"
        assert Path(data["path"]) == temp_dir / "themes" / "tailwind.yaml"

        data = json.loads(await tools["tailwind_copy_theme_to_project"](name="tailwind"))
        assert data["status"] == "error"
        assert "already exists" in data["message"]

    @pytest.mark.asyncio
    async def test_copy_missing(self, theme_loader: ThemeLoader):
        """Copying an unknown theme is an error."""
        mcp = MockMCPServer("test")
        tools = register_theme_tools(mcp, theme_loader)

        data = json.loads(await tools["tailwind_copy_theme_to_project"](name="nope"))
        assert data["status"] == "error"
