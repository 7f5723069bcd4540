"""
Tests for MCP tools.

Tests the MCP tool implementations for rendering, catalog discovery,
layouts and the reference sheet.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_notation.engraving import LayoutLoader
from chuk_mcp_notation.tools.reference import register_reference_tools
from chuk_mcp_notation.tools.render import build_request, register_render_tools


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
def loader(temp_dir: Path) -> LayoutLoader:
    """Loader with the built-in library and an empty project directory."""
    return LayoutLoader(project_path=temp_dir / "layouts")


@pytest.fixture
def render_tools(loader: LayoutLoader) -> dict:
    """Registered render tools."""
    return register_render_tools(MockMCPServer("test"), loader)


@pytest.fixture
def reference_tools(loader: LayoutLoader) -> dict:
    """Registered reference tools."""
    return register_reference_tools(MockMCPServer("test"), loader)


class TestBuildRequest:
    """Tests for flat-argument request building."""

    def test_note(self) -> None:
        """pitch + duration make a note request."""
        request = build_request(pitch="E4", duration="quarter", clef="bass", has_flat=True)
        assert request.note.pitch == "E4"
        assert request.note.has_flat
        assert request.clef.value == "bass"

    def test_symbol(self) -> None:
        """symbol makes a symbol request."""
        request = build_request(symbol="ff", symbol_type="text")
        assert request.symbol.value == "ff"
        assert request.note is None

    def test_pitch_without_duration(self) -> None:
        """A pitch alone is not enough."""
        with pytest.raises(ValueError, match="both 'pitch' and 'duration'"):
            build_request(pitch="E4")

    def test_both(self) -> None:
        """A note and a symbol together are rejected."""
        with pytest.raises(ValueError):
            build_request(pitch="E4", duration="half", symbol="tie")


class TestRenderTools:
    """Tests for render tools."""

    def test_registers_tools(self, render_tools: dict) -> None:
        """All render tools are registered."""
        assert set(render_tools) == {
            "notation_render",
            "notation_render_svg",
            "notation_list_symbols",
            "notation_list_layouts",
        }

    @pytest.mark.asyncio
    async def test_render_note(self, render_tools: dict) -> None:
        """Render a note to a scene."""
        result = await render_tools["notation_render"](pitch="C4", duration="whole")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["request"]["note"]["pitch"] == "C4"
        roles = [p["role"] for p in data["scene"]["primitives"]]
        assert roles.count("ledger_line") == 1
        assert "stem" not in roles

    @pytest.mark.asyncio
    async def test_render_symbol(self, render_tools: dict) -> None:
        """Render a rest with its staff."""
        result = await render_tools["notation_render"](symbol="whole_rest")
        data = json.loads(result)
        assert data["status"] == "success"
        roles = [p["role"] for p in data["scene"]["primitives"]]
        assert roles == ["staff_line"] * 5 + ["symbol"]

    @pytest.mark.asyncio
    async def test_render_with_layout(self, render_tools: dict) -> None:
        """A named preset changes the canvas."""
        result = await render_tools["notation_render"](symbol="tie", layout="wide")
        data = json.loads(result)
        assert data["scene"]["width"] == 480

    @pytest.mark.asyncio
    async def test_render_unknown_layout(self, render_tools: dict) -> None:
        """Unknown presets are reported as errors."""
        result = await render_tools["notation_render"](symbol="tie", layout="poster")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "poster" in data["message"]

    @pytest.mark.asyncio
    async def test_render_invalid_duration(self, render_tools: dict) -> None:
        """Invalid durations are reported as errors."""
        result = await render_tools["notation_render"](pitch="C4", duration="breve")
        data = json.loads(result)
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_render_malformed_pitch(self, render_tools: dict) -> None:
        """A malformed pitch still succeeds, with nothing drawn for the note."""
        result = await render_tools["notation_render"](pitch="X9", duration="quarter")
        data = json.loads(result)
        assert data["status"] == "success"
        roles = [p["role"] for p in data["scene"]["primitives"]]
        assert "notehead" not in roles
        assert "clef" in roles

    @pytest.mark.asyncio
    async def test_render_svg(self, render_tools: dict) -> None:
        """Render to SVG with a scale."""
        result = await render_tools["notation_render_svg"](
            pitch="B4", duration="sixteenth", scale=0.5
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["svg"].startswith("<svg")
        assert 'width="150"' in data["svg"]
        assert data["svg"].count("<path") == 2

    @pytest.mark.asyncio
    async def test_render_svg_bad_scale(self, render_tools: dict) -> None:
        """Non-positive scales are reported as errors."""
        result = await render_tools["notation_render_svg"](symbol="tie", scale=-1)
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_list_symbols(self, render_tools: dict) -> None:
        """List the catalog."""
        data = json.loads(await render_tools["notation_list_symbols"]())
        assert data["status"] == "success"
        assert data["count"] == 20
        values = {s["value"] for s in data["symbols"]}
        assert {"ff", "cresc.", "sharp", "fermata", "eighth_rest"} <= values

    @pytest.mark.asyncio
    async def test_list_symbols_by_category(self, render_tools: dict) -> None:
        """Filter the catalog by category."""
        data = json.loads(await render_tools["notation_list_symbols"](category="rests"))
        assert data["count"] == 4
        assert all(s["staff_anchored"] for s in data["symbols"])

    @pytest.mark.asyncio
    async def test_list_layouts(self, render_tools: dict) -> None:
        """List layout presets."""
        data = json.loads(await render_tools["notation_list_layouts"]())
        assert data["status"] == "success"
        names = [layout["name"] for layout in data["layouts"]]
        assert names == ["default", "wide"]


class TestReferenceTools:
    """Tests for reference tools."""

    @pytest.mark.asyncio
    async def test_reference_json(self, reference_tools: dict) -> None:
        """Render one section as scenes."""
        result = await reference_tools["notation_reference"](section="treble")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["count"] == 6
        assert [e["label"] for e in data["entries"]] == ["C4", "E4", "G4", "B4", "D5", "F5"]
        assert data["entries"][0]["scene"]["schema"] == "render_scene/v1"

    @pytest.mark.asyncio
    async def test_reference_html(self, reference_tools: dict) -> None:
        """Render the whole sheet as one HTML page."""
        result = await reference_tools["notation_reference"](output="html")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["html"].count("<svg") == 38

    @pytest.mark.asyncio
    async def test_reference_unknown_section(self, reference_tools: dict) -> None:
        """Unknown sections are reported as errors."""
        result = await reference_tools["notation_reference"](section="chords")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "chords" in data["message"]
