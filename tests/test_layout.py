"""
Tests for layout configuration and presets.

Tests cover:
- LayoutConfig defaults, derived values and validation
- LayoutLoader discovery, overrides and bad files
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_notation.engraving import DEFAULT_LAYOUT, LayoutConfig, LayoutLoader


class TestLayoutConfig:
    """Tests for LayoutConfig."""

    def test_defaults(self) -> None:
        """Defaults describe the 300 x 280 quiz canvas."""
        layout = LayoutConfig()
        assert (layout.width, layout.height) == (300, 280)
        assert layout.staff_line_ys == (100, 120, 140, 160, 180)
        assert layout.staff_bottom == 180
        assert layout.staff_middle == 140
        assert layout.step_height == 10
        assert layout.center_x == 150

    def test_default_instance(self) -> None:
        """DEFAULT_LAYOUT equals a fresh default config."""
        assert DEFAULT_LAYOUT == LayoutConfig()

    def test_frozen(self) -> None:
        """Layouts cannot be changed after creation."""
        with pytest.raises(ValidationError):
            DEFAULT_LAYOUT.width = 400

    def test_unknown_field(self) -> None:
        """Unknown settings are rejected."""
        with pytest.raises(ValidationError):
            LayoutConfig(staff_lines=6)

    def test_width_minimum(self) -> None:
        """The canvas must leave room for a clef and a note."""
        with pytest.raises(ValidationError):
            LayoutConfig(width=50)

    def test_derived_values_follow_spacing(self) -> None:
        """Staff geometry scales with line spacing."""
        layout = LayoutConfig(staff_top=50, line_spacing=10)
        assert layout.staff_line_ys == (50, 60, 70, 80, 90)
        assert layout.step_height == 5


def write_preset(directory: Path, name: str, body: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.yaml"
    path.write_text(body)
    return path


class TestLayoutLoader:
    """Tests for LayoutLoader."""

    def test_builtin_presets(self) -> None:
        """The package ships default and wide presets."""
        loader = LayoutLoader()
        names = [p.name for p in loader.list_layouts()]
        assert "default" in names
        assert "wide" in names
        assert loader.get_layout("wide").width == 480
        assert loader.get_layout("default") == LayoutConfig()

    def test_default_when_unnamed(self) -> None:
        """No name means the default layout."""
        assert LayoutLoader().get_layout(None) == LayoutConfig()

    def test_missing_preset(self, temp_dir: Path) -> None:
        """Unknown names return None."""
        loader = LayoutLoader(library_path=temp_dir / "library")
        assert loader.get_layout("nope") is None
        assert loader.get_preset("nope") is None

    def test_project_overrides_library(self, temp_dir: Path) -> None:
        """Project presets win over library presets of the same name."""
        library = temp_dir / "library"
        project = temp_dir / "project"
        write_preset(library, "card", "name: card\nlayout:\n  width: 300\n")
        write_preset(
            project, "card", "name: card\ndescription: mine\nlayout:\n  width: 360\n"
        )

        loader = LayoutLoader(library_path=library, project_path=project)
        assert loader.get_layout("card").width == 360
        (preset,) = loader.list_layouts()
        assert preset.description == "mine"
        assert preset.to_dict() == {
            "name": "card",
            "description": "mine",
            "width": 360,
            "height": 280,
        }

    def test_name_defaults_to_file_stem(self, temp_dir: Path) -> None:
        """A preset without a name is named after its file."""
        write_preset(temp_dir, "compact", "layout:\n  line_spacing: 16\n")
        loader = LayoutLoader(library_path=temp_dir)
        assert loader.get_layout("compact").line_spacing == 16

    def test_lookup_by_declared_name(self, temp_dir: Path) -> None:
        """Presets are found by their declared name, not their file name."""
        write_preset(temp_dir, "my_big", "name: big\nlayout:\n  width: 600\n")
        loader = LayoutLoader(library_path=temp_dir)
        assert [p.name for p in loader.list_layouts()] == ["big"]
        assert loader.get_preset("big").layout.width == 600
        assert loader.get_preset("my_big") is None

    def test_project_default_overrides_unnamed_layout(self, temp_dir: Path) -> None:
        """A project preset named default replaces the built-in default."""
        project = temp_dir / "project"
        write_preset(project, "custom", "name: default\nlayout:\n  width: 500\n")
        loader = LayoutLoader(project_path=project)

        listed = {p.name: p for p in loader.list_layouts()}
        assert listed["default"].layout.width == 500
        assert loader.get_layout("default").width == 500
        assert loader.get_layout(None).width == 500

    def test_unnamed_layout_without_default_preset(self, temp_dir: Path) -> None:
        """Without a default preset the built-in defaults are used."""
        loader = LayoutLoader(library_path=temp_dir)
        assert loader.get_layout(None) == LayoutConfig()

    def test_invalid_presets_skipped(self, temp_dir: Path) -> None:
        """Broken YAML and invalid values are skipped, not fatal."""
        write_preset(temp_dir, "broken", "layout: [unclosed\n")
        write_preset(temp_dir, "invalid", "layout:\n  width: 10\n")
        write_preset(temp_dir, "unknown", "layout:\n  colour: red\n")
        write_preset(temp_dir, "empty", "")
        write_preset(temp_dir, "good", "layout:\n  width: 320\n")

        loader = LayoutLoader(library_path=temp_dir)
        assert [p.name for p in loader.list_layouts()] == ["good"]
        assert loader.get_layout("invalid") is None

    def test_cache(self, temp_dir: Path) -> None:
        """Presets are cached until the cache is cleared."""
        write_preset(temp_dir, "card", "layout:\n  width: 300\n")
        loader = LayoutLoader(library_path=temp_dir)
        assert loader.get_layout("card").width == 300

        write_preset(temp_dir, "card", "layout:\n  width: 400\n")
        assert loader.get_layout("card").width == 300
        loader.clear_cache()
        assert loader.get_layout("card").width == 400
