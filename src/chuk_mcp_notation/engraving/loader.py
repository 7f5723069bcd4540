"""
Layout loader - discovers and loads layout presets.

Presets can come from:
1. Built-in library (shipped with package)
2. Project layouts (user's project/layouts directory)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_notation.engraving.config import LayoutConfig

logger = logging.getLogger(__name__)

# Preset used when no layout name is given
DEFAULT_PRESET = "default"


@dataclass(frozen=True)
class LayoutPreset:
    """A named layout loaded from YAML."""

    name: str
    description: str
    layout: LayoutConfig

    def to_dict(self) -> dict[str, Any]:
        """Summary for listings."""
        return {
            "name": self.name,
            "description": self.description,
            "width": self.layout.width,
            "height": self.layout.height,
        }


class LayoutLoader:
    """
    Discovers and loads layout presets.

    Presets are loaded from YAML files in the library and project directories.
    Project presets override library presets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the layout loader.

        Args:
            library_path: Path to built-in preset library
            project_path: Path to project layouts directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, LayoutPreset] = {}

    def list_layouts(self) -> list[LayoutPreset]:
        """
        List all available presets, sorted by name.

        Project presets take precedence over library presets.
        """
        presets = self._index()
        return [presets[name] for name in sorted(presets)]

    def get_preset(self, name: str) -> LayoutPreset | None:
        """
        Get a preset by the name it declares.

        Args:
            name: Preset name

        Returns:
            LayoutPreset if found, None otherwise
        """
        if name not in self._cache:
            self._cache.update(self._index())
        return self._cache.get(name)

    def get_layout(self, name: str | None = None) -> LayoutConfig | None:
        """
        Get the layout of a preset.

        None selects the 'default' preset, falling back to the built-in
        defaults when no such preset exists.

        Args:
            name: Preset name

        Returns:
            LayoutConfig if found, None otherwise
        """
        if name is None:
            preset = self.get_preset(DEFAULT_PRESET)
            return preset.layout if preset else LayoutConfig()
        preset = self.get_preset(name)
        return preset.layout if preset else None

    def _index(self) -> dict[str, LayoutPreset]:
        """All presets keyed by name, project presets replacing library ones."""
        presets: dict[str, LayoutPreset] = {}

        for directory in (self.library_path, self.project_path):
            if directory and directory.exists():
                for path in sorted(directory.glob("*.yaml")):
                    preset = self._load_preset_file(path)
                    if preset:
                        presets[preset.name] = preset

        return presets

    def _load_preset_file(self, path: Path) -> LayoutPreset | None:
        """Load a preset from a YAML file, skipping unreadable or invalid files."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            preset = self._parse_preset(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, TypeError, AttributeError) as e:
            logger.warning(f"Skipping layout preset {path}: {e}")
            return None

        logger.debug(f"Loaded layout preset '{preset.name}' from {path}")
        return preset

    def _parse_preset(self, data: dict[str, Any], default_name: str) -> LayoutPreset:
        """Parse a preset from YAML data."""
        return LayoutPreset(
            name=data.get("name", default_name),
            description=data.get("description", ""),
            layout=LayoutConfig.model_validate(data.get("layout") or {}),
        )

    def clear_cache(self) -> None:
        """Clear the preset cache."""
        self._cache.clear()
