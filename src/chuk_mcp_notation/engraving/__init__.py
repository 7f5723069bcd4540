"""
Engraving - turns a render request into drawable geometry.

- geometry: diatonic step -> notehead y, ledger lines, stem pivot
- note: notehead, stem and flags
- symbols: closed catalog of non-note glyphs
- staff: full scene composition (render)
- scene: primitives and RenderScene
- svg: SVG / HTML output
- config, loader: layout constants and YAML presets
"""

from chuk_mcp_notation.engraving.config import DEFAULT_LAYOUT, LayoutConfig
from chuk_mcp_notation.engraving.geometry import StaffPosition, resolve
from chuk_mcp_notation.engraving.loader import LayoutLoader, LayoutPreset
from chuk_mcp_notation.engraving.note import compose_note, stem_direction
from chuk_mcp_notation.engraving.scene import (
    Circle,
    Ellipse,
    Line,
    Path,
    Primitive,
    Rect,
    RenderScene,
    Text,
)
from chuk_mcp_notation.engraving.staff import render
from chuk_mcp_notation.engraving.svg import build_html, scene_to_svg
from chuk_mcp_notation.engraving.symbols import (
    CatalogEntry,
    SymbolCategory,
    SymbolKind,
    catalog_entries,
    lookup,
)

__all__ = [
    # Config
    "DEFAULT_LAYOUT",
    "LayoutConfig",
    "LayoutLoader",
    "LayoutPreset",
    # Geometry
    "StaffPosition",
    "resolve",
    "compose_note",
    "stem_direction",
    # Symbols
    "CatalogEntry",
    "SymbolCategory",
    "SymbolKind",
    "catalog_entries",
    "lookup",
    # Scene
    "Circle",
    "Ellipse",
    "Line",
    "Path",
    "Primitive",
    "Rect",
    "RenderScene",
    "Text",
    "render",
    # Output
    "build_html",
    "scene_to_svg",
]
