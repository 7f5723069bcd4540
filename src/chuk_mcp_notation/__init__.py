"""
CHUK Notation - music-notation layout engine and MCP server.

Turns an abstract note or symbol description into the exact geometry
needed to draw it on a five-line staff.
"""

from chuk_mcp_notation.constants import Clef, PrimitiveRole, StemDirection, SymbolType
from chuk_mcp_notation.core import Letter, NoteDuration, Pitch, steps_from_reference
from chuk_mcp_notation.engraving import (
    DEFAULT_LAYOUT,
    LayoutConfig,
    LayoutLoader,
    RenderScene,
    lookup,
    render,
    resolve,
    scene_to_svg,
)
from chuk_mcp_notation.models import NoteSpec, RenderRequest, SymbolSpec

__version__ = "0.1.0"

__all__ = [
    "Clef",
    "DEFAULT_LAYOUT",
    "LayoutConfig",
    "LayoutLoader",
    "Letter",
    "NoteDuration",
    "NoteSpec",
    "Pitch",
    "PrimitiveRole",
    "RenderRequest",
    "RenderScene",
    "StemDirection",
    "SymbolSpec",
    "SymbolType",
    "lookup",
    "render",
    "resolve",
    "scene_to_svg",
    "steps_from_reference",
]
