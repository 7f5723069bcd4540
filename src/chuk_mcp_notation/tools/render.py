"""
Render tools - MCP tools for drawing notes and symbols.

Tools for rendering a single note or symbol to a scene or SVG, and for
discovering the symbol catalog and layout presets.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_notation.constants import ErrorMessages
from chuk_mcp_notation.engraving import LayoutConfig, LayoutLoader, catalog_entries, render
from chuk_mcp_notation.engraving.svg import scene_to_svg
from chuk_mcp_notation.models.request import RenderRequest

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def build_request(
    pitch: str | None = None,
    duration: str | None = None,
    clef: str | None = None,
    symbol: str | None = None,
    symbol_type: str = "shape",
    has_sharp: bool = False,
    has_flat: bool = False,
    has_natural: bool = False,
) -> RenderRequest:
    """
    Build a render request from flat tool arguments.

    Raises:
        ValueError: If the arguments do not describe exactly one note or symbol.
    """
    data: dict[str, Any] = {"clef": clef}
    if pitch is not None or duration is not None:
        if pitch is None or duration is None:
            raise ValueError(ErrorMessages.PITCH_REQUIRES_DURATION)
        data["note"] = {
            "pitch": pitch,
            "duration": duration,
            "has_sharp": has_sharp,
            "has_flat": has_flat,
            "has_natural": has_natural,
        }
    if symbol is not None:
        data["symbol"] = {"type": symbol_type, "value": symbol}
    return RenderRequest.model_validate(data)


def resolve_layout(loader: LayoutLoader, name: str | None) -> LayoutConfig:
    """
    Layout for a preset name (None = default).

    Raises:
        ValueError: If the preset does not exist.
    """
    layout = loader.get_layout(name)
    if layout is None:
        raise ValueError(ErrorMessages.LAYOUT_NOT_FOUND.format(name=name))
    return layout


def register_render_tools(mcp: ChukMCPServer, loader: LayoutLoader) -> dict[str, Any]:
    """
    Register rendering tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: Layout preset loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def notation_render(
        pitch: str | None = None,
        duration: str | None = None,
        clef: str | None = None,
        symbol: str | None = None,
        symbol_type: str = "shape",
        has_sharp: bool = False,
        has_flat: bool = False,
        has_natural: bool = False,
        layout: str | None = None,
    ) -> str:
        """
        Render a note or a symbol to a scene of drawing primitives.

        Give either pitch + duration (a note) or symbol (a symbol), not both.

        Args:
            pitch: Pitch like 'E4' (letter A-G plus octave digit)
            duration: 'whole', 'half', 'quarter', 'eighth', 'sixteenth', 'thirty-second'
            clef: 'treble' (default) or 'bass'
            symbol: Symbol value, e.g. 'sharp', 'whole_rest', or dynamics text like 'ff'
            symbol_type: 'shape' (catalog glyph) or 'text' (literal characters)
            has_sharp: Draw a sharp in front of the note
            has_flat: Draw a flat in front of the note
            has_natural: Draw a natural in front of the note
            layout: Optional layout preset name (e.g. 'wide')

        Returns:
            JSON string with the render scene

        Example:
            notation_render(pitch="C4", duration="whole")
        """
        try:
            request = build_request(
                pitch, duration, clef, symbol, symbol_type, has_sharp, has_flat, has_natural
            )
            scene = render(request, resolve_layout(loader, layout))
            return json.dumps(
                {
                    "status": "success",
                    "request": request.to_dict(),
                    "scene": scene.to_dict(),
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to render")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_render"] = notation_render

    @mcp.tool  # type: ignore[arg-type]
    async def notation_render_svg(
        pitch: str | None = None,
        duration: str | None = None,
        clef: str | None = None,
        symbol: str | None = None,
        symbol_type: str = "shape",
        has_sharp: bool = False,
        has_flat: bool = False,
        has_natural: bool = False,
        layout: str | None = None,
        scale: float = 1.0,
    ) -> str:
        """
        Render a note or a symbol to an SVG document.

        Takes the same arguments as notation_render, plus a display scale.

        Args:
            pitch: Pitch like 'E4'
            duration: Note value
            clef: 'treble' (default) or 'bass'
            symbol: Symbol value
            symbol_type: 'shape' or 'text'
            has_sharp: Draw a sharp in front of the note
            has_flat: Draw a flat in front of the note
            has_natural: Draw a natural in front of the note
            layout: Optional layout preset name
            scale: Uniform display scale (1.0 = logical canvas size)

        Returns:
            JSON string with the SVG markup

        Example:
            notation_render_svg(symbol="fermata", scale=0.5)
        """
        try:
            request = build_request(
                pitch, duration, clef, symbol, symbol_type, has_sharp, has_flat, has_natural
            )
            scene = render(request, resolve_layout(loader, layout))
            return json.dumps(
                {
                    "status": "success",
                    "svg": scene_to_svg(scene, scale=scale),
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to render SVG")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_render_svg"] = notation_render_svg

    @mcp.tool  # type: ignore[arg-type]
    async def notation_list_symbols(category: str | None = None) -> str:
        """
        List every symbol the engine can draw.

        Args:
            category: Optional filter ('dynamics', 'accidentals', 'structure', 'rests')

        Returns:
            JSON string with the symbol catalog
        """
        try:
            entries = [
                e for e in catalog_entries() if category is None or e.category.value == category
            ]
            return json.dumps(
                {
                    "status": "success",
                    "symbols": [
                        {
                            "value": e.value,
                            "type": e.type.value,
                            "category": e.category.value,
                            "staff_anchored": e.staff_anchored,
                        }
                        for e in entries
                    ],
                    "count": len(entries),
                }
            )
        except Exception as e:
            logger.exception("Failed to list symbols")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_list_symbols"] = notation_list_symbols

    @mcp.tool  # type: ignore[arg-type]
    async def notation_list_layouts() -> str:
        """
        List available layout presets.

        Returns:
            JSON string with preset names, descriptions and canvas sizes
        """
        try:
            presets = loader.list_layouts()
            return json.dumps(
                {
                    "status": "success",
                    "layouts": [p.to_dict() for p in presets],
                    "count": len(presets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list layouts")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_list_layouts"] = notation_list_layouts

    return tools
