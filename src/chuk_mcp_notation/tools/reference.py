"""
Reference tools - MCP tools for the study reference sheet.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_notation.constants import ErrorMessages
from chuk_mcp_notation.engraving import LayoutLoader
from chuk_mcp_notation.engraving.svg import build_html, scene_to_svg
from chuk_mcp_notation.reference import ReferenceSection, render_reference
from chuk_mcp_notation.tools.render import resolve_layout

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_reference_tools(mcp: ChukMCPServer, loader: LayoutLoader) -> dict[str, Any]:
    """
    Register reference sheet tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: Layout preset loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def notation_reference(
        section: str | None = None,
        layout: str | None = None,
        output: str = "json",
    ) -> str:
        """
        Render the reference sheet.

        Args:
            section: Optional section ('treble', 'bass', 'durations', 'symbols')
            layout: Optional layout preset name
            output: 'json' (scenes) or 'html' (one page of SVG cards)

        Returns:
            JSON string with the rendered entries or the HTML page

        Example:
            notation_reference(section="durations", output="html")
        """
        try:
            try:
                section_enum = ReferenceSection(section) if section else None
            except ValueError:
                raise ValueError(
                    ErrorMessages.UNKNOWN_REFERENCE_SECTION.format(section=section)
                ) from None

            rendered = render_reference(section_enum, resolve_layout(loader, layout))

            if output == "html":
                html = build_html(
                    "Notation Reference",
                    [scene_to_svg(scene) for _, scene in rendered],
                    [entry.label for entry, _ in rendered],
                )
                return json.dumps({"status": "success", "html": html}, ensure_ascii=False)

            return json.dumps(
                {
                    "status": "success",
                    "entries": [
                        {**entry.to_dict(), "scene": scene.to_dict()} for entry, scene in rendered
                    ],
                    "count": len(rendered),
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to render reference sheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_reference"] = notation_reference

    return tools
