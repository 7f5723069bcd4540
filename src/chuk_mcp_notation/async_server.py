#!/usr/bin/env python3
"""
Async Notation MCP Server using chuk-mcp-server

This server provides MCP tools for drawing music notation: a note on a
five-line staff (treble or bass clef, any duration, optional accidental)
or a standalone symbol (dynamics, accidentals, clefs, rests, repeats,
ties, fermatas).

The server provides tools for:
- Rendering a note or symbol to drawing primitives or SVG
- Listing the symbol catalog and layout presets
- Rendering the study reference sheet
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_notation.engraving import LayoutLoader
from chuk_mcp_notation.tools import register_reference_tools, register_render_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-notation")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
LAYOUTS_DIR = Path(os.environ.get("CHUK_NOTATION_LAYOUTS_DIR", BASE_PATH / "layouts"))
LAYOUTS_LIBRARY_PATH = Path(__file__).parent / "engraving" / "library"

# Create loaders
layout_loader = LayoutLoader(
    library_path=LAYOUTS_LIBRARY_PATH,
    project_path=LAYOUTS_DIR,
)

# Register all tools
render_tools = register_render_tools(mcp, layout_loader)
reference_tools = register_reference_tools(mcp, layout_loader)

# Export tool functions for direct access
notation_render = render_tools["notation_render"]
notation_render_svg = render_tools["notation_render_svg"]
notation_list_symbols = render_tools["notation_list_symbols"]
notation_list_layouts = render_tools["notation_list_layouts"]

notation_reference = reference_tools["notation_reference"]

logger.info("CHUK Notation MCP Server initialized")
logger.info(f"  Layout library: {LAYOUTS_LIBRARY_PATH}")
logger.info(f"  Project layouts dir: {LAYOUTS_DIR}")
