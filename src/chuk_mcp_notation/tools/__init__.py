"""
MCP tool implementations.

Tools are organized by domain:
- render - Single note / symbol rendering, catalog and layout discovery
- reference - Study reference sheet
"""

from chuk_mcp_notation.tools.reference import register_reference_tools
from chuk_mcp_notation.tools.render import register_render_tools

__all__ = [
    "register_reference_tools",
    "register_render_tools",
]
