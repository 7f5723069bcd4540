"""
Pydantic models for render requests.

- RenderRequest: One note or symbol plus an optional clef
- NoteSpec: Pitch string, duration and optional accidental flags
- SymbolSpec: Text or shape symbol identifier
"""

from chuk_mcp_notation.models.request import NoteSpec, RenderRequest, SymbolSpec

__all__ = [
    "NoteSpec",
    "RenderRequest",
    "SymbolSpec",
]
