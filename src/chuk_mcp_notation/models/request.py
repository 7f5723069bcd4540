"""
Render request models - the input contract of the notation engine.

A request carries exactly one payload: a note (pitch + duration) or a
symbol (text or catalog shape), plus an optional clef. Validation of
enumerated fields happens here, before any geometry runs. The pitch
string itself is checked later by Pitch.parse so that a malformed pitch
degrades to an empty drawing instead of a rejected request.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from chuk_mcp_notation.constants import Clef, ErrorMessages, SymbolType
from chuk_mcp_notation.core.rhythm import NoteDuration


class NoteSpec(BaseModel):
    """A single note to place on the staff."""

    pitch: str = Field(..., description="Pitch like 'C4' or 'A5'")
    duration: NoteDuration = Field(..., description="Written note value")

    # Accidental shown in front of the notehead
    has_sharp: bool = Field(False, alias="hasSharp", description="Draw a sharp")
    has_flat: bool = Field(False, alias="hasFlat", description="Draw a flat")
    has_natural: bool = Field(False, alias="hasNatural", description="Draw a natural")

    model_config = {"frozen": True, "populate_by_name": True}


class SymbolSpec(BaseModel):
    """A standalone symbol: dynamics text or a catalog shape."""

    type: SymbolType = Field(..., description="'text' or 'shape'")
    value: str = Field(..., description="Literal text or catalog identifier")
    label: str | None = Field(None, description="Debugging label, not drawn")

    model_config = {"frozen": True}


class RenderRequest(BaseModel):
    """
    Everything needed to draw one staff or symbol.

    Immutable. The same request always produces the same scene.
    """

    clef: Clef | None = Field(None, description="Clef for note requests (default treble)")
    note: NoteSpec | None = Field(None, description="Note payload")
    symbol: SymbolSpec | None = Field(None, description="Symbol payload")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _exactly_one_payload(self) -> RenderRequest:
        if (self.note is None) == (self.symbol is None):
            raise ValueError(ErrorMessages.NOTE_OR_SYMBOL)
        return self

    @property
    def effective_clef(self) -> Clef:
        """The clef to draw with, treble when none was given."""
        return self.clef or Clef.TREBLE

    @classmethod
    def for_note(
        cls,
        pitch: str,
        duration: NoteDuration | str,
        clef: Clef | str | None = None,
        **accidentals: bool,
    ) -> RenderRequest:
        """Shorthand for a note request."""
        return cls.model_validate(
            {
                "clef": clef,
                "note": {"pitch": pitch, "duration": duration, **accidentals},
            }
        )

    @classmethod
    def for_symbol(
        cls, value: str, symbol_type: SymbolType | str = SymbolType.SHAPE
    ) -> RenderRequest:
        """Shorthand for a symbol request."""
        return cls.model_validate({"symbol": {"type": symbol_type, "value": value}})

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape (unset payloads omitted)."""
        return self.model_dump(mode="json", exclude_none=True)
