"""
Reference sheet - the study list shown next to the quiz.

Four sections, in display order:
- treble: landmark pitches on the treble staff
- bass: landmark pitches on the bass staff
- durations: every note value on treble B4
- symbols: every catalog symbol
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from chuk_mcp_notation.constants import Clef
from chuk_mcp_notation.core.rhythm import NoteDuration
from chuk_mcp_notation.engraving.config import DEFAULT_LAYOUT, LayoutConfig
from chuk_mcp_notation.engraving.scene import RenderScene
from chuk_mcp_notation.engraving.staff import render
from chuk_mcp_notation.engraving.symbols import catalog_entries
from chuk_mcp_notation.models.request import NoteSpec, RenderRequest

TREBLE_PITCHES: tuple[str, ...] = ("C4", "E4", "G4", "B4", "D5", "F5")
BASS_PITCHES: tuple[str, ...] = ("C2", "E2", "G2", "B2", "C3", "E3")
DURATION_PITCH = "B4"


class ReferenceSection(str, Enum):
    """Sections of the reference sheet."""

    TREBLE = "treble"
    BASS = "bass"
    DURATIONS = "durations"
    SYMBOLS = "symbols"


@dataclass(frozen=True)
class ReferenceEntry:
    """One labelled drawing on the reference sheet."""

    section: ReferenceSection
    label: str
    request: RenderRequest

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "section": self.section.value,
            "label": self.label,
            "request": self.request.to_dict(),
        }


def _pitch_entries(
    section: ReferenceSection, clef: Clef, pitches: tuple[str, ...]
) -> list[ReferenceEntry]:
    return [
        ReferenceEntry(
            section,
            pitch,
            RenderRequest(clef=clef, note=NoteSpec(pitch=pitch, duration=NoteDuration.QUARTER)),
        )
        for pitch in pitches
    ]


def reference_entries(section: ReferenceSection | None = None) -> list[ReferenceEntry]:
    """
    All reference entries in display order.

    Args:
        section: Optional filter to a single section

    Returns:
        Ordered list of entries
    """
    entries = _pitch_entries(ReferenceSection.TREBLE, Clef.TREBLE, TREBLE_PITCHES)
    entries += _pitch_entries(ReferenceSection.BASS, Clef.BASS, BASS_PITCHES)
    entries += [
        ReferenceEntry(
            ReferenceSection.DURATIONS,
            duration.value,
            RenderRequest(clef=Clef.TREBLE, note=NoteSpec(pitch=DURATION_PITCH, duration=duration)),
        )
        for duration in NoteDuration
    ]
    entries += [
        ReferenceEntry(ReferenceSection.SYMBOLS, entry.value, RenderRequest(symbol=entry.to_spec()))
        for entry in catalog_entries()
    ]

    if section is not None:
        entries = [e for e in entries if e.section == section]
    return entries


def render_reference(
    section: ReferenceSection | None = None,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> list[tuple[ReferenceEntry, RenderScene]]:
    """Render every reference entry (optionally one section) with the given layout."""
    return [(entry, render(entry.request, config)) for entry in reference_entries(section)]
