"""
Staff composition - one render request in, one scene out.

Draw order is back to front: staff lines, clef, then the note or symbol,
so content is never hidden behind the staff.
"""

from __future__ import annotations

import logging

from chuk_mcp_notation.constants import (
    BASS_CLEF_GLYPH,
    FLAT_GLYPH,
    NATURAL_GLYPH,
    SHARP_GLYPH,
    TREBLE_CLEF_GLYPH,
    Clef,
    PrimitiveRole,
)
from chuk_mcp_notation.core.pitch import Pitch
from chuk_mcp_notation.engraving.config import DEFAULT_LAYOUT, LayoutConfig
from chuk_mcp_notation.engraving.geometry import resolve
from chuk_mcp_notation.engraving.note import compose_note
from chuk_mcp_notation.engraving.scene import Line, Primitive, RenderScene, Text
from chuk_mcp_notation.engraving.symbols import is_staff_anchored, lookup
from chuk_mcp_notation.models.request import NoteSpec, RenderRequest

logger = logging.getLogger(__name__)


def staff_lines(config: LayoutConfig = DEFAULT_LAYOUT) -> list[Primitive]:
    """The five staff lines, top to bottom."""
    return [
        Line(
            x1=config.staff_margin,
            y1=y,
            x2=config.width - config.staff_margin,
            y2=y,
            role=PrimitiveRole.STAFF_LINE,
            stroke=config.staff_color,
            stroke_width=config.staff_line_width,
        )
        for y in config.staff_line_ys
    ]


def clef_glyph(clef: Clef, config: LayoutConfig = DEFAULT_LAYOUT) -> Text:
    """The clef shown at the left of a note staff."""
    if clef is Clef.TREBLE:
        glyph, y, size = TREBLE_CLEF_GLYPH, config.treble_clef_y, config.treble_clef_size
    else:
        glyph, y, size = BASS_CLEF_GLYPH, config.bass_clef_y, config.bass_clef_size
    return Text(
        x=config.clef_x,
        y=y,
        text=glyph,
        font_size=size,
        role=PrimitiveRole.CLEF,
        font_family="serif",
        fill=config.ink,
    )


def accidental_for(note: NoteSpec) -> str | None:
    """Accidental glyph requested on a note (sharp, then flat, then natural)."""
    if note.has_sharp:
        return SHARP_GLYPH
    if note.has_flat:
        return FLAT_GLYPH
    if note.has_natural:
        return NATURAL_GLYPH
    return None


def note_primitives(
    note: NoteSpec, clef: Clef, config: LayoutConfig = DEFAULT_LAYOUT
) -> list[Primitive]:
    """
    Primitives for a note payload.

    A pitch string that does not parse draws nothing.
    """
    try:
        pitch = Pitch.parse(note.pitch)
    except ValueError as e:
        logger.debug(f"Not drawing note: {e}")
        return []

    position = resolve(pitch.step, clef, config)
    return compose_note(position, note.duration, config, accidental_for(note))


def render(request: RenderRequest, config: LayoutConfig = DEFAULT_LAYOUT) -> RenderScene:
    """
    Compose the full scene for a render request.

    Staff lines are drawn for notes and for staff-anchored symbols (rests).
    The clef glyph is drawn for notes only.

    Args:
        request: Note or symbol request
        config: Layout constants

    Returns:
        A new RenderScene
    """
    primitives: list[Primitive] = []

    if request.note is not None:
        clef = request.effective_clef
        primitives.extend(staff_lines(config))
        primitives.append(clef_glyph(clef, config))
        primitives.extend(note_primitives(request.note, clef, config))
    elif request.symbol is not None:
        if is_staff_anchored(request.symbol):
            primitives.extend(staff_lines(config))
        primitives.extend(lookup(request.symbol, config))

    return RenderScene(width=config.width, height=config.height, primitives=tuple(primitives))
