"""
Note glyph composer - notehead, stem and flags for one note.

Conventions:
- Notes on or above the middle line stem down, notes below it stem up.
- An up-stem sits on the right of the head, a down-stem on the left.
- Flags always hang on the right of the stem and curl back toward the
  notehead: downward for an up-stem, upward for a down-stem. Stacked
  flags start at the stem tip and step toward the head.
"""

from __future__ import annotations

from chuk_mcp_notation.constants import PrimitiveRole, StemDirection
from chuk_mcp_notation.core.rhythm import NoteDuration
from chuk_mcp_notation.engraving.config import DEFAULT_LAYOUT, LayoutConfig
from chuk_mcp_notation.engraving.geometry import StaffPosition
from chuk_mcp_notation.engraving.scene import Ellipse, Line, Path, Primitive, Text


def _fmt(value: float) -> str:
    """Compact number formatting for path data (180.0 -> '180')."""
    return f"{value:g}"


def stem_direction(step: int, pivot_step: int) -> StemDirection:
    """Down at or above the pivot, up below it."""
    return StemDirection.DOWN if step >= pivot_step else StemDirection.UP


def flag_path(
    stem_x: float,
    stem_end_y: float,
    index: int,
    direction: StemDirection,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> str:
    """
    Path data for the index-th flag (0 = at the stem tip).

    The outline runs from the stem out to the bulge and back, closing
    on the stem one flag length further toward the head.
    """
    sign = 1 if direction is StemDirection.UP else -1
    x = stem_x
    bulge = stem_x + config.flag_width
    tail = stem_x + config.flag_tail
    top = stem_end_y + sign * index * config.flag_spacing
    length = config.flag_length

    def y(offset: float) -> str:
        return _fmt(top + sign * offset)

    return (
        f"M {_fmt(x)} {y(0)} "
        f"C {_fmt(x)} {y(0)} {_fmt(bulge)} {y(length * 0.2)} {_fmt(bulge)} {y(length * 0.7)} "
        f"C {_fmt(bulge)} {y(length * 0.9)} {_fmt(tail)} {y(length * 0.7)} {_fmt(x)} {y(length)} Z"
    )


def compose_note(
    position: StaffPosition,
    duration: NoteDuration,
    config: LayoutConfig = DEFAULT_LAYOUT,
    accidental: str | None = None,
) -> list[Primitive]:
    """
    Build every primitive for one note, back to front.

    Order: ledger lines, accidental, notehead, stem, flags.

    Args:
        position: Resolved staff position of the note
        duration: Written note value
        config: Layout constants
        accidental: Optional accidental glyph drawn left of the head

    Returns:
        List of primitives in draw order
    """
    cx = config.center_x
    y = position.note_y
    primitives: list[Primitive] = []

    for ledger_y in position.ledger_line_ys:
        primitives.append(
            Line(
                x1=cx - config.ledger_half_width,
                y1=ledger_y,
                x2=cx + config.ledger_half_width,
                y2=ledger_y,
                role=PrimitiveRole.LEDGER_LINE,
                stroke=config.ink,
                stroke_width=config.ledger_width,
            )
        )

    if accidental:
        primitives.append(
            Text(
                x=cx - config.accidental_offset_x,
                y=y + config.accidental_baseline,
                text=accidental,
                font_size=config.accidental_font_size,
                role=PrimitiveRole.ACCIDENTAL,
                anchor="middle",
                fill=config.ink,
            )
        )

    primitives.append(
        Ellipse(
            cx=cx,
            cy=y,
            rx=config.notehead_rx,
            ry=config.notehead_ry,
            role=PrimitiveRole.NOTEHEAD,
            rotation=config.notehead_angle,
            fill=None if duration.is_hollow else config.ink,
            stroke=config.ink,
            stroke_width=config.notehead_stroke_width,
        )
    )

    if not duration.has_stem:
        return primitives

    direction = stem_direction(position.step, position.stem_pivot_step)
    if direction is StemDirection.UP:
        stem_x = cx + config.stem_offset_x
        stem_start_y = y - config.stem_start_offset
        stem_end_y = y - config.stem_height
    else:
        stem_x = cx - config.stem_offset_x
        stem_start_y = y + config.stem_start_offset
        stem_end_y = y + config.stem_height

    primitives.append(
        Line(
            x1=stem_x,
            y1=stem_start_y,
            x2=stem_x,
            y2=stem_end_y,
            role=PrimitiveRole.STEM,
            stroke=config.ink,
            stroke_width=config.stem_width,
        )
    )

    for index in range(duration.flag_count):
        primitives.append(
            Path(
                d=flag_path(stem_x, stem_end_y, index, direction, config),
                role=PrimitiveRole.FLAG,
                fill=config.ink,
            )
        )

    return primitives
