"""
Staff geometry - where a diatonic step lands on the staff.

Each step moves half a line spacing; higher pitches sit higher on the
canvas, i.e. at smaller y. Treble and bass differ only in which step
sits on the bottom line.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_notation.constants import Clef
from chuk_mcp_notation.engraving.config import DEFAULT_LAYOUT, LayoutConfig


@dataclass(frozen=True)
class StaffPosition:
    """Resolved vertical placement of one note."""

    step: int
    note_y: float
    ledger_line_ys: tuple[float, ...]
    stem_pivot_step: int

    @property
    def is_on_staff(self) -> bool:
        """True when the note needs no ledger lines."""
        return not self.ledger_line_ys


def note_y(step: int, clef: Clef, config: LayoutConfig = DEFAULT_LAYOUT) -> float:
    """Y coordinate of a notehead centre for the given step and clef."""
    return config.staff_bottom - (step - clef.bottom_line_step) * config.step_height


def ledger_lines(y: float, config: LayoutConfig = DEFAULT_LAYOUT) -> tuple[float, ...]:
    """
    Ledger line positions for a notehead at y.

    Lines start one spacing outside the nearest staff line and step
    outward up to and including the note. Lines closest to the staff
    come first.
    """
    ys: list[float] = []
    spacing = config.line_spacing

    if y < config.staff_top:
        line_y = config.staff_top - spacing
        while line_y >= y:
            ys.append(line_y)
            line_y -= spacing
    elif y > config.staff_bottom:
        line_y = config.staff_bottom + spacing
        while line_y <= y:
            ys.append(line_y)
            line_y += spacing

    return tuple(ys)


def resolve(step: int, clef: Clef, config: LayoutConfig = DEFAULT_LAYOUT) -> StaffPosition:
    """
    Place a diatonic step on the staff.

    Args:
        step: Diatonic steps from C4
        clef: Active clef
        config: Layout constants

    Returns:
        StaffPosition with notehead y, ledger lines and stem pivot
    """
    y = note_y(step, clef, config)
    return StaffPosition(
        step=step,
        note_y=y,
        ledger_line_ys=ledger_lines(y, config),
        stem_pivot_step=clef.middle_line_step,
    )
