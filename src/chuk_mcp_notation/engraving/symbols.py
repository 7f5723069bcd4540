"""
Symbol glyph catalog - fixed drawings for non-note symbols.

Text symbols (dynamics like 'ff' or 'cresc.') are drawn as their literal
characters. Shape symbols resolve through a closed catalog; a value the
catalog does not know draws a placeholder glyph instead of failing.

All positions are derived from the staff frame in LayoutConfig, so the
glyphs line up with a staff drawn on the same canvas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import assert_never

from chuk_mcp_notation.constants import (
    BASS_CLEF_GLYPH,
    EIGHTH_REST_GLYPH,
    FLAT_GLYPH,
    NATURAL_GLYPH,
    PLACEHOLDER_GLYPH,
    QUARTER_REST_GLYPH,
    SHARP_GLYPH,
    TREBLE_CLEF_GLYPH,
    PrimitiveRole,
    SymbolType,
)
from chuk_mcp_notation.engraving.config import DEFAULT_LAYOUT, LayoutConfig
from chuk_mcp_notation.engraving.scene import Circle, Path, Primitive, Rect, Text
from chuk_mcp_notation.models.request import SymbolSpec

logger = logging.getLogger(__name__)


class SymbolCategory(str, Enum):
    """Grouping used by reference sheets and tool listings."""

    DYNAMICS = "dynamics"
    ACCIDENTALS = "accidentals"
    STRUCTURE = "structure"
    RESTS = "rests"


class SymbolKind(str, Enum):
    """Every shape symbol the catalog can draw."""

    SHARP = "sharp"
    FLAT = "flat"
    NATURAL = "natural"
    FERMATA = "fermata"
    TREBLE_CLEF = "treble_clef"
    BASS_CLEF = "bass_clef"
    REPEAT_START = "repeat_start"
    TIE = "tie"
    WHOLE_REST = "whole_rest"
    HALF_REST = "half_rest"
    QUARTER_REST = "quarter_rest"
    EIGHTH_REST = "eighth_rest"

    @property
    def category(self) -> SymbolCategory:
        """Category this symbol is listed under."""
        if self in _ACCIDENTALS:
            return SymbolCategory.ACCIDENTALS
        if self in _RESTS:
            return SymbolCategory.RESTS
        return SymbolCategory.STRUCTURE

    @property
    def is_staff_anchored(self) -> bool:
        """Rests are drawn on a staff; every other symbol stands alone."""
        return self in _RESTS


_ACCIDENTALS = frozenset({SymbolKind.SHARP, SymbolKind.FLAT, SymbolKind.NATURAL})
_RESTS = frozenset(
    {
        SymbolKind.WHOLE_REST,
        SymbolKind.HALF_REST,
        SymbolKind.QUARTER_REST,
        SymbolKind.EIGHTH_REST,
    }
)

_ACCIDENTAL_GLYPHS: dict[SymbolKind, str] = {
    SymbolKind.SHARP: SHARP_GLYPH,
    SymbolKind.FLAT: FLAT_GLYPH,
    SymbolKind.NATURAL: NATURAL_GLYPH,
}

# Dynamics and hairpin words drawn as text symbols
DYNAMICS: tuple[str, ...] = ("ff", "pp", "mf", "mp", "f", "p", "cresc.", "dim.")


@dataclass(frozen=True)
class CatalogEntry:
    """One listed symbol: how it is requested and where it belongs."""

    value: str
    type: SymbolType
    category: SymbolCategory
    staff_anchored: bool = False

    def to_spec(self) -> SymbolSpec:
        """The symbol payload that draws this entry."""
        return SymbolSpec(type=self.type, value=self.value)


def catalog_entries() -> list[CatalogEntry]:
    """Every drawable symbol, dynamics first, then shapes in catalog order."""
    entries = [CatalogEntry(value, SymbolType.TEXT, SymbolCategory.DYNAMICS) for value in DYNAMICS]
    entries.extend(
        CatalogEntry(kind.value, SymbolType.SHAPE, kind.category, kind.is_staff_anchored)
        for kind in SymbolKind
    )
    return entries


def symbol_kind(value: str) -> SymbolKind | None:
    """Catalog entry for a shape value, or None when it is not in the catalog."""
    try:
        return SymbolKind(value)
    except ValueError:
        return None


def is_staff_anchored(spec: SymbolSpec) -> bool:
    """True when the symbol must be drawn on top of staff lines."""
    if spec.type is not SymbolType.SHAPE:
        return False
    kind = symbol_kind(spec.value)
    return kind is not None and kind.is_staff_anchored


def placeholder(config: LayoutConfig = DEFAULT_LAYOUT) -> list[Primitive]:
    """The visible stand-in for a symbol the catalog cannot draw."""
    return [
        Text(
            x=config.center_x,
            y=config.staff_top + 3 * config.line_spacing,
            text=PLACEHOLDER_GLYPH,
            font_size=40,
            role=PrimitiveRole.PLACEHOLDER,
            anchor="middle",
            fill=config.ink,
        )
    ]


def text_symbol(value: str, config: LayoutConfig = DEFAULT_LAYOUT) -> list[Primitive]:
    """A dynamics marking, bold italic serif in the middle of the canvas."""
    return [
        Text(
            x=config.center_x,
            y=config.staff_middle + config.step_height,
            text=value,
            font_size=60,
            role=PrimitiveRole.SYMBOL,
            anchor="middle",
            font_family="serif",
            font_weight="bold",
            font_style="italic",
            fill=config.ink,
        )
    ]


def shape_symbol(kind: SymbolKind, config: LayoutConfig = DEFAULT_LAYOUT) -> list[Primitive]:
    """
    Primitives for one catalog shape.

    Args:
        kind: Catalog entry
        config: Layout constants (staff frame and canvas centre)

    Returns:
        Non-empty list of primitives in draw order
    """
    cx = config.center_x
    top = config.staff_top
    middle = config.staff_middle
    sp = config.line_spacing
    ink = config.ink
    role = PrimitiveRole.SYMBOL

    def glyph(y: float, text: str, size: float, font_family: str | None = None) -> Text:
        return Text(cx, y, text, size, role, anchor="middle", font_family=font_family, fill=ink)

    def arc(x1: float, y1: float, cy: float, x2: float, width: float) -> Path:
        return Path(
            d=f"M {x1:g} {y1:g} Q {cx:g} {cy:g} {x2:g} {y1:g}",
            role=role,
            fill=None,
            stroke=ink,
            stroke_width=width,
        )

    match kind:
        case SymbolKind.SHARP | SymbolKind.FLAT | SymbolKind.NATURAL:
            return [glyph(top + 3 * sp, _ACCIDENTAL_GLYPHS[kind], 100)]
        case SymbolKind.FERMATA:
            return [
                arc(cx - 30, middle, middle - 1.5 * sp, cx + 30, 4),
                Circle(cx, middle - sp / 2, 4, role, fill=ink),
            ]
        case SymbolKind.TREBLE_CLEF:
            return [glyph(config.staff_bottom + sp / 2, TREBLE_CLEF_GLYPH, 150)]
        case SymbolKind.BASS_CLEF:
            return [glyph(top + 3.5 * sp, BASS_CLEF_GLYPH, 120)]
        case SymbolKind.REPEAT_START:
            # Thick bar, thin bar, then dots in the spaces around the middle line
            x = cx - 20
            y = top - sp / 2
            return [
                Rect(x, y, 5, 5 * sp, role, fill=ink),
                Rect(x + 10, y, 2, 5 * sp, role, fill=ink),
                Circle(x + 20, middle - sp / 2, 4, role, fill=ink),
                Circle(x + 20, middle + sp / 2, 4, role, fill=ink),
            ]
        case SymbolKind.TIE:
            return [arc(cx - 50, middle - sp / 2, middle + 1.5 * sp, cx + 50, 3)]
        case SymbolKind.WHOLE_REST:
            # Hangs from the second line
            return [Rect(cx - 10, top + sp, 20, sp / 2, role, fill=ink)]
        case SymbolKind.HALF_REST:
            # Sits on the middle line
            return [Rect(cx - 10, middle - sp / 2, 20, sp / 2, role, fill=ink)]
        case SymbolKind.QUARTER_REST:
            return [glyph(top + 3.5 * sp, QUARTER_REST_GLYPH, 120, "serif")]
        case SymbolKind.EIGHTH_REST:
            return [glyph(top + 3 * sp, EIGHTH_REST_GLYPH, 100, "serif")]
        case _:
            assert_never(kind)


def lookup(spec: SymbolSpec, config: LayoutConfig = DEFAULT_LAYOUT) -> list[Primitive]:
    """
    Primitives for a symbol payload. Never raises for unknown values.

    Args:
        spec: Text or shape symbol
        config: Layout constants

    Returns:
        Non-empty list of primitives
    """
    if spec.type is SymbolType.TEXT:
        return text_symbol(spec.value, config)

    kind = symbol_kind(spec.value)
    if kind is None:
        logger.debug(f"Unknown symbol '{spec.value}', drawing placeholder")
        return placeholder(config)
    return shape_symbol(kind, config)
