"""
Layout configuration - every number the engraver draws with.

One immutable model instead of literals scattered through the geometry
code. Horizontal positions are expressed relative to the canvas centre,
so changing the width re-centres the note and symbols without touching
anything else. The defaults reproduce a 300 x 280 canvas with the staff
lines at y = 100, 120, 140, 160, 180.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LayoutConfig(BaseModel):
    """Immutable engraving constants for one canvas."""

    # Canvas
    width: float = Field(300, ge=120, description="Canvas width in logical units")
    height: float = Field(280, gt=0, description="Canvas height in logical units")

    # Staff
    staff_top: float = Field(100, description="Y of the top staff line")
    line_spacing: float = Field(20, gt=0, description="Distance between staff lines")
    staff_margin: float = Field(20, ge=0, description="Horizontal inset of staff lines")
    staff_line_width: float = Field(2, gt=0)
    staff_color: str = Field("#333")
    ink: str = Field("black", description="Colour of notes and symbols")

    # Notehead
    notehead_rx: float = Field(16, gt=0)
    notehead_ry: float = Field(11, gt=0)
    notehead_angle: float = Field(-15, description="Notehead slant in degrees")
    notehead_stroke_width: float = Field(3, gt=0)

    # Stem
    stem_offset_x: float = Field(14, description="Stem distance from notehead centre")
    stem_start_offset: float = Field(5, description="Gap between notehead centre and stem start")
    stem_height: float = Field(65, gt=0)
    stem_width: float = Field(2, gt=0)

    # Ledger lines
    ledger_half_width: float = Field(20, gt=0)
    ledger_width: float = Field(2, gt=0)

    # Flags
    flag_width: float = Field(18, description="How far a flag bulges out from the stem")
    flag_length: float = Field(50, gt=0, description="Flag extent along the stem")
    flag_spacing: float = Field(15, gt=0, description="Offset between stacked flags")
    flag_tail: float = Field(5, description="Inner control point of the flag tip")

    # Accidental in front of a note
    accidental_offset_x: float = Field(38, description="Accidental distance left of the notehead")
    accidental_font_size: float = Field(50, gt=0)
    accidental_baseline: float = Field(17, description="Glyph baseline below the notehead centre")

    # Clef glyph next to a note
    clef_x: float = Field(30)
    treble_clef_y: float = Field(165)
    treble_clef_size: float = Field(90, gt=0)
    bass_clef_y: float = Field(145)
    bass_clef_size: float = Field(80, gt=0)

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def step_height(self) -> float:
        """Vertical distance of one diatonic step (half a line spacing)."""
        return self.line_spacing / 2

    @property
    def staff_bottom(self) -> float:
        """Y of the bottom staff line."""
        return self.staff_top + 4 * self.line_spacing

    @property
    def staff_middle(self) -> float:
        """Y of the middle staff line."""
        return self.staff_top + 2 * self.line_spacing

    @property
    def center_x(self) -> float:
        """Horizontal centre of the canvas."""
        return self.width / 2

    @property
    def staff_line_ys(self) -> tuple[float, ...]:
        """Y coordinates of the five staff lines, top to bottom."""
        return tuple(self.staff_top + i * self.line_spacing for i in range(5))


DEFAULT_LAYOUT = LayoutConfig()
