"""
Tests for staff geometry.

Tests cover:
- Notehead y for treble and bass clefs
- Ledger line placement above and below the staff
- Stem pivot per clef
"""

import pytest

from chuk_mcp_notation.constants import Clef
from chuk_mcp_notation.core import Pitch
from chuk_mcp_notation.engraving import LayoutConfig, resolve
from chuk_mcp_notation.engraving.geometry import ledger_lines, note_y


def step(pitch: str) -> int:
    return Pitch.parse(pitch).step


class TestClef:
    """Tests for clef reference steps."""

    def test_bottom_line_steps(self) -> None:
        """E4 is the treble bottom line, G2 the bass bottom line."""
        assert Clef.TREBLE.bottom_line_step == step("E4")
        assert Clef.BASS.bottom_line_step == step("G2")

    def test_middle_line_steps(self) -> None:
        """B4 is the treble middle line, D3 the bass middle line."""
        assert Clef.TREBLE.middle_line_step == step("B4")
        assert Clef.BASS.middle_line_step == step("D3")


class TestNoteY:
    """Tests for vertical placement."""

    @pytest.mark.parametrize(
        ("pitch", "expected"),
        [("E4", 180), ("G4", 160), ("B4", 140), ("D5", 120), ("F5", 100), ("C4", 200), ("A5", 80)],
    )
    def test_treble_lines(self, pitch: str, expected: float) -> None:
        """Treble staff lines are E4 G4 B4 D5 F5."""
        assert note_y(step(pitch), Clef.TREBLE) == expected

    @pytest.mark.parametrize(
        ("pitch", "expected"),
        [("G2", 180), ("B2", 160), ("D3", 140), ("F3", 120), ("A3", 100), ("C2", 220), ("C3", 150)],
    )
    def test_bass_lines(self, pitch: str, expected: float) -> None:
        """Bass staff lines are G2 B2 D3 F3 A3."""
        assert note_y(step(pitch), Clef.BASS) == expected

    def test_higher_pitch_is_higher_on_screen(self) -> None:
        """y strictly decreases as the step increases."""
        for clef in Clef:
            ys = [note_y(s, clef) for s in range(-25, 25)]
            assert all(a > b for a, b in zip(ys, ys[1:]))

    def test_deterministic(self) -> None:
        """Same inputs give the same coordinate."""
        assert resolve(3, Clef.BASS) == resolve(3, Clef.BASS)

    def test_clefs_differ_by_offset_only(self) -> None:
        """Bass is treble shifted by 12 steps."""
        for s in range(-10, 10):
            assert note_y(s, Clef.BASS) == note_y(s + 12, Clef.TREBLE)

    def test_spacing_follows_layout(self) -> None:
        """Each step is half the configured line spacing."""
        layout = LayoutConfig(line_spacing=30)
        assert note_y(3, Clef.TREBLE, layout) - note_y(4, Clef.TREBLE, layout) == 15


class TestLedgerLines:
    """Tests for ledger lines."""

    def test_on_staff_has_none(self) -> None:
        """Notes on or between the staff lines get no ledger lines."""
        for s in range(step("E4"), step("F5") + 1):
            assert resolve(s, Clef.TREBLE).ledger_line_ys == ()

    def test_outer_lines_have_none(self) -> None:
        """The top and bottom lines themselves need no ledger line."""
        assert ledger_lines(100) == ()
        assert ledger_lines(180) == ()

    def test_spaces_just_outside_have_none(self) -> None:
        """D4 and G5 hang off the staff without a ledger line."""
        assert resolve(step("D4"), Clef.TREBLE).ledger_line_ys == ()
        assert resolve(step("G5"), Clef.TREBLE).ledger_line_ys == ()

    def test_one_below(self) -> None:
        """Middle C in treble gets one ledger line, through the head."""
        position = resolve(step("C4"), Clef.TREBLE)
        assert position.note_y == 200
        assert position.ledger_line_ys == (200,)
        assert not position.is_on_staff

    def test_one_above(self) -> None:
        """A5 in treble gets one ledger line above the staff."""
        assert resolve(step("A5"), Clef.TREBLE).ledger_line_ys == (80,)

    def test_middle_c_in_bass(self) -> None:
        """Middle C sits on one ledger line above the bass staff."""
        position = resolve(step("C4"), Clef.BASS)
        assert position.note_y == 80
        assert position.ledger_line_ys == (80,)

    def test_several_below(self) -> None:
        """C2 in bass gets two lines, nearest the staff first."""
        assert resolve(step("C2"), Clef.BASS).ledger_line_ys == (200, 220)

    def test_space_between_ledgers(self) -> None:
        """A note in a space below two ledger lines stops at the last line above it."""
        # B3 in treble: y = 210
        assert resolve(step("B3"), Clef.TREBLE).ledger_line_ys == (200,)

    def test_several_above(self) -> None:
        """E6 in treble gets three lines."""
        assert resolve(step("E6"), Clef.TREBLE).ledger_line_ys == (80, 60, 40)


class TestResolve:
    """Tests for the full resolve result."""

    def test_pivot_per_clef(self) -> None:
        """Stem pivot is the middle line of the clef."""
        assert resolve(0, Clef.TREBLE).stem_pivot_step == step("B4")
        assert resolve(0, Clef.BASS).stem_pivot_step == step("D3")

    def test_keeps_step(self) -> None:
        """The resolved position remembers its step."""
        assert resolve(5, Clef.TREBLE).step == 5
