"""
Pitch primitives - Letter and Pitch.

Staff placement works on diatonic steps, not semitones: every letter name
is one step, seven steps make an octave, and C4 (middle C) is step 0.
Accidentals never move a note on the staff, so they play no part here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from enum import IntEnum

from chuk_mcp_notation.constants import ErrorMessages

# Octave that contains the reference pitch (C4 = step 0)
REFERENCE_OCTAVE = 4
STEPS_PER_OCTAVE = 7

_PITCH_PATTERN = re.compile(r"^([A-Ga-g])([0-9])$")


class Letter(IntEnum):
    """
    The 7 natural letter names in staff order.

    The value is the letter's diatonic offset from C within its octave.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @classmethod
    def parse(cls, name: str) -> Letter:
        """Parse a letter name, case-insensitive."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(ErrorMessages.INVALID_LETTER.format(letter=name)) from None


def steps_from_reference(letter: Letter | str, octave: int) -> int:
    """
    Count diatonic steps from C4 to the given pitch.

    D4 = 1, B4 = 6, C5 = 7, B3 = -1.

    Args:
        letter: Letter name (Letter or case-insensitive string)
        octave: Scientific octave number

    Returns:
        Signed step count, 0 at C4
    """
    if not isinstance(letter, Letter):
        letter = Letter.parse(letter)
    return letter.value + (octave - REFERENCE_OCTAVE) * STEPS_PER_OCTAVE


@total_ordering
@dataclass(frozen=True)
class Pitch:
    """
    A natural pitch: letter name plus octave.

    Immutable and hashable. Ordered by staff height.
    """

    letter: Letter
    octave: int

    @property
    def step(self) -> int:
        """Diatonic steps from C4."""
        return steps_from_reference(self.letter, self.octave)

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """
        Parse a pitch string like 'E4' or 'c5'.

        Raises:
            ValueError: If the text is not a letter A-G followed by one digit.
        """
        match = _PITCH_PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise ValueError(ErrorMessages.INVALID_PITCH.format(pitch=text))
        return cls(Letter.parse(match.group(1)), int(match.group(2)))

    @classmethod
    def from_step(cls, step: int) -> Pitch:
        """Build the natural pitch that sits on the given step."""
        octave_offset, offset = divmod(step, STEPS_PER_OCTAVE)
        return cls(Letter(offset), REFERENCE_OCTAVE + octave_offset)

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.step < other.step

    def __str__(self) -> str:
        return f"{self.letter.name}{self.octave}"
