"""
Rhythm primitives - NoteDuration.

The notation engine only needs the written shape of a duration: whether
the head is hollow, whether there is a stem, and how many flags hang off it.
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction

# Beats per duration, quarter note = 1 beat
_BEATS: dict[str, Fraction] = {
    "whole": Fraction(4),
    "half": Fraction(2),
    "quarter": Fraction(1),
    "eighth": Fraction(1, 2),
    "sixteenth": Fraction(1, 4),
    "thirty-second": Fraction(1, 8),
}

_FLAGS: dict[str, int] = {
    "whole": 0,
    "half": 0,
    "quarter": 0,
    "eighth": 1,
    "sixteenth": 2,
    "thirty-second": 3,
}


class NoteDuration(str, Enum):
    """
    Written note values, longest first.

    Values match the wire names used in render requests.
    """

    WHOLE = "whole"
    HALF = "half"
    QUARTER = "quarter"
    EIGHTH = "eighth"
    SIXTEENTH = "sixteenth"
    THIRTY_SECOND = "thirty-second"

    @property
    def beats(self) -> Fraction:
        """Length in beats (quarter note = 1)."""
        return _BEATS[self.value]

    @property
    def flag_count(self) -> int:
        """Number of flags on the stem (0 for whole, half and quarter)."""
        return _FLAGS[self.value]

    @property
    def is_hollow(self) -> bool:
        """Whole and half notes have an outlined, unfilled head."""
        return self in (NoteDuration.WHOLE, NoteDuration.HALF)

    @property
    def has_stem(self) -> bool:
        """Every duration except the whole note has a stem."""
        return self is not NoteDuration.WHOLE

    def __str__(self) -> str:
        return self.value
