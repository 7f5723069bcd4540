"""
Constants and enums for the notation engine.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class Clef(str, Enum):
    """
    Supported clefs.

    A clef fixes which diatonic step sits on the bottom staff line and
    which step sits on the middle line (the stem-direction pivot).
    Steps are counted from C4 = 0.
    """

    TREBLE = "treble"
    BASS = "bass"

    @property
    def bottom_line_step(self) -> int:
        """Step on the bottom staff line (E4 treble, G2 bass)."""
        return 2 if self is Clef.TREBLE else -10

    @property
    def middle_line_step(self) -> int:
        """Step on the middle staff line (B4 treble, D3 bass)."""
        return self.bottom_line_step + 4


class SymbolType(str, Enum):
    """How a symbol payload is drawn."""

    TEXT = "text"  # Literal characters (dynamics)
    SHAPE = "shape"  # Resolved through the glyph catalog


class StemDirection(str, Enum):
    """Stem direction relative to the notehead."""

    UP = "up"
    DOWN = "down"


class PrimitiveKind(str, Enum):
    """Drawable primitive kinds in a render scene."""

    LINE = "line"
    ELLIPSE = "ellipse"
    PATH = "path"
    RECT = "rect"
    CIRCLE = "circle"
    TEXT = "text"


class PrimitiveRole(str, Enum):
    """What a primitive depicts. Lets consumers pick parts out of a scene."""

    STAFF_LINE = "staff_line"
    LEDGER_LINE = "ledger_line"
    CLEF = "clef"
    ACCIDENTAL = "accidental"
    NOTEHEAD = "notehead"
    STEM = "stem"
    FLAG = "flag"
    SYMBOL = "symbol"
    PLACEHOLDER = "placeholder"


# Glyphs from the Unicode musical symbols block
TREBLE_CLEF_GLYPH = "\U0001d11e"
BASS_CLEF_GLYPH = "\U0001d122"
QUARTER_REST_GLYPH = "\U0001d13d"
EIGHTH_REST_GLYPH = "\U0001d13e"
SHARP_GLYPH = "♯"
FLAT_GLYPH = "♭"
NATURAL_GLYPH = "♮"
PLACEHOLDER_GLYPH = "?"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_PITCH = "Invalid pitch: '{pitch}'. Expected a letter A-G followed by an octave digit."
    INVALID_LETTER = "Invalid pitch letter: '{letter}'. Expected one of C D E F G A B."
    NOTE_OR_SYMBOL = "A render request needs exactly one of 'note' or 'symbol'."
    PITCH_REQUIRES_DURATION = "Rendering a note needs both 'pitch' and 'duration'."
    LAYOUT_NOT_FOUND = "Layout '{name}' not found."
    UNKNOWN_REFERENCE_SECTION = "Unknown reference section: '{section}'."
