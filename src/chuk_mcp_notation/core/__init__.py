"""
Core notation primitives.

- Letter: The 7 natural letter names
- Pitch: Letter + octave, placed by diatonic step (C4 = 0)
- steps_from_reference: Step arithmetic used by staff placement
- NoteDuration: Written note values and their stem/flag shape
"""

from chuk_mcp_notation.core.pitch import Letter, Pitch, steps_from_reference
from chuk_mcp_notation.core.rhythm import NoteDuration

__all__ = [
    # Pitch
    "Letter",
    "Pitch",
    "steps_from_reference",
    # Rhythm
    "NoteDuration",
]
