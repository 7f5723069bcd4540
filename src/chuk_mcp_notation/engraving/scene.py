"""
Render scene - the output of the notation engine.

A scene is an ordered list of drawable primitives with absolute
coordinates on a fixed logical canvas. Order is draw order, back to
front: staff lines, then the clef, then the note or symbol.

The scene is designed to be:
- Deterministic: same request + layout -> same scene
- Serializable: JSON for inspection and golden-file testing
- Renderer-neutral: SVG is one consumer (see svg.py), not the model

Schema version: render_scene/v1
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar

from chuk_mcp_notation.constants import PrimitiveKind, PrimitiveRole

# Current schema version
SCHEMA_VERSION = "render_scene/v1"


@dataclass(frozen=True)
class Line:
    """A straight stroked segment."""

    kind: ClassVar[PrimitiveKind] = PrimitiveKind.LINE

    x1: float
    y1: float
    x2: float
    y2: float
    role: PrimitiveRole
    stroke: str = "black"
    stroke_width: float = 2


@dataclass(frozen=True)
class Ellipse:
    """
    An ellipse rotated about its own centre.

    fill=None draws the outline only.
    """

    kind: ClassVar[PrimitiveKind] = PrimitiveKind.ELLIPSE

    cx: float
    cy: float
    rx: float
    ry: float
    role: PrimitiveRole
    rotation: float = 0
    fill: str | None = "black"
    stroke: str | None = "black"
    stroke_width: float = 0


@dataclass(frozen=True)
class Path:
    """An SVG path-data outline, filled and/or stroked."""

    kind: ClassVar[PrimitiveKind] = PrimitiveKind.PATH

    d: str
    role: PrimitiveRole
    fill: str | None = "black"
    stroke: str | None = None
    stroke_width: float = 0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned filled rectangle."""

    kind: ClassVar[PrimitiveKind] = PrimitiveKind.RECT

    x: float
    y: float
    width: float
    height: float
    role: PrimitiveRole
    fill: str = "black"


@dataclass(frozen=True)
class Circle:
    """A filled circle (dots)."""

    kind: ClassVar[PrimitiveKind] = PrimitiveKind.CIRCLE

    cx: float
    cy: float
    r: float
    role: PrimitiveRole
    fill: str = "black"


@dataclass(frozen=True)
class Text:
    """
    A text glyph anchored at (x, y), y being the baseline.

    anchor follows SVG text-anchor: start, middle or end.
    """

    kind: ClassVar[PrimitiveKind] = PrimitiveKind.TEXT

    x: float
    y: float
    text: str
    font_size: float
    role: PrimitiveRole
    anchor: str = "start"
    font_family: str | None = None
    font_weight: str | None = None
    font_style: str | None = None
    fill: str = "black"


Primitive = Line | Ellipse | Path | Rect | Circle | Text

_PRIMITIVE_TYPES: dict[PrimitiveKind, type[Primitive]] = {
    PrimitiveKind.LINE: Line,
    PrimitiveKind.ELLIPSE: Ellipse,
    PrimitiveKind.PATH: Path,
    PrimitiveKind.RECT: Rect,
    PrimitiveKind.CIRCLE: Circle,
    PrimitiveKind.TEXT: Text,
}


def primitive_to_dict(primitive: Primitive) -> dict[str, Any]:
    """Convert a primitive to a dictionary, tagged with its kind."""
    d: dict[str, Any] = {"kind": primitive.kind.value}
    for key, value in asdict(primitive).items():
        d[key] = value.value if isinstance(value, PrimitiveRole) else value
    return d


def primitive_from_dict(d: dict[str, Any]) -> Primitive:
    """Create a primitive from its tagged dictionary."""
    data = dict(d)
    primitive_type = _PRIMITIVE_TYPES[PrimitiveKind(data.pop("kind"))]
    data["role"] = PrimitiveRole(data["role"])
    return primitive_type(**data)


@dataclass(frozen=True)
class RenderScene:
    """
    The complete drawing for one render request.

    Freshly built for every request and never mutated.
    """

    width: float
    height: float
    primitives: tuple[Primitive, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.primitives)

    @property
    def is_empty(self) -> bool:
        """True when nothing would be drawn."""
        return not self.primitives

    def by_role(self, role: PrimitiveRole) -> list[Primitive]:
        """All primitives with the given role, in draw order."""
        return [p for p in self.primitives if p.role == role]

    def has_role(self, role: PrimitiveRole) -> bool:
        """True when at least one primitive has the given role."""
        return any(p.role == role for p in self.primitives)

    def roles(self) -> list[PrimitiveRole]:
        """Roles in draw order (with repeats)."""
        return [p.role for p in self.primitives]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "schema": SCHEMA_VERSION,
            "width": self.width,
            "height": self.height,
            "primitives": [primitive_to_dict(p) for p in self.primitives],
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> RenderScene:
        """Create from dictionary."""
        schema = d.get("schema", SCHEMA_VERSION)
        if schema != SCHEMA_VERSION:
            raise ValueError(f"Unsupported schema version: {schema}")
        return cls(
            width=d["width"],
            height=d["height"],
            primitives=tuple(primitive_from_dict(p) for p in d.get("primitives", [])),
        )

    @classmethod
    def from_json(cls, json_str: str) -> RenderScene:
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))
