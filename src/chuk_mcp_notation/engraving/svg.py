"""SVG and HTML output for render scenes."""

from __future__ import annotations

from chuk_mcp_notation.engraving.scene import (
    Circle,
    Ellipse,
    Line,
    Path,
    Primitive,
    Rect,
    RenderScene,
    Text,
)


def _escape_xml(text: str) -> str:
    """Escape the characters that are unsafe in XML text and attributes."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _paint(fill: str | None, stroke: str | None = None, stroke_width: float = 0) -> str:
    """fill/stroke attributes; a missing fill is drawn as 'none'."""
    attrs = f'fill="{_escape_xml(fill) if fill else "none"}"'
    if stroke and stroke_width:
        attrs += f' stroke="{_escape_xml(stroke)}" stroke-width="{stroke_width:g}"'
    return attrs


def primitive_to_svg(primitive: Primitive) -> str:
    """Render one primitive as an SVG element."""
    match primitive:
        case Line():
            return (
                f'<line x1="{primitive.x1:g}" y1="{primitive.y1:g}" '
                f'x2="{primitive.x2:g}" y2="{primitive.y2:g}" '
                f'stroke="{_escape_xml(primitive.stroke)}" '
                f'stroke-width="{primitive.stroke_width:g}" />'
            )
        case Ellipse():
            transform = ""
            if primitive.rotation:
                transform = (
                    f' transform="rotate({primitive.rotation:g} {primitive.cx:g} {primitive.cy:g})"'
                )
            return (
                f'<ellipse cx="{primitive.cx:g}" cy="{primitive.cy:g}" '
                f'rx="{primitive.rx:g}" ry="{primitive.ry:g}"{transform} '
                f"{_paint(primitive.fill, primitive.stroke, primitive.stroke_width)} />"
            )
        case Path():
            return (
                f'<path d="{primitive.d}" '
                f"{_paint(primitive.fill, primitive.stroke, primitive.stroke_width)} />"
            )
        case Rect():
            return (
                f'<rect x="{primitive.x:g}" y="{primitive.y:g}" '
                f'width="{primitive.width:g}" height="{primitive.height:g}" '
                f"{_paint(primitive.fill)} />"
            )
        case Circle():
            return (
                f'<circle cx="{primitive.cx:g}" cy="{primitive.cy:g}" r="{primitive.r:g}" '
                f"{_paint(primitive.fill)} />"
            )
        case Text():
            attrs = [
                f'x="{primitive.x:g}"',
                f'y="{primitive.y:g}"',
                f'font-size="{primitive.font_size:g}"',
            ]
            if primitive.anchor != "start":
                attrs.append(f'text-anchor="{primitive.anchor}"')
            if primitive.font_family:
                attrs.append(f'font-family="{_escape_xml(primitive.font_family)}"')
            if primitive.font_weight:
                attrs.append(f'font-weight="{primitive.font_weight}"')
            if primitive.font_style:
                attrs.append(f'font-style="{primitive.font_style}"')
            attrs.append(_paint(primitive.fill))
            return f"<text {' '.join(attrs)}>{_escape_xml(primitive.text)}</text>"
    raise TypeError(f"Unknown primitive: {type(primitive).__name__}")


def scene_to_svg(scene: RenderScene, scale: float = 1.0) -> str:
    """
    Render a scene as a standalone SVG document.

    The viewBox is always the logical canvas; scale only changes the
    outer width and height.

    Raises:
        ValueError: If scale is not positive.
    """
    if scale <= 0:
        raise ValueError(f"Scale must be positive, got {scale}")

    body = "\n".join(f"  {primitive_to_svg(p)}" for p in scene.primitives)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{scene.width * scale:g}" height="{scene.height * scale:g}" '
        f'viewBox="0 0 {scene.width:g} {scene.height:g}">\n'
        f"{body}\n"
        f"</svg>"
    )


def build_html(title: str, svgs: list[str], captions: list[str] | None = None) -> str:
    """
    Wrap SVG drawings in a self-contained HTML page.

    Each SVG is placed in its own ``.card`` div with an optional caption.
    """
    title_safe = _escape_xml(title)
    captions = captions or []
    cards = []
    for i, svg in enumerate(svgs):
        caption = f"<span>{_escape_xml(captions[i])}</span>" if i < len(captions) else ""
        cards.append(f'  <div class="card">{svg}{caption}</div>')

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <title>{title_safe}</title>
  <style>
    body {{
      font-family: Georgia, serif;
      background: #f8fafc;
      margin: 0;
      padding: 2rem;
    }}
    h1 {{
      text-align: center;
      color: #222;
    }}
    .sheet {{
      display: flex;
      flex-wrap: wrap;
      gap: 1rem;
      justify-content: center;
    }}
    .card {{
      background: #fff;
      border-radius: 12px;
      box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
      display: flex;
      flex-direction: column;
      align-items: center;
      padding: 0.5rem;
    }}
    .card span {{
      font-weight: bold;
      font-size: 0.9rem;
    }}
  </style>
</head>
<body>
  <h1>{title_safe}</h1>
  <div class="sheet">
{chr(10).join(cards)}
  </div>
</body>
</html>"""
