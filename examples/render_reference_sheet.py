#!/usr/bin/env python3
"""
Example: Render the notation reference sheet.

Renders every reference entry (treble and bass landmark pitches, every
note value, every symbol) and writes them to one HTML page of SVG cards,
plus the scene JSON of a single note for inspection.

Usage:
    python examples/render_reference_sheet.py [--layout wide]
"""

import argparse
from pathlib import Path

from chuk_mcp_notation import LayoutLoader, RenderRequest, render
from chuk_mcp_notation.engraving.svg import build_html, scene_to_svg
from chuk_mcp_notation.reference import render_reference


def main() -> None:
    """Write the reference sheet and a sample scene to examples/output."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--layout", default=None, help="Layout preset name")
    args = parser.parse_args()

    layout = LayoutLoader().get_layout(args.layout)
    if layout is None:
        raise SystemExit(f"Unknown layout: {args.layout}")

    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    rendered = render_reference(config=layout)
    html = build_html(
        "Notation Reference",
        [scene_to_svg(scene, scale=0.75) for _, scene in rendered],
        [f"{entry.section.value}: {entry.label}" for entry, _ in rendered],
    )
    sheet_path = output_dir / "reference.html"
    sheet_path.write_text(html, encoding="utf-8")
    print(f"Wrote {len(rendered)} drawings to {sheet_path}")

    # One scene as JSON: middle C, which needs a ledger line in treble
    scene = render(RenderRequest.for_note("C4", "eighth", clef="treble"), layout)
    scene_path = output_dir / "middle_c.json"
    scene_path.write_text(scene.to_json(), encoding="utf-8")
    print(f"Wrote {len(scene)} primitives to {scene_path}")


if __name__ == "__main__":
    main()
