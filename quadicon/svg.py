# this_file: quadicon/svg.py
"""
SVG serialisation of a laid-out icon.
"""

from __future__ import annotations

from pathlib import Path
from xml.sax.saxutils import escape

from .colors import Palette
from .constants import CANVAS_SIZE, COORDINATE_PRECISION, QUADRANT_SIZE, RENDER_SIZE
from .layout import FillRegion, GlyphPlacement, Layout


def format_number(value: float, digits: int = COORDINATE_PRECISION) -> str:
    """Up to ``digits`` decimals with trailing zeros dropped (``12.5``, ``3``)."""
    text = f"{value:.{digits}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def fixed(value: float) -> str:
    return f"{value:.{COORDINATE_PRECISION}f}"


def placement_transform(placement: GlyphPlacement, layout: Layout) -> str:
    return (
        f"translate({fixed(placement.translate_x)},{fixed(placement.translate_y)}) "
        f"scale({fixed(layout.horizontal_scale)},{fixed(layout.vertical_scale)})"
    )


def path_rect(region: FillRegion, fill: str) -> str:
    x, y = format_number(region.x), format_number(region.y)
    right = format_number(region.x + region.width)
    bottom = format_number(region.y + region.height)
    return f'    <path d="M {x} {y} H {right} V {bottom} H {x} Z" fill="{fill}" />'


def clip_path(placement: GlyphPlacement, layout: Layout) -> str:
    return (
        f'    <clipPath id="{placement.clip_id}">\n'
        f'      <path d="{escape(placement.glyph.path)}" transform="{placement_transform(placement, layout)}" />\n'
        f"    </clipPath>"
    )


def fill_group(placement: GlyphPlacement, palette: Palette) -> str:
    rects = "\n".join(path_rect(region, palette.inverted(region.quadrant)) for region in placement.regions)
    return f'  <g clip-path="url(#{placement.clip_id})">\n{rects}\n  </g>'


def render_svg(layout: Layout, palette: Palette) -> str:
    """
    Serialise background quadrants, glyph clips and fills into an SVG document.
    """
    q = QUADRANT_SIZE
    clips = "\n".join(clip_path(placement, layout) for placement in layout.placements)
    groups = "\n".join(fill_group(placement, palette) for placement in layout.placements)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{RENDER_SIZE}" height="{RENDER_SIZE}" '
        f'viewBox="0 0 {CANVAS_SIZE} {CANVAS_SIZE}">\n'
        f"  <defs>\n{clips}\n  </defs>\n"
        f'  <rect x="0" y="0" width="{q}" height="{q}" fill="{palette.top_left}" />\n'
        f'  <rect x="{q}" y="0" width="{q}" height="{q}" fill="{palette.top_right}" />\n'
        f'  <rect x="0" y="{q}" width="{q}" height="{q}" fill="{palette.bottom_left}" />\n'
        f'  <rect x="{q}" y="{q}" width="{q}" height="{q}" fill="{palette.bottom_right}" />\n'
        f"{groups}\n"
        "</svg>\n"
    )


def write_svg(document: str, output_path: Path | str) -> Path:
    """Write ``document`` to ``output_path``, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document, encoding="utf-8")
    return output_path
