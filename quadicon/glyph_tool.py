# this_file: quadicon/glyph_tool.py
"""
Cross-platform glyph tool: prints outline records for a string as JSON.

Usage:
    python -m quadicon.glyph_tool <FONT_FILE> <TEXT>

HarfBuzz maps characters to glyphs and supplies advances, FreeType supplies the
unscaled outlines. Output matches the CoreText Swift script record for record.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click

from .constants import GLYPH_UNITS_PER_EM
from .svg import format_number

try:
    import uharfbuzz as hb
    from freetype import FT_LOAD_NO_SCALE, Face
except ImportError as exc:  # pragma: no cover - reported via HarfBuzzGlyphSource.is_available
    TOOL_IMPORT_ERROR: ImportError | None = exc
else:
    TOOL_IMPORT_ERROR = None


Segment = tuple[str, list[tuple[float, float]]]


def decompose_outline(outline) -> list[Segment]:
    """
    Walk a FreeType outline into ``(command, points)`` segments in font units.

    FreeType closes contours implicitly, so a ``Z`` is inserted before every
    move after the first and once at the end.
    """
    segments: list[Segment] = []

    def xy(vector) -> tuple[float, float]:
        # Callbacks may receive FT_Vector pointers
        vector = getattr(vector, "contents", vector)
        return vector.x, vector.y

    def move_to(a, ctx):
        if segments:
            segments.append(("Z", []))
        segments.append(("M", [xy(a)]))
        return 0

    def line_to(a, ctx):
        segments.append(("L", [xy(a)]))
        return 0

    def conic_to(a, b, ctx):
        segments.append(("Q", [xy(a), xy(b)]))
        return 0

    def cubic_to(a, b, c, ctx):
        segments.append(("C", [xy(a), xy(b), xy(c)]))
        return 0

    outline.decompose(segments, move_to=move_to, line_to=line_to, conic_to=conic_to, cubic_to=cubic_to)
    if segments:
        segments.append(("Z", []))
    return segments


def segments_to_record(segments: list[Segment], advance: float, scale: float) -> dict[str, Any]:
    """
    Flip, shift and serialise segments into a glyph record.

    Bounds include control points.
    """
    points = [point for _, pts in segments for point in pts]
    if not points:
        return {"path": "", "advance": advance, "minX": 0.0, "maxX": advance, "height": 0.0}

    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    top = max(ys)

    commands = []
    for command, pts in segments:
        coords = " ".join(
            f"{format_number(x * scale)} {format_number((top - y) * scale)}" for x, y in pts
        )
        commands.append(f"{command} {coords}" if coords else command)

    return {
        "path": " ".join(commands),
        "advance": advance,
        "minX": min(xs) * scale,
        "maxX": max(xs) * scale,
        "height": (top - min(ys)) * scale,
    }


def extract_glyphs(font_path: Path | str, text: str) -> list[dict[str, Any]]:
    """
    Return one glyph record per character of ``text``.

    Characters the font does not map fall back to glyph 0 (``.notdef``).
    """
    if TOOL_IMPORT_ERROR:
        raise RuntimeError(f"glyph tool unavailable: {TOOL_IMPORT_ERROR}") from TOOL_IMPORT_ERROR

    with open(font_path, "rb") as f:
        fontdata = f.read()

    hb_face = hb.Face(hb.Blob(fontdata))
    hb_font = hb.Font(hb_face)
    hb.ot_font_set_funcs(hb_font)
    upem = hb_face.upem
    hb_font.scale = (upem, upem)

    ft_face = Face(str(font_path))
    scale = GLYPH_UNITS_PER_EM / upem

    records = []
    for char in text:
        gid = hb_font.get_nominal_glyph(ord(char)) or 0
        advance = hb_font.get_glyph_h_advance(gid) * scale
        ft_face.load_glyph(gid, FT_LOAD_NO_SCALE)
        segments = decompose_outline(ft_face.glyph.outline)
        records.append(segments_to_record(segments, advance, scale))
    return records


@click.command()
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("text")
def main(font_file: str, text: str):
    """Print glyph outline records for TEXT set in FONT_FILE."""
    try:
        records = extract_glyphs(font_file, text)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(json.dumps(records))


if __name__ == "__main__":
    main()
