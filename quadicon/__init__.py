"""
Quadrant app icons from short names.

Lays out a 1-3 character mark on a four-colour canvas and paints each glyph in
the inverted colours of the quadrants it sits on. Glyph outlines come from one of
two backends:
- CoreText (macOS, through a Swift helper script)
- HarfBuzz + FreeType (cross-platform, needs a font file)
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path

from .base import (
    BaseGlyphSource,
    Glyph,
    GlyphParseError,
    GlyphSourceError,
    GlyphSourceUnavailableError,
    QuadiconError,
)
from .colors import PALETTES, Palette, invert_hex_colour, pick_palette
from .coretextpy import CoreTextGlyphSource
from .harfbuzzpy import HarfBuzzGlyphSource
from .layout import Layout, LayoutError, LayoutParams, layout_glyphs
from .naming import ValidationError, parse_names
from .svg import render_svg, write_svg

__version__ = "0.1.0"

BACKENDS = {
    "coretext": CoreTextGlyphSource,
    "harfbuzz": HarfBuzzGlyphSource,
}


def list_available() -> list[str]:
    """List glyph-source backends usable on this system."""
    return [name for name, cls in BACKENDS.items() if cls.is_available()]


def create_glyph_source(
    backend: str = "auto",
    font: Path | str | None = None,
    helper_dir: Path | str | None = None,
) -> BaseGlyphSource:
    """
    Create a glyph source.

    Args:
        backend: "coretext", "harfbuzz" or "auto" (CoreText on macOS when a
            font file is not given, HarfBuzz otherwise)
        font: Font name for CoreText, font file path for HarfBuzz
        helper_dir: Directory for helper artefacts (Swift script, caches)

    Raises:
        QuadiconError: Unknown backend name
        GlyphSourceUnavailableError: Backend cannot run here
    """
    if backend == "auto":
        available = list_available()
        if not available:
            raise GlyphSourceUnavailableError("No glyph sources available")
        if "coretext" in available and (font is None or not Path(font).is_file()):
            backend = "coretext"
        elif "harfbuzz" in available:
            backend = "harfbuzz"
        else:
            backend = available[0]

    if backend == "coretext":
        if font is None:
            return CoreTextGlyphSource(helper_dir=helper_dir)
        return CoreTextGlyphSource(str(font), helper_dir=helper_dir)
    elif backend == "harfbuzz":
        if font is None:
            raise GlyphSourceUnavailableError("harfbuzz glyph source requires a font file")
        return HarfBuzzGlyphSource(font, helper_dir=helper_dir)
    else:
        raise QuadiconError(f"Unknown backend: {backend}")


@dataclass
class IconResult:
    palette: Palette
    short_name: str
    full_name: str
    output_path: Path
    layout: Layout


def generate_icon_svg(
    short_name: str,
    full_name: str,
    output_path: Path | str,
    source: BaseGlyphSource,
    palette: Palette | None = None,
    rng: random.Random | None = None,
) -> IconResult:
    """
    Lay out ``short_name`` and write the icon SVG to ``output_path``.

    Nothing is written unless glyph lookup and layout succeed.
    """
    palette = palette or pick_palette(rng)
    glyphs = source.get_glyphs(short_name)
    layout = layout_glyphs(glyphs)
    path = write_svg(render_svg(layout, palette), output_path)
    return IconResult(palette, short_name, full_name, path, layout)


__all__ = [
    "BaseGlyphSource",
    "CoreTextGlyphSource",
    "Glyph",
    "GlyphParseError",
    "GlyphSourceError",
    "GlyphSourceUnavailableError",
    "HarfBuzzGlyphSource",
    "IconResult",
    "Layout",
    "LayoutError",
    "LayoutParams",
    "PALETTES",
    "Palette",
    "QuadiconError",
    "ValidationError",
    "create_glyph_source",
    "generate_icon_svg",
    "invert_hex_colour",
    "layout_glyphs",
    "list_available",
    "parse_names",
    "pick_palette",
    "render_svg",
    "write_svg",
    "__version__",
]
