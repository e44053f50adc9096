# this_file: quadicon/harfbuzzpy.py
"""
Glyph source using HarfBuzz for character mapping and FreeType for outlines.
"""

from __future__ import annotations

import sys
from pathlib import Path

from .base import BaseGlyphSource, GlyphSourceUnavailableError

try:
    import freetype  # noqa: F401
    import uharfbuzz  # noqa: F401
except ImportError as exc:  # pragma: no cover - dependency error handled via is_available
    HB_IMPORT_ERROR: ImportError | None = exc
else:
    HB_IMPORT_ERROR = None


class HarfBuzzGlyphSource(BaseGlyphSource):
    """
    Cross-platform glyph source driving ``quadicon.glyph_tool`` in a subprocess.

    Needs a font file, since there is no system font lookup by name.
    """

    engine = "harfbuzz"

    def __init__(self, font_path: Path | str, **kwargs):
        if HB_IMPORT_ERROR:
            raise GlyphSourceUnavailableError(
                f"harfbuzz glyph source unavailable: {HB_IMPORT_ERROR}"
            ) from HB_IMPORT_ERROR
        font_path = Path(font_path)
        if not font_path.is_file():
            raise GlyphSourceUnavailableError(f"Font file not found: {font_path}")

        super().__init__(**kwargs)
        self.font_path = font_path.resolve()

    @classmethod
    def is_available(cls) -> bool:
        """Check if HarfBuzz glyph source is available (requires uharfbuzz and freetype-py)."""
        return HB_IMPORT_ERROR is None

    def build_command(self, text: str) -> list[str]:
        return [sys.executable, "-m", "quadicon.glyph_tool", str(self.font_path), text]

    def summary(self):
        info = super().summary()
        info["font"] = self.font_path.name
        return info
