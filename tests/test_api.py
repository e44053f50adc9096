# this_file: tests/test_api.py

"""Tests for the package-level icon generation API."""

import random

import pytest

import quadicon
from quadicon import PALETTES, GlyphSourceError, LayoutError, generate_icon_svg

from conftest import StaticGlyphSource


class TestGenerateIconSvg:
    """Test end-to-end generation with a synthetic glyph source."""

    def test_writes_document(self, static_source, tmp_path):
        out = tmp_path / "assets" / "logo.svg"
        result = generate_icon_svg("HI", "Home Indicator", out, static_source, palette=PALETTES[3])
        assert result.output_path == out
        assert result.palette == PALETTES[3]
        assert result.short_name == "HI"
        assert result.full_name == "Home Indicator"
        assert len(result.layout.placements) == 2
        text = out.read_text(encoding="utf-8")
        assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert PALETTES[3].top_left in text

    def test_seeded_palette(self, static_source, tmp_path):
        a = generate_icon_svg("A", "App", tmp_path / "a.svg", static_source, rng=random.Random(5))
        b = generate_icon_svg("A", "App", tmp_path / "b.svg", static_source, rng=random.Random(5))
        assert a.palette == b.palette
        assert (tmp_path / "a.svg").read_text() == (tmp_path / "b.svg").read_text()

    def test_no_file_on_source_failure(self, tmp_path):
        source = StaticGlyphSource(error=GlyphSourceError("AB", "boom", 1), helper_dir=tmp_path)
        out = tmp_path / "logo.svg"
        with pytest.raises(GlyphSourceError):
            generate_icon_svg("AB", "App", out, source)
        assert not out.exists()

    def test_no_file_on_layout_failure(self, tmp_path):
        source = StaticGlyphSource(error=LayoutError("degenerate"), helper_dir=tmp_path)
        out = tmp_path / "logo.svg"
        with pytest.raises(LayoutError):
            generate_icon_svg("AB", "App", out, source)
        assert not out.exists()


class TestExports:
    """Test that the public names are available."""

    def test_all_names_resolve(self):
        for name in quadicon.__all__:
            assert hasattr(quadicon, name)

    def test_version(self):
        assert isinstance(quadicon.__version__, str)

    def test_list_available_subset(self):
        assert set(quadicon.list_available()) <= {"coretext", "harfbuzz"}
