# this_file: tests/conftest.py

"""Shared fixtures: synthetic glyphs and glyph sources that never spawn tools."""

import json
import subprocess

import pytest

from quadicon.base import BaseGlyphSource, Glyph


def make_glyph(advance=600.0, min_x=0.0, max_x=None, height=700.0, path="M 0 0 L 10 0 L 10 10 Z"):
    return Glyph(
        path=path,
        advance=float(advance),
        min_x=float(min_x),
        max_x=float(advance if max_x is None else max_x),
        height=float(height),
    )


class EchoGlyphSource(BaseGlyphSource):
    """Runs a fake tool; tests patch subprocess.run."""

    engine = "echo"

    def build_command(self, text):
        return ["glyph-tool", "Font", text]


class StaticGlyphSource(BaseGlyphSource):
    """Serves one synthetic glyph per character without any subprocess."""

    engine = "static"

    def __init__(self, error=None, **kwargs):
        super().__init__(**kwargs)
        self.error = error

    def build_command(self, text):
        return ["true"]

    def get_glyphs(self, text):
        if self.error is not None:
            raise self.error
        self.invocations += 1
        return [make_glyph(advance=600 + 10 * i, min_x=20, max_x=580, height=700 - 10 * i) for i in range(len(text))]


def completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(["glyph-tool"], returncode, stdout=stdout, stderr=stderr)


def records_json(count, **overrides):
    return json.dumps([dict(make_glyph().to_record(), **overrides) for _ in range(count)])


@pytest.fixture
def glyph_factory():
    return make_glyph


@pytest.fixture
def echo_source(tmp_path):
    return EchoGlyphSource(helper_dir=tmp_path / ".quadicon")


@pytest.fixture
def static_source(tmp_path):
    return StaticGlyphSource(helper_dir=tmp_path / ".quadicon")
