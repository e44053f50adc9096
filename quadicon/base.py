# this_file: quadicon/base.py
"""
Glyph records, the error taxonomy and the base class for glyph-source backends.
"""

from __future__ import annotations

import json
import math
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .constants import HELPER_DIR


class QuadiconError(RuntimeError):
    """Base class for every error raised by the icon pipeline."""


class GlyphSourceUnavailableError(QuadiconError):
    """Raised when a glyph-source backend cannot run on the current system."""


class GlyphSourceError(QuadiconError):
    """Raised when the external glyph tool exits with a non-zero status."""

    def __init__(self, text: str, stderr: str, returncode: int | None = None):
        self.text = text
        self.stderr = stderr.strip()
        self.returncode = returncode
        super().__init__(f"glyph tool failed ({text}): {self.stderr}")


class GlyphParseError(QuadiconError):
    """Raised when the glyph tool succeeded but its output is not usable."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f'Failed to parse glyph data for "{text}": {reason}')


def _number(record: dict[str, Any], key: str) -> float:
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise ValueError(f"{key!r} must be finite, got {value}")
    return number


@dataclass(frozen=True)
class Glyph:
    """
    Outline and metrics for one character, in glyph-source units.

    ``path`` is already Y-flipped and shifted so the top of the ink sits at 0;
    ``min_x``/``max_x`` are measured on the unflipped outline.
    """

    path: str
    advance: float
    min_x: float
    max_x: float
    height: float

    @classmethod
    def from_record(cls, record: Any) -> Glyph:
        """Build a glyph from one ``{path, advance, minX, maxX, height}`` record."""
        if not isinstance(record, dict):
            raise TypeError(f"glyph record must be an object, got {type(record).__name__}")
        path = record["path"]
        if not isinstance(path, str):
            raise TypeError(f"'path' must be a string, got {type(path).__name__}")
        min_x, max_x = _number(record, "minX"), _number(record, "maxX")
        height = _number(record, "height")
        if min_x > max_x:
            raise ValueError(f"minX {min_x} exceeds maxX {max_x}")
        if height < 0:
            raise ValueError(f"height must not be negative, got {height}")
        return cls(path=path, advance=_number(record, "advance"), min_x=min_x, max_x=max_x, height=height)

    def to_record(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "advance": self.advance,
            "minX": self.min_x,
            "maxX": self.max_x,
            "height": self.height,
        }

    @property
    def ink_width(self) -> float:
        return self.max_x - self.min_x


def parse_glyph_output(text: str, stdout: str) -> list[Glyph]:
    """
    Parse the JSON emitted by a glyph tool for ``text``.

    Raises:
        GlyphParseError: If the payload is not an array with one glyph record
            per Unicode scalar of ``text``.
    """
    try:
        payload = json.loads(stdout)
        if not isinstance(payload, list):
            raise TypeError(f"expected a JSON array, got {type(payload).__name__}")
        glyphs = [Glyph.from_record(record) for record in payload]
    except (ValueError, TypeError, KeyError) as exc:
        raise GlyphParseError(text, str(exc)) from exc

    # Unmapped characters are an error, never filled in with a neighbouring glyph
    if len(glyphs) != len(text):
        raise GlyphParseError(
            text, f"expected {len(text)} glyphs, tool returned {len(glyphs)}"
        )
    return glyphs


class BaseGlyphSource(ABC):
    """
    Abstract base class for glyph-source backends.

    A backend knows how to build the command line of its external tool; the
    base class runs it, classifies failures and caches results per text.
    """

    engine: str = "base"

    def __init__(self, *, helper_dir: Path | str | None = None):
        self.helper_dir = Path(helper_dir) if helper_dir is not None else Path.cwd() / HELPER_DIR
        self.invocations = 0
        self._cache: dict[str, list[Glyph]] = {}

    @classmethod
    def is_available(cls) -> bool:
        """
        Return True if the backend can run on the current system.
        """
        return True

    @abstractmethod
    def build_command(self, text: str) -> list[str]:
        """
        Command line that prints the glyph records for ``text`` as JSON.
        """

    def prepare(self) -> None:
        """
        Create helper artefacts the tool depends on. Called before each run.
        """

    def environment(self) -> dict[str, str] | None:
        """Child process environment; None inherits the current one."""
        return None

    def get_glyphs(self, text: str) -> list[Glyph]:
        """
        Return one glyph per Unicode scalar of ``text``, in input order.

        Identical texts are served from the cache without re-running the tool.

        Raises:
            GlyphSourceError: The tool exited with a non-zero status.
            GlyphParseError: The tool output could not be parsed.
        """
        cached = self._cache.get(text)
        if cached is not None:
            return cached

        self.prepare()
        self.invocations += 1
        workdir = self.helper_dir.parent
        try:
            result = subprocess.run(
                self.build_command(text),
                capture_output=True,
                text=True,
                cwd=workdir if workdir.is_dir() else None,
                env=self.environment(),
            )
        except OSError as exc:
            raise GlyphSourceError(text, str(exc)) from exc
        if result.returncode != 0:
            raise GlyphSourceError(text, result.stderr, result.returncode)

        glyphs = parse_glyph_output(text, result.stdout)
        self._cache[text] = glyphs
        return glyphs

    def clear_cache(self) -> None:
        self._cache.clear()

    def summary(self) -> dict[str, Any]:
        """
        Diagnostics for verbose output.
        """
        return {
            "engine": self.engine,
            "helper_dir": str(self.helper_dir),
            "cached_texts": sorted(self._cache),
            "invocations": self.invocations,
        }
