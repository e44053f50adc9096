# this_file: quadicon/layout.py
"""
Fit a short glyph string onto the quadrant canvas.

One vertical scale is shared by every glyph so the string keeps a single cap
height. Horizontally the string first gives up inter-glyph spacing, then, if it
still does not fit, shrinks the horizontal scale and spacing together. Each
glyph is finally assigned the half of the canvas (or, for the middle of a
three-letter mark, all four quadrants) whose inverted colours it is painted in.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .base import Glyph, QuadiconError
from .constants import (
    AVAILABLE_WIDTH,
    AVAILABLE_WIDTH_THREE,
    CANVAS_CENTER,
    CANVAS_SIZE,
    INITIAL_SPACING_RATIO,
    MINIMUM_SPACING_RATIO,
    QUADRANT_SIZE,
    TARGET_HEIGHT,
)


class LayoutError(QuadiconError):
    """Raised when a glyph sequence cannot be laid out."""


@dataclass(frozen=True)
class LayoutParams:
    target_height: float = TARGET_HEIGHT
    available_width: float = AVAILABLE_WIDTH
    initial_spacing: float = 0.0
    minimum_spacing: float = 0.0

    @classmethod
    def for_count(cls, count: int) -> LayoutParams:
        """Default parameters for a string of ``count`` glyphs."""
        multi = count > 1
        return cls(
            target_height=TARGET_HEIGHT,
            available_width=AVAILABLE_WIDTH_THREE if count == 3 else AVAILABLE_WIDTH,
            initial_spacing=TARGET_HEIGHT * INITIAL_SPACING_RATIO if multi else 0.0,
            minimum_spacing=TARGET_HEIGHT * MINIMUM_SPACING_RATIO if multi else 0.0,
        )


@dataclass(frozen=True)
class FillRegion:
    """Rectangle painted through a glyph clip with the inverted ``quadrant`` colour."""

    x: float
    y: float
    width: float
    height: float
    quadrant: str


@dataclass
class GlyphPlacement:
    index: int
    glyph: Glyph
    clip_id: str
    translate_x: float
    translate_y: float
    left: float
    right: float
    regions: list[FillRegion] = field(default_factory=list)


@dataclass
class Layout:
    vertical_scale: float
    horizontal_scale: float
    spacing: float
    total_width: float
    placements: list[GlyphPlacement] = field(default_factory=list)


def total_width(advances: Sequence[float], scale_x: float, spacing: float) -> float:
    return sum(advances) * scale_x + spacing * (len(advances) - 1)


def settle_scale(
    advances: Sequence[float], vertical_scale: float, params: LayoutParams
) -> tuple[float, float]:
    """
    Negotiate the horizontal scale and spacing for the given advances.

    Returns:
        ``(horizontal_scale, spacing)``; the resulting width never exceeds
        ``params.available_width``.
    """
    count = len(advances)
    horizontal_scale = vertical_scale
    if count < 2:
        return horizontal_scale, 0.0

    spacing = params.initial_spacing
    minimum = params.minimum_spacing
    available = params.available_width
    gaps = count - 1

    total = total_width(advances, horizontal_scale, spacing)
    if total > available and spacing > minimum:
        excess = total - available
        capacity = (spacing - minimum) * gaps
        spacing = max(spacing - min(excess, capacity) / gaps, minimum)
        total = total_width(advances, horizontal_scale, spacing)

    if total > available:
        factor = available / total
        horizontal_scale *= factor
        spacing *= factor

    return horizontal_scale, spacing


def choose_column(left: float, right: float) -> int:
    """
    0 for the left half, 1 for the right half, by overlap with each half.

    Equal overlaps go to the half containing the glyph's centre, the right one
    when the centre is exactly on the midline.
    """
    left_overlap = max(0.0, min(CANVAS_CENTER, right) - max(0.0, left))
    right_overlap = max(0.0, min(CANVAS_SIZE, right) - max(CANVAS_CENTER, left))
    if right_overlap > left_overlap:
        return 1
    if right_overlap == left_overlap and left + (right - left) / 2 >= CANVAS_CENTER:
        return 1
    return 0


def quadrant_regions() -> list[FillRegion]:
    q = QUADRANT_SIZE
    return [
        FillRegion(0, 0, q, q, "top_left"),
        FillRegion(q, 0, q, q, "top_right"),
        FillRegion(0, q, q, q, "bottom_left"),
        FillRegion(q, q, q, q, "bottom_right"),
    ]


def half_regions(column: int) -> list[FillRegion]:
    side = "right" if column else "left"
    q = QUADRANT_SIZE
    return [
        FillRegion(0, 0, CANVAS_SIZE, q, f"top_{side}"),
        FillRegion(0, q, CANVAS_SIZE, q, f"bottom_{side}"),
    ]


def layout_glyphs(glyphs: Sequence[Glyph], params: LayoutParams | None = None) -> Layout:
    """
    Place ``glyphs`` on the canvas.

    Raises:
        LayoutError: If there are no glyphs or their advances sum to zero or less.
    """
    count = len(glyphs)
    if count == 0:
        raise LayoutError("No glyphs to lay out")
    advances = [glyph.advance for glyph in glyphs]
    if sum(advances) <= 0:
        raise LayoutError("Glyph advances sum to zero; nothing to lay out")

    params = params or LayoutParams.for_count(count)
    vertical_scale = params.target_height / max(max(glyph.height for glyph in glyphs), 1)
    horizontal_scale, spacing = settle_scale(advances, vertical_scale, params)
    width = total_width(advances, horizontal_scale, spacing)

    layout = Layout(vertical_scale, horizontal_scale, spacing, width)
    cursor = CANVAS_CENTER - width / 2
    for index, glyph in enumerate(glyphs):
        left = cursor
        right = cursor + glyph.ink_width * horizontal_scale
        if count == 3 and index == 1:
            regions = quadrant_regions()
        else:
            regions = half_regions(choose_column(left, right))

        layout.placements.append(
            GlyphPlacement(
                index=index,
                glyph=glyph,
                clip_id=f"letter-clip-{index}",
                translate_x=cursor - glyph.min_x * horizontal_scale,
                translate_y=CANVAS_CENTER - glyph.height * vertical_scale / 2,
                left=left,
                right=right,
                regions=regions,
            )
        )
        cursor += glyph.advance * horizontal_scale + spacing

    return layout
