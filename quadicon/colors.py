# this_file: quadicon/colors.py
"""
Four-colour quadrant palettes and channel-wise colour inversion.
"""

from __future__ import annotations

import random
from typing import NamedTuple


class Palette(NamedTuple):
    """Background colours of the four canvas quadrants."""

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str

    def inverted(self, quadrant: str) -> str:
        return invert_hex_colour(getattr(self, quadrant))


PALETTES: list[Palette] = [
    Palette("#77BEF0", "#FFCB61", "#FF894F", "#EA5B6F"),
    Palette("#FF2DD1", "#FDFFB8", "#4DFFBE", "#63C8FF"),
    Palette("#722323", "#BA487F", "#FF9587", "#FFECCC"),
    Palette("#347433", "#FFC107", "#FF6F3C", "#B22222"),
    Palette("#0B1D51", "#725CAD", "#8CCDEB", "#FFE3A9"),
    Palette("#F4E7E1", "#FF9B45", "#D5451B", "#521C0D"),
    Palette("#F3F3E0", "#27548A", "#183B4E", "#DDA853"),
    Palette("#000000", "#8E1616", "#E8C999", "#F8EEDF"),
    Palette("#8F87F1", "#C68EFD", "#E9A5F1", "#FED2E2"),
    Palette("#F5ECE0", "#5F99AE", "#336D82", "#693382"),
]


def parse_hex_colour(hex_str: str) -> tuple[int, int, int]:
    """Parse ``#RRGGBB`` (leading ``#`` optional) into channel values."""
    digits = hex_str.lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Invalid color format: {hex_str}. Must be RRGGBB")
    try:
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    except ValueError:
        raise ValueError(f"Invalid color format: {hex_str}. Must be RRGGBB") from None


def invert_hex_colour(hex_str: str) -> str:
    """8-bit complement of every channel, as lower-case ``#rrggbb``."""
    return "#" + "".join(f"{255 - channel:02x}" for channel in parse_hex_colour(hex_str))


def pick_palette(rng: random.Random | None = None) -> Palette:
    """Uniformly random palette from the catalogue."""
    return (rng or random).choice(PALETTES)
