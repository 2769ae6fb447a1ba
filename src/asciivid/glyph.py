import math
from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageDraw, ImageFont


@dataclass(frozen=True)
class Glyph:
    """A pre-rendered character cell. ``mask`` is boolean (char_h, char_w), baseline on the bottom row."""

    char: str
    mask: np.ndarray

    @property
    def width(self) -> int:
        return self.mask.shape[1]

    @property
    def height(self) -> int:
        return self.mask.shape[0]


def load_font(font_path: str | None, font_size: int) -> ImageFont.FreeTypeFont:
    """Load a TrueType font, or Pillow's bundled default font when no path is given."""
    if font_path is None:
        return ImageFont.load_default(size=font_size)
    return ImageFont.truetype(font_path, font_size)


def build_glyph(char: str, font_path: str | None = None, font_size: int = 12) -> Glyph:
    """Rasterise ``char`` into a binary mask sized to one character cell.

    The cell is as wide as the character's advance and as tall as the font's
    ascent; the glyph is drawn anchored at its left baseline on the bottom
    edge of the cell, without antialiasing.
    """
    font = load_font(font_path, font_size)
    ascent, _ = font.getmetrics()
    cell_width = max(1, math.ceil(font.getlength(char)))
    cell_height = max(1, ascent)

    img = Image.new("L", (cell_width, cell_height), 0)
    draw = ImageDraw.Draw(img)
    draw.fontmode = "1"
    draw.text((0, cell_height), char, fill=255, font=font, anchor="ls")
    return Glyph(char=char, mask=np.asarray(img) > 0)
