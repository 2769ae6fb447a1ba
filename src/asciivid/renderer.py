from collections.abc import Iterable

import numpy as np

from asciivid.glyph import Glyph
from asciivid.grid import TextGrid
from asciivid.sampling import CellSample


class GlyphRenderer:
    """Paints one glyph per cell whose edge density exceeds ``char_thresh``."""

    def __init__(self, glyph: Glyph, char_thresh: int):
        self.glyph = glyph
        self.char_thresh = char_thresh

    def canvas_size(self, grid: TextGrid) -> tuple[int, int]:
        """(width, height) of the output canvas for ``grid``."""
        return self.glyph.width * grid.cols, self.glyph.height * grid.rows

    def draws(self, sample: CellSample) -> bool:
        return sample.density > self.char_thresh

    def count_glyphs(self, samples: Iterable[CellSample]) -> int:
        return sum(1 for sample in samples if self.draws(sample))

    def render(self, samples: Iterable[CellSample], grid: TextGrid) -> np.ndarray:
        """Render samples onto a fresh black BGR canvas."""
        width, height = self.canvas_size(grid)
        canvas = np.zeros((height, width, 3), dtype=np.uint8)
        cw, ch = self.glyph.width, self.glyph.height
        mask = self.glyph.mask
        for sample in samples:
            if not self.draws(sample):
                continue
            # Cell origin is the top-left; the glyph's baseline lands on y + ch
            x = sample.col * cw
            y = sample.row * ch
            canvas[y : y + ch, x : x + cw][mask] = sample.color
        return canvas
