from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np

from asciivid.config import RenderConfig
from asciivid.edges import extract_edges
from asciivid.exceptions import GridError
from asciivid.glyph import Glyph, build_glyph
from asciivid.grid import TextGrid
from asciivid.renderer import GlyphRenderer
from asciivid.sampling import CellSample, sample_cells


@dataclass
class RenderedFrame:
    edges: np.ndarray  # (H, W) uint8
    samples: list[CellSample]  # row-major
    canvas: np.ndarray  # (rows * char_h, cols * char_w, 3) uint8
    glyphs: int  # number of cells drawn


class FrameObserver(Protocol):
    def __call__(self, index: int, frame: np.ndarray, rendered: RenderedFrame) -> None:
        """Called once for every frame written to the output."""
        ...


class AsciiEngine:
    """Renders single frames as ASCII art. Holds no per-frame state."""

    def __init__(self, config: RenderConfig | None = None, glyph: Glyph | None = None):
        self.config = config or RenderConfig()
        if glyph is None:
            glyph = build_glyph(self.config.glyph_char, self.config.font_path, self.config.font_size)
        self.glyph = glyph
        self.renderer = GlyphRenderer(glyph, self.config.char_thresh)

    def grid_for(self, width: int, height: int) -> TextGrid:
        return TextGrid.for_frame(width, height, self.config.text_width, self.config.text_height)

    def canvas_size(self, grid: TextGrid) -> tuple[int, int]:
        return self.renderer.canvas_size(grid)

    def edges(self, frame: np.ndarray) -> np.ndarray:
        return extract_edges(
            frame,
            blur_kernel=self.config.blur_kernel,
            low_threshold=self.config.low_threshold,
            threshold_ratio=self.config.threshold_ratio,
            aperture_size=self.config.aperture_size,
        )

    def render(self, frame: np.ndarray, grid: TextGrid) -> RenderedFrame:
        width, height = grid.sampled_size
        if frame.shape[1] < width or frame.shape[0] < height:
            raise GridError(
                f"Frame of {frame.shape[1]}x{frame.shape[0]} does not cover the {width}x{height} sampled area"
            )
        edges = self.edges(frame)
        samples = sample_cells(frame, edges, grid)
        canvas = self.renderer.render(samples, grid)
        return RenderedFrame(
            edges=edges, samples=samples, canvas=canvas, glyphs=self.renderer.count_glyphs(samples)
        )
