from typing import NamedTuple

import numpy as np

from asciivid.grid import TextGrid


class CellSample(NamedTuple):
    row: int
    col: int
    density: int  # truncated mean edge strength, 0-255
    color: tuple[int, int, int]  # BGR


def _weighted_colour(pixels: np.ndarray, weights: np.ndarray, axes: tuple[int, ...]) -> np.ndarray:
    """Weighted mean colour over ``axes``, falling back to the plain mean where the weights sum to zero."""
    weight_sum = weights.sum(axis=axes)
    weighted = (pixels * weights[..., np.newaxis]).sum(axis=axes)
    plain = pixels.mean(axis=axes)
    colour = np.where(
        weight_sum[..., np.newaxis] > 0,
        weighted / np.where(weight_sum > 0, weight_sum, 1)[..., np.newaxis],
        plain,
    )
    return np.clip(colour, 0, 255).astype(np.uint8)


def sample_cell(
    window: np.ndarray, edges: np.ndarray, weights: np.ndarray | None = None
) -> tuple[int, tuple[int, int, int]]:
    """Density and colour of a single sampling window.

    Args:
        window: (h, w, 3) pixels of the window
        edges: (h, w) edge map of the window
        weights: (h, w) colour weights; defaults to ``edges``

    Returns:
        density: integer mean of ``edges``
        color: mean BGR colour weighted by ``weights``
    """
    edge_values = np.asarray(edges, dtype=np.float64)
    weight_values = edge_values if weights is None else np.asarray(weights, dtype=np.float64)
    density = int(edge_values.mean())
    colour = _weighted_colour(np.asarray(window, dtype=np.float64), weight_values, (0, 1))
    return density, tuple(int(c) for c in colour)


def _cells(arr: np.ndarray, grid: TextGrid) -> np.ndarray:
    """Reshape a frame-sized array into (rows, cols, window_h, window_w, ...) windows."""
    width, height = grid.sampled_size
    trimmed = arr[:height, :width]
    shape = (grid.rows, grid.window_height, grid.cols, grid.window_width) + arr.shape[2:]
    return trimmed.reshape(shape).swapaxes(1, 2)


def sample_cells(
    frame: np.ndarray,
    edges: np.ndarray,
    grid: TextGrid,
    weights: np.ndarray | None = None,
) -> list[CellSample]:
    """Sample every cell of ``grid`` at once.

    Returns ``grid.cols * grid.rows`` samples in row-major order. ``weights``
    decouples colour sampling from the edge map used for density; by default
    colours are sampled under the edge map.
    """
    edge_cells = _cells(np.asarray(edges, dtype=np.float64), grid)
    weight_cells = edge_cells if weights is None else _cells(np.asarray(weights, dtype=np.float64), grid)
    pixel_cells = _cells(np.asarray(frame, dtype=np.float64), grid)

    densities = edge_cells.mean(axis=(2, 3)).astype(np.int64)
    colours = _weighted_colour(pixel_cells, weight_cells, (2, 3))

    return [
        CellSample(row, col, int(densities[row, col]), tuple(int(c) for c in colours[row, col]))
        for row in range(grid.rows)
        for col in range(grid.cols)
    ]
