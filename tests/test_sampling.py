import numpy as np
import pytest

from asciivid.grid import TextGrid
from asciivid.sampling import CellSample, sample_cell, sample_cells


def test_sample_cell_density_is_truncated_mean():
    edges = np.zeros((4, 4), dtype=np.uint8)
    edges[0, :3] = 255  # 765 / 16 = 47.8
    window = np.zeros((4, 4, 3), dtype=np.uint8)
    density, _ = sample_cell(window, edges)
    assert density == 47


def test_sample_cell_colour_follows_edges():
    window = np.zeros((2, 2, 3), dtype=np.uint8)
    window[0, 0] = (0, 0, 255)
    window[1, 1] = (255, 0, 0)
    edges = np.zeros((2, 2), dtype=np.uint8)
    edges[0, 0] = 255
    _, colour = sample_cell(window, edges)
    assert colour == (0, 0, 255)


def test_sample_cell_weights_are_proportional():
    window = np.zeros((1, 2, 3), dtype=np.uint8)
    window[0, 0] = (200, 200, 200)
    window[0, 1] = (100, 100, 100)
    edges = np.array([[255, 85]], dtype=np.uint8)  # 3:1 weighting
    _, colour = sample_cell(window, edges)
    assert colour == (175, 175, 175)


def test_sample_cell_without_edges_uses_plain_mean():
    window = np.zeros((2, 2, 3), dtype=np.uint8)
    window[0] = (100, 40, 20)
    edges = np.zeros((2, 2), dtype=np.uint8)
    density, colour = sample_cell(window, edges)
    assert density == 0
    assert colour == (50, 20, 10)


def test_sample_cell_separate_colour_weights():
    window = np.zeros((1, 2, 3), dtype=np.uint8)
    window[0, 0] = (10, 10, 10)
    window[0, 1] = (250, 250, 250)
    edges = np.array([[255, 0]], dtype=np.uint8)
    weights = np.array([[0, 1]], dtype=np.float64)
    density, colour = sample_cell(window, edges, weights)
    assert density == 127
    assert colour == (250, 250, 250)


def test_sample_cells_row_major_and_complete():
    grid = TextGrid.for_frame(35, 22, cols=3, rows=2)
    frame = np.zeros((22, 35, 3), dtype=np.uint8)
    edges = np.zeros((22, 35), dtype=np.uint8)
    samples = sample_cells(frame, edges, grid)
    assert len(samples) == 6
    assert [(s.row, s.col) for s in samples] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
    assert all(isinstance(s, CellSample) for s in samples)


def test_sample_cells_ignores_remainder_pixels():
    grid = TextGrid.for_frame(25, 10, cols=2, rows=1)  # 12px windows, column 24 unsampled
    frame = np.zeros((10, 25, 3), dtype=np.uint8)
    edges = np.zeros((10, 25), dtype=np.uint8)
    edges[:, 24] = 255
    frame[:, 24] = 255
    samples = sample_cells(frame, edges, grid)
    assert all(s.density == 0 for s in samples)
    assert all(s.color == (0, 0, 0) for s in samples)


def test_sample_cells_matches_sample_cell():
    rng = np.random.default_rng(42)
    frame = rng.integers(0, 256, (37, 53, 3), dtype=np.uint8)
    edges = (rng.random((37, 53)) > 0.7).astype(np.uint8) * 255
    grid = TextGrid.for_frame(53, 37, cols=5, rows=3)
    samples = sample_cells(frame, edges, grid)
    for s in samples:
        x, y, w, h = grid.window(s.row, s.col)
        density, colour = sample_cell(frame[y : y + h, x : x + w], edges[y : y + h, x : x + w])
        assert s.density == density
        np.testing.assert_allclose(s.color, colour, atol=1)


def test_sample_cells_localises_edges():
    grid = TextGrid.for_frame(40, 20, cols=4, rows=2)
    frame = np.zeros((20, 40, 3), dtype=np.uint8)
    frame[10:20, 20:30] = (0, 255, 0)
    edges = np.zeros((20, 40), dtype=np.uint8)
    edges[10:20, 20:30] = 255
    samples = {(s.row, s.col): s for s in sample_cells(frame, edges, grid)}
    assert samples[(1, 2)].density == 255
    assert samples[(1, 2)].color == (0, 255, 0)
    assert sum(1 for s in samples.values() if s.density > 0) == 1


@pytest.mark.parametrize("shape", [(10, 10), (100, 64), (333, 201)])
def test_sample_cells_count_independent_of_frame_size(shape):
    height, width = shape
    grid = TextGrid.for_frame(width, height, cols=10, rows=5)
    samples = sample_cells(np.zeros((height, width, 3), np.uint8), np.zeros((height, width), np.uint8), grid)
    assert len(samples) == 50


def test_sample_cell_fractional_weights_are_normalised():
    window = np.zeros((1, 2, 3), dtype=np.uint8)
    window[0, 0] = (10, 10, 10)
    window[0, 1] = (250, 250, 250)
    edges = np.array([[255, 0]], dtype=np.uint8)
    weights = np.array([[0.0, 0.5]])
    _, colour = sample_cell(window, edges, weights)
    assert colour == (250, 250, 250)


def test_sample_cells_fractional_weights_are_normalised():
    grid = TextGrid.for_frame(4, 2, cols=2, rows=1)
    frame = np.zeros((2, 4, 3), dtype=np.uint8)
    frame[:, :2] = (200, 100, 50)
    frame[:, 2:] = (30, 60, 90)
    edges = np.zeros((2, 4), dtype=np.uint8)
    weights = np.zeros((2, 4))
    weights[0, 1] = 0.25
    weights[1, 3] = 0.125
    samples = sample_cells(frame, edges, grid, weights)
    assert samples[0].color == (200, 100, 50)
    assert samples[1].color == (30, 60, 90)
