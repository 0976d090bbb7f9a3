"""
Tests for rasterization, region classification and the containment index.
"""

from collections import deque

import numpy as np
import pytest

import max_rectangle.grid as grid_module

from max_rectangle.compression import compress_points
from max_rectangle.containment import ContainmentIndex
from max_rectangle.errors import NonAxisAlignedEdge
from max_rectangle.grid import BORDER, Cell, classify_regions, count_cells, rasterize
from polygons import EXAMPLE, L_SHAPE, RECTANGLE, SLIT_CAVITY, U_SHAPE


def build(vertices):
    polygon = compress_points(vertices)
    grid = rasterize(polygon)
    labels = classify_regions(grid)
    return polygon, grid, labels


def test_rectangle_grid():
    polygon, grid, labels = build(RECTANGLE)

    assert grid.shape == (5, 5)
    assert count_cells(labels) == {'boundary': 8, 'exterior': 16, 'interior': 1}
    assert labels[2, 2] == Cell.INTERIOR


def test_rasterize_marks_only_edges():
    polygon, grid, _ = build(RECTANGLE)

    inner = grid[BORDER:-BORDER, BORDER:-BORDER]
    expected = np.array([
        [1, 1, 1],
        [1, 0, 1],
        [1, 1, 1],
    ], dtype=np.uint8)
    assert np.array_equal(inner, expected)
    assert not grid[0, :].any() and not grid[-1, :].any()


def test_classify_does_not_mutate_input():
    _, grid, labels = build(RECTANGLE)

    assert (grid == Cell.OPEN).any()
    assert not (labels == Cell.OPEN).any()


def test_l_shape_missing_quadrant_is_exterior():
    polygon, _, labels = build(L_SHAPE)

    # x = 10, y = 10 is outside the L
    r = polygon.y_axis.slot(polygon.y_axis.rank(10)) + BORDER
    c = polygon.x_axis.slot(polygon.x_axis.rank(10)) + BORDER
    assert labels[r, c] == Cell.EXTERIOR


def test_u_shape_notch_is_exterior():
    """The notch holds no vertex coordinate; only the gap slot represents it."""
    polygon, _, labels = build(U_SHAPE)

    # x slot between 3 and 7, y slot of the top edge (y = 10)
    c = polygon.x_axis.slot(polygon.x_axis.rank(3)) + 1 + BORDER
    r = polygon.y_axis.slot(polygon.y_axis.rank(10)) + BORDER
    assert labels[r, c] == Cell.EXTERIOR
    assert labels[r - 1, c] == Cell.EXTERIOR


def test_repeated_vertex_is_accepted():
    polygon, _, labels = build([(0, 0), (0, 3), (0, 3), (5, 3), (5, 0)])

    assert count_cells(labels)['interior'] == 1


def test_non_axis_aligned_edge():
    with pytest.raises(NonAxisAlignedEdge) as excinfo:
        rasterize(compress_points([(0, 0), (3, 4)]))

    error = excinfo.value
    assert (error.first, error.second) == (0, 1)
    assert error.first_point == (0, 0)
    assert error.second_point == (3, 4)
    assert "points 0 and 1" in str(error)


def test_non_axis_aligned_closing_edge():
    """The wrap from last to first vertex is an edge too."""
    with pytest.raises(NonAxisAlignedEdge) as excinfo:
        rasterize(compress_points([(0, 0), (0, 5), (5, 5), (5, 2)]))

    assert (excinfo.value.first, excinfo.value.second) == (3, 0)


def test_every_cell_labelled():
    for vertices in (RECTANGLE, L_SHAPE, U_SHAPE, EXAMPLE):
        _, _, labels = build(vertices)
        allowed = {int(Cell.BOUNDARY), int(Cell.EXTERIOR), int(Cell.INTERIOR)}
        assert set(np.unique(labels).tolist()) <= allowed


def test_containment_queries():
    polygon, _, labels = build(U_SHAPE)
    index = ContainmentIndex(labels, polygon)

    rank_x = polygon.x_axis.rank
    rank_y = polygon.y_axis.rank

    # Whole bounding box covers the notch
    assert index.rect_bad(0, 0, rank_y(10), rank_x(10)) > 0
    # Left arm
    assert index.contains(0, 0, rank_y(10), rank_x(3))
    # Base
    assert index.contains(0, 0, rank_y(3), rank_x(10))
    # Single cell on a vertex
    assert index.contains(rank_y(3), rank_x(7), rank_y(3), rank_x(7))


def test_rect_bad_requires_normalized_rectangle():
    polygon, _, labels = build(RECTANGLE)
    index = ContainmentIndex(labels, polygon)

    with pytest.raises(ValueError):
        index.rect_bad(1, 0, 0, 1)
    with pytest.raises(ValueError):
        index.rect_bad(0, 1, 1, 0)
    with pytest.raises(ValueError):
        index.rect_bad(0, 0, 2, 1)


def test_prefix_table_shape():
    polygon, _, labels = build(EXAMPLE)
    index = ContainmentIndex(labels, polygon)

    assert index.prefix.shape == (polygon.height + 1, polygon.width + 1)
    assert index.prefix[-1, -1] == np.count_nonzero(
        labels[BORDER:-BORDER, BORDER:-BORDER] == Cell.EXTERIOR)


@pytest.mark.parametrize("vertices", [RECTANGLE, L_SHAPE, U_SHAPE, EXAMPLE])
def test_flood_fill_visits_each_cell_once(monkeypatch, vertices):
    """Every exterior cell is enqueued exactly once, nothing else is enqueued."""
    appended = []

    class RecordingDeque(deque):
        def append(self, item):
            appended.append(item)
            super().append(item)

    monkeypatch.setattr(grid_module, "deque", RecordingDeque)
    _, _, labels = build(vertices)

    assert len(appended) == count_cells(labels)['exterior']
    assert len(set(appended)) == len(appended), "cell enqueued twice"
    assert all(labels[r, c] == Cell.EXTERIOR for r, c in appended)


def test_slit_cavity_is_interior():
    """A cavity reachable only through a tile-less slit is enclosed."""
    polygon, _, labels = build(SLIT_CAVITY)

    # x = 5 lies in the gap slot between 2 and 7, y = 6 between 5 and 8
    c = polygon.x_axis.slot(polygon.x_axis.rank(2)) + 1 + BORDER
    r = polygon.y_axis.slot(polygon.y_axis.rank(5)) + 1 + BORDER
    assert labels[r, c] == Cell.INTERIOR
    assert labels.dtype == np.uint8
