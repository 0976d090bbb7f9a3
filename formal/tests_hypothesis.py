"""
Property-based tests for the rectangle search using Hypothesis.

Random histogram-shaped rectilinear polygons (in every orientation) are
checked against invariants of each stage and against the brute-force
tile reference.
"""

import itertools

import numpy as np
import pytest
from hypothesis import given, strategies as st, settings, HealthCheck
from hypothesis.strategies import integers

from max_rectangle.compression import compress_points
from max_rectangle.containment import ContainmentIndex
from max_rectangle.geometric import brute_force_contained_area
from max_rectangle.grid import BORDER, Cell, classify_regions, rasterize
from max_rectangle.max_rectangle_finder import largest_bounding_area, solve
from polygons import histogram_polygon, point_lists


# Property 1: Part 1 is the plain maximum over all vertex pairs
@given(point_lists)
def test_part1_is_max_over_pairs(points):
    expected = max(
        ((abs(p[0] - q[0]) + 1) * (abs(p[1] - q[1]) + 1)
         for p, q in itertools.combinations(points, 2)),
        default=0,
    )
    assert largest_bounding_area(points) == expected


# Property 2: Containment can only shrink the candidate set
@given(histogram_polygon())
def test_part2_never_exceeds_part1(vertices):
    part1, part2 = solve(vertices)
    assert 0 < part2 <= part1


# Property 3: Grid engine agrees with the tile-by-tile reference
@given(histogram_polygon())
@settings(max_examples=300, deadline=None)
def test_matches_brute_force(vertices):
    _, part2 = solve(vertices)
    expected = brute_force_contained_area(vertices)

    assert part2 == expected, \
        f"Grid {part2} != brute force {expected} for {vertices}"


# Property 4: Every cell ends up with exactly one final label
@given(histogram_polygon())
def test_every_cell_classified(vertices):
    polygon = compress_points(vertices)
    grid = rasterize(polygon)
    labels = classify_regions(grid)

    allowed = {int(Cell.BOUNDARY), int(Cell.EXTERIOR), int(Cell.INTERIOR)}
    assert set(np.unique(labels).tolist()) <= allowed

    # Classification never touches boundary cells
    assert np.array_equal(labels == Cell.BOUNDARY, grid == Cell.BOUNDARY)

    # The border ring is never boundary, so it is entirely exterior
    assert (labels[0, :] == Cell.EXTERIOR).all()
    assert (labels[-1, :] == Cell.EXTERIOR).all()
    assert (labels[:, 0] == Cell.EXTERIOR).all()
    assert (labels[:, -1] == Cell.EXTERIOR).all()


# Property 5: Prefix-sum counts equal a direct scan of the sub-grid
@given(histogram_polygon(), st.data())
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_rect_bad_matches_direct_scan(vertices, data):
    polygon = compress_points(vertices)
    labels = classify_regions(rasterize(polygon))
    index = ContainmentIndex(labels, polygon)

    rows = len(polygon.y_axis)
    cols = len(polygon.x_axis)
    r1 = data.draw(integers(min_value=0, max_value=rows - 1))
    r2 = data.draw(integers(min_value=r1, max_value=rows - 1))
    c1 = data.draw(integers(min_value=0, max_value=cols - 1))
    c2 = data.draw(integers(min_value=c1, max_value=cols - 1))

    s1 = polygon.y_axis.slot(r1) + BORDER
    s2 = polygon.y_axis.slot(r2) + BORDER
    t1 = polygon.x_axis.slot(c1) + BORDER
    t2 = polygon.x_axis.slot(c2) + BORDER
    direct = int(np.count_nonzero(labels[s1:s2 + 1, t1:t2 + 1] == Cell.EXTERIOR))

    assert index.rect_bad(r1, c1, r2, c2) == direct
    assert index.contains(r1, c1, r2, c2) == (direct == 0)


# Property 6: Results do not depend on where the polygon sits
@given(histogram_polygon(),
       integers(min_value=-10**15, max_value=10**15),
       integers(min_value=-10**15, max_value=10**15))
def test_translation_invariance(vertices, dx, dy):
    moved = [(x + dx, y + dy) for x, y in vertices]
    assert solve(moved) == solve(vertices)


# Property 7: Vertex order direction does not matter
@given(histogram_polygon())
def test_reversal_invariance(vertices):
    assert solve(list(reversed(vertices))) == solve(vertices)


# Concrete test cases for edge cases
def test_u_notch_one_tile_wide():
    """A notch exactly one tile wide still has a gap slot."""
    vertices = [(0, 0), (4, 0), (4, 4), (3, 4), (3, 1), (1, 1), (1, 4), (0, 4)]
    assert solve(vertices) == (25, brute_force_contained_area(vertices))
    assert solve(vertices)[1] == 10


def test_notch_without_tiles():
    """Arms on adjacent lines leave no tiles between them to exclude."""
    vertices = [(0, 0), (3, 0), (3, 4), (2, 4), (2, 1), (1, 1), (1, 4), (0, 4)]
    assert solve(vertices) == (20, 20)
    assert brute_force_contained_area(vertices) == 20


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
