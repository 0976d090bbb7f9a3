"""
Coordinate Compression

Input coordinates can be huge and sparse, so the polygon is rasterized in
rank space instead: each distinct x becomes a column index and each distinct
y a row index, preserving order.

Ranks are dense (0..distinct_count-1). The grid additionally needs to know
where a run of unit lines lies *between* two vertex coordinates, otherwise a
concave notch that holds no vertex coordinate would disappear. Each axis
therefore also assigns a grid slot to every rank, inserting one spare slot
between consecutive values that are more than 1 apart:

    values: 0   3   4   10
    ranks:  0   1   2   3
    slots:  0   2   3   5      (slot 1 = x 1..2, slot 4 = x 5..9)
"""

from typing import List, NamedTuple, Sequence, Tuple

from max_rectangle.errors import InsufficientPoints


class Point(NamedTuple):
    """Polygon vertex with original coordinates and compressed ranks."""
    x: int
    y: int
    row: int
    col: int


class AxisMapping:
    """Sorted unique coordinate values of one axis."""

    def __init__(self, values):
        self.values = sorted(set(values))
        self._rank = {value: rank for rank, value in enumerate(self.values)}

        self.slots = []
        slot = 0
        for rank, value in enumerate(self.values):
            if rank and value - self.values[rank - 1] > 1:
                slot += 1  # open gap between two vertex coordinates
            self.slots.append(slot)
            slot += 1
        self.slot_count = slot

    def __len__(self):
        return len(self.values)

    def rank(self, value: int) -> int:
        """Dense 0-based rank of a coordinate that appears in the input."""
        return self._rank[value]

    def slot(self, rank: int) -> int:
        """Grid slot of a rank."""
        return self.slots[rank]


class CompressedPolygon(NamedTuple):
    points: List[Point]
    x_axis: AxisMapping
    y_axis: AxisMapping

    @property
    def height(self) -> int:
        """Number of grid slots along y (excluding the border ring)."""
        return self.y_axis.slot_count

    @property
    def width(self) -> int:
        """Number of grid slots along x (excluding the border ring)."""
        return self.x_axis.slot_count


def compress_points(vertices: Sequence[Tuple[int, int]]) -> CompressedPolygon:
    """
    Annotate every vertex with the rank of its x (col) and y (row).

    Args:
        vertices: Polygon vertices as (x, y) pairs, in cyclic order

    Returns:
        CompressedPolygon with points in the same order as the input

    Raises:
        InsufficientPoints: if fewer than 2 vertices are given
    """
    if len(vertices) < 2:
        raise InsufficientPoints(len(vertices))

    x_axis = AxisMapping(v[0] for v in vertices)
    y_axis = AxisMapping(v[1] for v in vertices)

    points = [
        Point(v[0], v[1], y_axis.rank(v[1]), x_axis.rank(v[0]))
        for v in vertices
    ]
    return CompressedPolygon(points, x_axis, y_axis)
