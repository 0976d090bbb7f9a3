"""
Brute-force tile reference.

Decides membership of every single tile directly from the polygon edges
(boundary test plus ray casting) and then scans each candidate rectangle
tile by tile. Cost grows with the bounding-box area, so this is only
useful to cross-check the grid engine on small inputs.

Membership here is continuous-geometry membership: a cavity that reaches
the outside only through a slit with no tiles counts as outside, while the
grid engine, which connects regions through tiles, counts it as inside.
"""

from typing import List, Sequence, Set, Tuple

from max_rectangle.errors import NonAxisAlignedEdge
from max_rectangle.max_rectangle_finder import rectangle_area


def check_rectilinear(vertices: Sequence[Tuple[int, int]]):
    """Raise NonAxisAlignedEdge on the first diagonal edge."""
    num_vertices = len(vertices)
    for i in range(num_vertices):
        j = (i + 1) % num_vertices
        x1, y1 = vertices[i]
        x2, y2 = vertices[j]
        if x1 != x2 and y1 != y2:
            raise NonAxisAlignedEdge(i, j, vertices[i], vertices[j])


def point_on_boundary(px: int, py: int, vertices) -> bool:
    """
    Check if point (px, py) lies on any polygon edge.

    For rectilinear polygons, a point is on an edge if:
    - For horizontal edge: py == edge_y and min_x <= px <= max_x
    - For vertical edge: px == edge_x and min_y <= py <= max_y
    """
    num_vertices = len(vertices)

    for i in range(num_vertices):
        x1, y1 = vertices[i]
        x2, y2 = vertices[(i + 1) % num_vertices]

        if y1 == y2 and py == y1 and min(x1, x2) <= px <= max(x1, x2):
            return True
        if x1 == x2 and px == x1 and min(y1, y2) <= py <= max(y1, y2):
            return True

    return False


def ray_cast_crossings(px: int, py: int, vertices) -> int:
    """
    Count vertical edges crossed by a ray from (px, py) towards -x.

    An edge counts if its x <= px and py is in [ymin, ymax). The half-open
    interval makes a ray through a vertex count once.
    """
    crossings = 0
    num_vertices = len(vertices)

    for i in range(num_vertices):
        x1, y1 = vertices[i]
        x2, y2 = vertices[(i + 1) % num_vertices]

        # Skip horizontal edges
        if y1 == y2:
            continue

        if x1 <= px and min(y1, y2) <= py < max(y1, y2):
            crossings += 1

    return crossings


def tile_in_region(px: int, py: int, vertices) -> bool:
    """True if tile (px, py) is on the boundary or strictly inside."""
    if point_on_boundary(px, py, vertices):
        return True
    return ray_cast_crossings(px, py, vertices) % 2 == 1


def region_tiles(vertices, max_tiles: int = 1_000_000) -> Set[Tuple[int, int]]:
    """
    All tiles of the closed polygon region.

    Raises:
        ValueError: if the bounding box holds more than max_tiles tiles
    """
    xs = [x for x, _ in vertices]
    ys = [y for _, y in vertices]
    span = (max(xs) - min(xs) + 1) * (max(ys) - min(ys) + 1)
    if span > max_tiles:
        raise ValueError(f"Bounding box too large for brute force: {span} tiles")

    return {
        (x, y)
        for x in range(min(xs), max(xs) + 1)
        for y in range(min(ys), max(ys) + 1)
        if tile_in_region(x, y, vertices)
    }


def brute_force_contained_area(vertices: List[Tuple[int, int]],
                               max_tiles: int = 1_000_000) -> int:
    """
    Part 2 by exhaustive tile scan.

    Returns:
        Largest vertex-pair rectangle whose every tile is in the region,
        or 0 with fewer than 2 vertices
    """
    if len(vertices) < 2:
        return 0

    check_rectilinear(vertices)
    inside = region_tiles(vertices, max_tiles)

    best = 0
    num_vertices = len(vertices)
    for i in range(num_vertices):
        for j in range(i + 1, num_vertices):
            (x1, y1), (x2, y2) = vertices[i], vertices[j]
            area = rectangle_area(vertices[i], vertices[j])
            if area <= best:
                continue
            if all((x, y) in inside
                   for x in range(min(x1, x2), max(x1, x2) + 1)
                   for y in range(min(y1, y2), max(y1, y2) + 1)):
                best = area
    return best
