"""
Polygon Rasterizer and Region Classifier

The compressed polygon is drawn onto a grid of slots surrounded by a
one-cell border ring. Every truly exterior region then touches the outer
edge of the grid, so a breadth-first flood fill seeded from the border
reaches exactly the exterior cells. What is left is enclosed: interior.

Grid layout (row = y slot + BORDER, col = x slot + BORDER):

    . . . . . . .
    . # # # # # .       # boundary
    . # i i i # .       i interior
    . # i # # # .       . exterior
    . # # # . . .
    . . . . . . .
"""

from collections import deque
from enum import IntEnum
from typing import Dict

import numpy as np

from max_rectangle.compression import CompressedPolygon
from max_rectangle.errors import NonAxisAlignedEdge


# Width of the ring of cells added around the compressed extent
BORDER = 1

# 4-connected neighbourhood
NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Cell(IntEnum):
    OPEN = 0       # not yet classified
    BOUNDARY = 1
    EXTERIOR = 2
    INTERIOR = 3


OPEN = int(Cell.OPEN)
EXTERIOR = int(Cell.EXTERIOR)
INTERIOR = int(Cell.INTERIOR)


def rasterize(polygon: CompressedPolygon) -> np.ndarray:
    """
    Draw every polygon edge, including the wrap from last to first vertex.

    Args:
        polygon: Compressed polygon vertices in cyclic order

    Returns:
        uint8 array of shape (height + 2, width + 2) holding Cell.BOUNDARY on
        the edges and Cell.OPEN everywhere else

    Raises:
        NonAxisAlignedEdge: if two consecutive vertices differ in both axes
    """
    grid = np.full(
        (polygon.height + 2 * BORDER, polygon.width + 2 * BORDER),
        Cell.OPEN,
        dtype=np.uint8,
    )

    points = polygon.points
    num_vertices = len(points)

    for i in range(num_vertices):
        j = (i + 1) % num_vertices
        p, q = points[i], points[j]

        r1 = polygon.y_axis.slot(p.row) + BORDER
        c1 = polygon.x_axis.slot(p.col) + BORDER
        r2 = polygon.y_axis.slot(q.row) + BORDER
        c2 = polygon.x_axis.slot(q.col) + BORDER

        if r1 == r2:
            # Horizontal edge (or a repeated vertex)
            grid[r1, min(c1, c2):max(c1, c2) + 1] = Cell.BOUNDARY
        elif c1 == c2:
            # Vertical edge
            grid[min(r1, r2):max(r1, r2) + 1, c1] = Cell.BOUNDARY
        else:
            raise NonAxisAlignedEdge(i, j, (p.x, p.y), (q.x, q.y))

    return grid


def classify_regions(grid: np.ndarray) -> np.ndarray:
    """
    Resolve every non-boundary cell of a rasterized grid.

    Algorithm:
        1. Seed a FIFO queue with every open cell of the border ring
        2. Breadth-first traversal over 4-connected open neighbours;
           each cell is labelled EXTERIOR when enqueued, so it is
           never visited twice
        3. Open cells the traversal never reached are INTERIOR

    The input grid is left untouched.

    Returns:
        New uint8 array where every cell is BOUNDARY, EXTERIOR or INTERIOR
    """
    # Traversal runs on plain lists, not per-element numpy indexing
    cells = grid.tolist()
    height, width = grid.shape
    queue = deque()

    def visit(r, c):
        row = cells[r]
        if row[c] == OPEN:
            row[c] = EXTERIOR
            queue.append((r, c))

    for c in range(width):
        visit(0, c)
        visit(height - 1, c)
    for r in range(height):
        visit(r, 0)
        visit(r, width - 1)

    while queue:
        r, c = queue.popleft()
        for dr, dc in NEIGHBOURS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width:
                visit(nr, nc)

    labels = np.array(cells, dtype=np.uint8)
    labels[labels == OPEN] = INTERIOR
    return labels


def count_cells(labels: np.ndarray) -> Dict[str, int]:
    """Histogram of cell labels, keyed by lower-case label name."""
    return {
        cell.name.lower(): int(np.count_nonzero(labels == cell))
        for cell in (Cell.BOUNDARY, Cell.EXTERIOR, Cell.INTERIOR)
    }
