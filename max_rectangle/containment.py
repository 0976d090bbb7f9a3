"""
Containment Index

Summed-area table over the classified grid, counting EXTERIOR cells.
A candidate rectangle lies in the polygon's closed region exactly when it
covers no exterior cell, which the table answers in O(1):

    bad = P[r2+1][c2+1] - P[r1][c2+1] - P[r2+1][c1] + P[r1][c1]
"""

import numpy as np

from max_rectangle.compression import CompressedPolygon
from max_rectangle.grid import BORDER, Cell


class ContainmentIndex:
    """O(1) exterior-cell counts over rectangles of compressed ranks."""

    def __init__(self, labels: np.ndarray, polygon: CompressedPolygon):
        """
        Args:
            labels: Classified grid from classify_regions()
            polygon: The compressed polygon the grid was built from
        """
        if labels.ndim != 2:
            raise ValueError("ContainmentIndex requires a 2D grid")

        # Drop the border ring; slot (0, 0) is the origin of the table
        inner = labels[BORDER:labels.shape[0] - BORDER,
                       BORDER:labels.shape[1] - BORDER]
        exterior = (inner == Cell.EXTERIOR).astype(np.int64)

        prefix = np.cumsum(np.cumsum(exterior, axis=0), axis=1)
        self.prefix = np.pad(prefix, ((1, 0), (1, 0)), mode="constant")
        self.height, self.width = exterior.shape

        self._row_slots = polygon.y_axis.slots
        self._col_slots = polygon.x_axis.slots

    def slot_rect_bad(self, s1: int, t1: int, s2: int, t2: int) -> int:
        """Exterior cells in the inclusive slot rectangle [s1..s2] x [t1..t2]."""
        p = self.prefix
        return int(p[s2 + 1, t2 + 1] - p[s1, t2 + 1] - p[s2 + 1, t1] + p[s1, t1])

    def rect_bad(self, r1: int, c1: int, r2: int, c2: int) -> int:
        """
        Count exterior cells in the inclusive rank rectangle [r1..r2] x [c1..c2].

        Raises:
            ValueError: if the corners are not normalized (r1 <= r2, c1 <= c2)
                        or fall outside the compressed extent
        """
        if r1 > r2 or c1 > c2:
            raise ValueError(f"Rectangle not normalized: ({r1},{c1})-({r2},{c2})")
        if r1 < 0 or c1 < 0 or r2 >= len(self._row_slots) or c2 >= len(self._col_slots):
            raise ValueError(f"Rectangle out of range: ({r1},{c1})-({r2},{c2})")

        return self.slot_rect_bad(
            self._row_slots[r1], self._col_slots[c1],
            self._row_slots[r2], self._col_slots[c2],
        )

    def contains(self, r1: int, c1: int, r2: int, c2: int) -> bool:
        """True if the rectangle has only boundary and interior cells."""
        return self.rect_bad(r1, c1, r2, c2) == 0
