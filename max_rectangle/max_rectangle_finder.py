#!/usr/bin/env python3
"""
MaxRectangleFinder

Finds the largest axis-aligned rectangle whose opposite corners are two
vertices of a rectilinear polygon.

Part 1 ignores the polygon shape. Part 2 only accepts rectangles whose
every tile is on the polygon boundary or inside it.

Algorithm (Part 2):
1. Compress coordinates to ranks (see compression.py)
2. Rasterize the edges onto a bordered grid
3. Flood fill from the border: reached cells are exterior, the rest interior
4. Build a summed-area table of exterior cells
5. For every vertex pair, in any order:
   a. Compute the area in original coordinates: (|dx|+1) * (|dy|+1)
   b. Prune if it cannot beat the current maximum
   c. Otherwise accept it if the table reports no exterior cell inside
"""

import sys
import time
from typing import List, Optional, Tuple

from max_rectangle.compression import compress_points
from max_rectangle.containment import ContainmentIndex
from max_rectangle.errors import PolygonError
from max_rectangle.grid import classify_regions, count_cells, rasterize
from max_rectangle.polygon_input import read_polygon


def rectangle_area(p, q) -> int:
    """Tile area of the rectangle with corners p and q, both lines included."""
    return (abs(p[0] - q[0]) + 1) * (abs(p[1] - q[1]) + 1)


def largest_bounding_area(vertices) -> int:
    """Part 1: largest rectangle over all vertex pairs, ignoring the polygon."""
    best = 0
    num_vertices = len(vertices)
    for i in range(num_vertices):
        for j in range(i + 1, num_vertices):
            area = rectangle_area(vertices[i], vertices[j])
            if area > best:
                best = area
    return best


class MaxRectangleFinder:
    """Grid-based maximum rectangle search over a rectilinear polygon."""

    def __init__(self):
        self.vertices = []
        self.max_area = 0
        self.max_bounding_area = 0
        self.rectangles_tested = 0
        self.rectangles_pruned = 0
        self.valid_rectangles_found = 0
        self.grid_shape = (0, 0)
        self.cell_counts = {}

    def add_vertex(self, x: int, y: int):
        """Append a vertex; vertices connect in the order they are added."""
        self.vertices.append((x, y))

    def find_max_bounding_rectangle(self) -> int:
        """Part 1 result for the vertices added so far."""
        self.max_bounding_area = largest_bounding_area(self.vertices)
        return self.max_bounding_area

    def find_max_rectangle(self) -> int:
        """
        Find the largest vertex-anchored rectangle inside the polygon.

        Returns:
            Maximum area, or 0 when fewer than 2 vertices were added

        Raises:
            NonAxisAlignedEdge: if the vertices do not form a rectilinear polygon
        """
        self.max_area = 0
        self.rectangles_tested = 0
        self.rectangles_pruned = 0
        self.valid_rectangles_found = 0

        if len(self.vertices) < 2:
            return 0

        polygon = compress_points(self.vertices)
        labels = classify_regions(rasterize(polygon))
        index = ContainmentIndex(labels, polygon)

        self.grid_shape = labels.shape
        self.cell_counts = count_cells(labels)

        points = polygon.points
        num_vertices = len(points)

        for i in range(num_vertices):
            p = points[i]
            for j in range(i + 1, num_vertices):
                q = points[j]

                candidate_area = rectangle_area(p, q)

                # Area pruning: skip if can't beat current max
                if candidate_area <= self.max_area:
                    self.rectangles_pruned += 1
                    continue

                self.rectangles_tested += 1
                if index.contains(min(p.row, q.row), min(p.col, q.col),
                                  max(p.row, q.row), max(p.col, q.col)):
                    self.max_area = candidate_area
                    self.valid_rectangles_found += 1

        return self.max_area

    def get_statistics(self) -> dict:
        """Return algorithm statistics."""
        return {
            'vertices': len(self.vertices),
            'grid_shape': tuple(self.grid_shape),
            'boundary_cells': self.cell_counts.get('boundary', 0),
            'exterior_cells': self.cell_counts.get('exterior', 0),
            'interior_cells': self.cell_counts.get('interior', 0),
            'rectangles_tested': self.rectangles_tested,
            'rectangles_pruned': self.rectangles_pruned,
            'valid_rectangles': self.valid_rectangles_found,
            'max_bounding_area': self.max_bounding_area,
            'max_area': self.max_area,
        }


def solve(vertices) -> Tuple[int, int]:
    """Return (part1, part2) for a vertex sequence."""
    finder = MaxRectangleFinder()
    for x, y in vertices:
        finder.add_vertex(x, y)
    return finder.find_max_bounding_rectangle(), finder.find_max_rectangle()


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for MaxRectangleFinder."""
    import argparse

    parser = argparse.ArgumentParser(
        description='Find maximum rectangle within rectilinear polygon'
    )
    parser.add_argument('input_file', nargs='?', default=None,
                        help='Input file with polygon vertices (default: stdin)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print algorithm statistics')
    args = parser.parse_args(argv)

    start_time = time.time()

    try:
        vertices = read_polygon(args.input_file)

        if args.verbose:
            print(f"Processing polygon with {len(vertices)} vertices", file=sys.stderr)

        finder = MaxRectangleFinder()
        for x, y in vertices:
            finder.add_vertex(x, y)

        part1 = finder.find_max_bounding_rectangle()
        part2 = finder.find_max_rectangle()
    except PolygonError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    elapsed = time.time() - start_time

    print(f"Part 1: {part1}")
    print(f"Part 2: {part2}")

    if args.verbose:
        stats = finder.get_statistics()
        rows, cols = stats['grid_shape']
        print(f"\nStatistics:", file=sys.stderr)
        print(f"  Vertices: {stats['vertices']}", file=sys.stderr)
        print(f"  Grid: {rows} x {cols}", file=sys.stderr)
        print(f"  Boundary cells: {stats['boundary_cells']}", file=sys.stderr)
        print(f"  Interior cells: {stats['interior_cells']}", file=sys.stderr)
        print(f"  Exterior cells: {stats['exterior_cells']}", file=sys.stderr)
        print(f"  Rectangles tested: {stats['rectangles_tested']}", file=sys.stderr)
        print(f"  Rectangles pruned: {stats['rectangles_pruned']}", file=sys.stderr)
        print(f"  Valid rectangles: {stats['valid_rectangles']}", file=sys.stderr)
        print(f"  Time: {elapsed:.3f}s", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
