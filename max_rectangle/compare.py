#!/usr/bin/env python3
"""
Compare the grid engine against the brute-force tile reference.

Runs both on the same polygon file and reports results and timings.
Exits with status 1 on any disagreement or invalid input.

The two disagree by construction on one class of valid polygons: a cavity
whose only opening to the outside is a slit with no tiles in it (edges on
adjacent lines). The grid engine connects regions through tiles only, so it
labels such a cavity interior; the reference decides each tile by ray
casting and puts it outside. A "Results differ" report on such input
reflects that difference, not a defect in either side.
"""

import sys
import time

from max_rectangle.errors import PolygonError
from max_rectangle.geometric import brute_force_contained_area
from max_rectangle.max_rectangle_finder import MaxRectangleFinder
from max_rectangle.polygon_input import read_polygon


def run_grid(vertices):
    """Run the compressed-grid implementation."""
    finder = MaxRectangleFinder()
    for x, y in vertices:
        finder.add_vertex(x, y)

    start_time = time.time()
    max_area = finder.find_max_rectangle()
    elapsed = time.time() - start_time

    stats = finder.get_statistics()
    stats['elapsed'] = elapsed
    stats['result'] = max_area
    return stats


def run_brute_force(vertices, max_tiles):
    """Run the tile-by-tile reference."""
    start_time = time.time()
    result = brute_force_contained_area(vertices, max_tiles)
    return {'result': result, 'elapsed': time.time() - start_time}


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(
        description='Compare grid engine against brute-force tile reference'
    )
    parser.add_argument('input_file', help='Input file with polygon vertices')
    parser.add_argument('--max-tiles', type=int, default=1_000_000,
                        help='Largest bounding box the reference will scan')
    args = parser.parse_args(argv)

    try:
        vertices = read_polygon(args.input_file)
        grid_stats = run_grid(vertices)
    except PolygonError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 70)
    print("Grid Engine vs Brute-Force Reference")
    print("=" * 70)
    print()

    print("Running grid engine...")
    print(f"  Result: {grid_stats['result']}")
    print(f"  Time: {grid_stats['elapsed']:.3f}s")
    print(f"  Vertices: {grid_stats['vertices']}")
    print(f"  Rectangles tested: {grid_stats['rectangles_tested']}")
    print(f"  Rectangles pruned: {grid_stats['rectangles_pruned']}")
    print()

    print("Running brute-force reference...")
    try:
        ref_stats = run_brute_force(vertices, args.max_tiles)
    except ValueError as e:
        print(f"  Reference skipped ({e})")
        print()
        return 0

    print(f"  Result: {ref_stats['result']}")
    print(f"  Time: {ref_stats['elapsed']:.3f}s")
    print()

    if grid_stats['result'] != ref_stats['result']:
        print("✗ Results differ:")
        print(f"    Grid:        {grid_stats['result']}")
        print(f"    Brute force: {ref_stats['result']}")
        return 1

    print(f"✓ Results match: {grid_stats['result']}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
