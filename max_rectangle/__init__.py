"""
Largest vertex-anchored rectangle inside a rectilinear polygon.

Part 1 is the largest rectangle spanned by any two vertices. Part 2 only
accepts rectangles whose tiles all lie on the polygon boundary or inside it.
"""

from max_rectangle.errors import (
    PolygonError,
    MalformedLine,
    StreamReadError,
    NonAxisAlignedEdge,
    InsufficientPoints,
)
from max_rectangle.max_rectangle_finder import (
    MaxRectangleFinder,
    rectangle_area,
    largest_bounding_area,
    solve,
)
from max_rectangle.polygon_input import parse_polygon_text, read_polygon

__all__ = [
    "PolygonError",
    "MalformedLine",
    "StreamReadError",
    "NonAxisAlignedEdge",
    "InsufficientPoints",
    "MaxRectangleFinder",
    "rectangle_area",
    "largest_bounding_area",
    "solve",
    "parse_polygon_text",
    "read_polygon",
]
