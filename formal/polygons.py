"""
Shared polygon fixtures and Hypothesis strategies for the test suite.
"""

from hypothesis import strategies as st
from hypothesis.strategies import integers, lists


# (0,0) .. (5,3) rectangle given as its four corners
RECTANGLE = [(0, 0), (0, 3), (5, 3), (5, 0)]

# Upper-right quadrant missing
L_SHAPE = [(0, 0), (10, 0), (10, 5), (5, 5), (5, 10), (0, 10)]

# Notch x in (3,7), y in (3,10] open to the top
U_SHAPE = [(0, 0), (10, 0), (10, 10), (7, 10), (7, 3), (3, 3), (3, 10), (0, 10)]

# Example from testcases/default_input.txt
EXAMPLE = [(7, 1), (11, 1), (11, 7), (9, 7), (9, 5), (2, 5), (2, 3), (7, 3)]

# Cavity x in (2,7), y in (2,8) opening right through a tile-less slit
# between y = 4 and y = 5
SLIT_CAVITY = [(0, 0), (10, 0), (10, 4), (7, 4), (7, 2), (2, 2), (2, 8),
               (7, 8), (7, 5), (10, 5), (10, 10), (0, 10)]


@st.composite
def histogram_polygon(draw, max_coord=12, max_columns=5):
    """
    Generate a simple rectilinear polygon shaped like a histogram.

    Columns [x_i, x_i+1] rise from y = 0 to height h_i. The outline is then
    randomly transposed, mirrored, reversed and rotated so that notches
    face every direction. Equal neighbouring heights produce repeated
    vertices, which are valid input.
    """
    xs = sorted(draw(lists(integers(min_value=0, max_value=max_coord),
                           min_size=2, max_size=max_columns + 1, unique=True)))
    heights = draw(lists(integers(min_value=1, max_value=max_coord),
                         min_size=len(xs) - 1, max_size=len(xs) - 1))

    vertices = [(xs[0], 0)]
    for i, h in enumerate(heights):
        vertices.append((xs[i], h))
        vertices.append((xs[i + 1], h))
    vertices.append((xs[-1], 0))

    if draw(st.booleans()):
        vertices = [(y, x) for x, y in vertices]
    if draw(st.booleans()):
        vertices = [(-x, y) for x, y in vertices]
    if draw(st.booleans()):
        vertices.reverse()

    shift = draw(integers(min_value=0, max_value=len(vertices) - 1))
    return vertices[shift:] + vertices[:shift]


# Arbitrary point sequences, not necessarily a valid polygon
point_lists = lists(
    st.tuples(integers(min_value=-10**12, max_value=10**12),
              integers(min_value=-10**12, max_value=10**12)),
    min_size=0, max_size=20,
)
