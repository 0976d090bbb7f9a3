"""
Input validation errors.

Every failure derives from PolygonError so the command-line entry point can
report it and exit with a non-zero status. None of them are retried.
"""


class PolygonError(Exception):
    """Base class for invalid polygon input."""


class MalformedLine(PolygonError):
    """A non-blank input line is not of the form '<int>,<int>'."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Invalid coordinate line {line_number}: '{line}'")


class StreamReadError(PolygonError):
    """The input source could not be opened or read."""

    def __init__(self, source: str, reason):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read polygon from {source}: {reason}")


class NonAxisAlignedEdge(PolygonError):
    """Two consecutive vertices differ in both coordinates."""

    def __init__(self, first: int, second: int, first_point, second_point):
        self.first = first
        self.second = second
        self.first_point = tuple(first_point)
        self.second_point = tuple(second_point)
        super().__init__(
            f"Non-axis-aligned edge between points {first} and {second}: "
            f"p[{first}] = ({first_point[0]},{first_point[1]}), "
            f"p[{second}] = ({second_point[0]},{second_point[1]})"
        )


class InsufficientPoints(PolygonError):
    """Fewer than two vertices were supplied."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Need at least 2 vertices, got {count}")
