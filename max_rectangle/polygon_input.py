"""
Polygon input parsing.

Format: one vertex per line as "x,y". Blank lines are skipped and whitespace
around either number is allowed, so " 7 , 1 " is a valid line.
"""

import re
import sys
from typing import List, Optional, TextIO, Tuple

from max_rectangle.errors import MalformedLine, StreamReadError


VERTEX_LINE = re.compile(r"^\s*([+-]?[0-9]+)\s*,\s*([+-]?[0-9]+)\s*$")


def parse_polygon_text(text: str) -> List[Tuple[int, int]]:
    """
    Parse polygon vertices from text.

    Args:
        text: Text with one x,y coordinate pair per line

    Returns:
        List of (x, y) vertex tuples in input order

    Raises:
        MalformedLine: if a non-blank line is not two comma-separated integers
    """
    vertices = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        match = VERTEX_LINE.match(line)
        if match is None:
            raise MalformedLine(line_number, line.strip())
        vertices.append((int(match.group(1)), int(match.group(2))))
    return vertices


def read_polygon(path: Optional[str] = None,
                 stream: Optional[TextIO] = None) -> List[Tuple[int, int]]:
    """
    Read and parse polygon vertices from a file path or an open stream.

    With neither argument, stdin is read.

    Raises:
        StreamReadError: if the source cannot be opened or read
        MalformedLine: if the content is not valid vertex text
    """
    if path is not None:
        try:
            with open(path, "r") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StreamReadError(path, e) from e
    else:
        if stream is None:
            stream = sys.stdin
        source = getattr(stream, "name", "<stream>")
        try:
            text = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StreamReadError(source, e) from e

    return parse_polygon_text(text)
