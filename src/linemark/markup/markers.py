# topmark:header:start
#
#   project      : LineMark
#   file         : markers.py
#   file_relpath : src/linemark/markup/markers.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Line classification for paragraph wrapping.

A line takes part in paragraph wrapping unless, once stripped of surrounding
whitespace, it is blank or begins with one of the special markers below.
The markers form a table so a new line type is one more enum member.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class LineMarker(str, Enum):
    """Prefixes identifying lines that are never wrapped in ``<p>`` tags."""

    BLANK = ""
    HEADING = "#"
    VARIABLE = "@"
    BLOCKQUOTE = ">"
    COMMENT = ";;"

    def matches(self, stripped: str) -> bool:
        """Return True if the already-stripped line is of this marker type.

        The blank marker has zero length, so it only matches by equality.
        """
        if stripped == self.value:
            return True
        return bool(self.value) and stripped.startswith(self.value)


NON_PARAGRAPH_MARKERS: Final[tuple[LineMarker, ...]] = tuple(LineMarker)


def classify_line(line: str) -> LineMarker | None:
    """Return the marker a line carries, or ``None`` for a paragraph line."""
    stripped: str = line.strip()
    for marker in NON_PARAGRAPH_MARKERS:
        if marker.matches(stripped):
            return marker
    return None


def is_paragraph_line(line: str) -> bool:
    """Return whether ``line`` participates in paragraph wrapping."""
    return classify_line(line) is None
