# topmark:header:start
#
#   project      : LineMark
#   file         : paragraphs.py
#   file_relpath : src/linemark/markup/paragraphs.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Paragraph tagging.

Wraps every maximal run of paragraph lines (see
`linemark.markup.markers.is_paragraph_line`) in a single ``<p>`` / ``</p>``
pair. Special lines pass through untouched and break runs.

Example:
    ```python
    add_paragraph_tags(["# Title", "one", "two", "", "three"])
    # ['# Title', '<p>', 'one', 'two', '</p>', '', '<p>', 'three', '</p>']
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.constants import PARAGRAPH_CLOSE, PARAGRAPH_OPEN
from linemark.markup.markers import is_paragraph_line

if TYPE_CHECKING:
    from collections.abc import Sequence


def add_paragraph_tags(lines: Sequence[str]) -> list[str]:
    """Return ``lines`` with paragraph markers inserted around paragraph runs.

    Single forward pass with one line of lookback and lookahead. "Last line"
    is positional: a line equal in text to the final line does not close a
    paragraph early.

    Args:
        lines (Sequence[str]): Raw source lines.

    Returns:
        list[str]: A new list containing the original lines plus the markers.
    """
    flags: list[bool] = [is_paragraph_line(line) for line in lines]
    last: int = len(lines) - 1
    tagged: list[str] = []

    for idx, line in enumerate(lines):
        if not flags[idx]:
            tagged.append(line)
            continue
        if idx == 0 or not flags[idx - 1]:
            tagged.append(PARAGRAPH_OPEN)
        tagged.append(line)
        if idx == last or not flags[idx + 1]:
            tagged.append(PARAGRAPH_CLOSE)

    return tagged
