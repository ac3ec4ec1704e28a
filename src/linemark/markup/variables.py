# topmark:header:start
#
#   project      : LineMark
#   file         : variables.py
#   file_relpath : src/linemark/markup/variables.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Variable declaration lines.

A declaration has the form ``@name: value`` and occupies a whole line. The
name is one or more word characters; the value is everything after the colon
and any whitespace following it, kept verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from linemark.markup.keywords import Clock, expand_keywords, local_now

VARIABLE_LINE_RE: Final[re.Pattern[str]] = re.compile(r"^@(\w+):\s*(.*)$")


@dataclass(frozen=True)
class Variable:
    """A declared variable.

    Attributes:
        name (str): Variable name (word characters only).
        value (str): Declared value after keyword expansion.
    """

    name: str
    value: str


def parse_variable_line(line: str, *, clock: Clock = local_now) -> Variable | None:
    """Parse a ``@name: value`` declaration.

    Args:
        line (str): A single source line.
        clock (Clock): Time source used for keyword expansion.

    Returns:
        Variable | None: The declared variable, or ``None`` when the line is
            not a declaration.
    """
    match: re.Match[str] | None = VARIABLE_LINE_RE.match(line)
    if match is None:
        return None
    return Variable(name=match.group(1), value=expand_keywords(match.group(2), clock=clock))
