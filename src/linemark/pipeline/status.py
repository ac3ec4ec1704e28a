# topmark:header:start
#
#   project      : LineMark
#   file         : status.py
#   file_relpath : src/linemark/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Conversion states of the LineMark pipeline.

A run moves strictly forward through ``START → TAGGING → LINE_SCAN →
FILTERING → TEMPLATING → DONE``. Each step enters exactly one state; the
runner sets ``DONE`` once all steps have run.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable


class ConversionState(str, Enum):
    """Represents the progress of a single conversion run."""

    START = "start"
    TAGGING = "tagging"
    LINE_SCAN = "line scan"
    FILTERING = "filtering"
    TEMPLATING = "templating"
    DONE = "done"

    @property
    def order(self) -> int:
        """Return the position of this state in the run sequence."""
        return list(ConversionState).index(self)

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` style used to display this state."""
        if self is ConversionState.START:
            return cast("Callable[[str], str]", chalk.gray)
        if self is ConversionState.DONE:
            return cast("Callable[[str], str]", chalk.green)
        return cast("Callable[[str], str]", chalk.blue)
