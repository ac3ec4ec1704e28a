# topmark:header:start
#
#   project      : LineMark
#   file         : filtering.py
#   file_relpath : src/linemark/pipeline/steps/filtering.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Empty-line filtering step."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.config.logging import get_logger
from linemark.constants import EMPTY_LINE
from linemark.pipeline.status import ConversionState
from linemark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from linemark.config.logging import LinemarkLogger
    from linemark.pipeline.context import ConversionContext

logger: LinemarkLogger = get_logger(__name__)


class FilterStep(BaseStep):
    """Drop every working line that is exactly empty and assemble the content.

    Lines holding only whitespace are kept. The remaining lines are joined
    with the configured line separator into ``ctx.content``.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, state=ConversionState.FILTERING)

    def run(self, ctx: ConversionContext) -> None:
        """Filter empty lines and build the document body."""
        before: int = len(ctx.lines)
        ctx.lines = [line for line in ctx.lines if line != EMPTY_LINE]
        ctx.content = ctx.config.line_separator.join(ctx.lines)
        logger.debug("Filtered %d empty line(s)", before - len(ctx.lines))
