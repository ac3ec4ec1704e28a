# topmark:header:start
#
#   project      : LineMark
#   file         : tagger.py
#   file_relpath : src/linemark/pipeline/steps/tagger.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Paragraph tagging step."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.config.logging import get_logger
from linemark.markup.paragraphs import add_paragraph_tags
from linemark.pipeline.status import ConversionState
from linemark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from linemark.config.logging import LinemarkLogger
    from linemark.pipeline.context import ConversionContext

logger: LinemarkLogger = get_logger(__name__)


class TaggerStep(BaseStep):
    """Insert ``<p>``/``</p>`` lines around each run of paragraph lines.

    Reads ``ctx.source_lines`` and sets ``ctx.lines``.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, state=ConversionState.TAGGING)

    def run(self, ctx: ConversionContext) -> None:
        """Tag paragraph runs in the source lines."""
        ctx.lines = add_paragraph_tags(ctx.source_lines)
        logger.debug(
            "Tagged %d source line(s) into %d line(s)", len(ctx.source_lines), len(ctx.lines)
        )
