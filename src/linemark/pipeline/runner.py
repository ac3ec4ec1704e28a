# topmark:header:start
#
#   project      : LineMark
#   file         : runner.py
#   file_relpath : src/linemark/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Run a LineMark pipeline over a single conversion context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.config.logging import get_logger
from linemark.constants import VALUE_NOT_SET
from linemark.pipeline.status import ConversionState

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linemark.config.logging import LinemarkLogger

    from .context import ConversionContext
    from .contracts import Step

logger: LinemarkLogger = get_logger(__name__)


def run(ctx: ConversionContext, steps: Sequence[Step]) -> ConversionContext:
    """Execute the pipeline sequentially and mark the context done.

    Exceptions raised by a step propagate unchanged; the context is then left
    in the state of the failing step.

    Args:
        ctx (ConversionContext): Mutable conversion context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.

    Returns:
        ConversionContext: The final context after all steps have run.
    """
    logger.info("Converting %s", ctx.source_path or VALUE_NOT_SET)
    for step in steps:
        ctx = step(ctx)

    ctx.enter(ConversionState.DONE)
    logger.debug("Run finished: %s", ctx.summary())
    return ctx
