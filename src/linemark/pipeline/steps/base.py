# topmark:header:start
#
#   project      : LineMark
#   file         : base.py
#   file_relpath : src/linemark/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → enter state → run? → hint
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from linemark.config.logging import get_logger

if TYPE_CHECKING:
    from linemark.config.logging import LinemarkLogger
    from linemark.pipeline.context import ConversionContext
    from linemark.pipeline.status import ConversionState

logger: LinemarkLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``run()`` and
    optionally ``hint()``. Do not override ``__call__`` unless you need
    custom lifecycle behavior.

    Attributes:
        name (str): Stable step identifier for logs/tracing.
        state (ConversionState): The state this step moves the context into.
    """

    name: str
    state: ConversionState

    def __call__(self, ctx: ConversionContext) -> ConversionContext:
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        Args:
            ctx (ConversionContext): The mutable context for the current run.

        Returns:
            ConversionContext: The same context instance after mutation/hints.
        """
        ctx.steps.append(self)
        logger.debug("Pipeline state before %s: %s", self.name, ctx.state.value)

        if self.may_proceed(ctx):
            ctx.enter(self.state)
            logger.info("Pipeline step %s - running", self.name)
            self.run(ctx)
        else:
            logger.info("Pipeline step %s may not proceed", self.name)

        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: ConversionContext) -> bool:
        """Return whether the step should run given the current context.

        Default: run when the context has not yet reached this step's state.

        Args:
            ctx (ConversionContext): The mutable context.

        Returns:
            bool: True to run ``run()``, False to skip.
        """
        return ctx.state.order < self.state.order

    def run(self, ctx: ConversionContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        pass

    def hint(self, ctx: ConversionContext) -> None:
        """Attach advisory diagnostics to ``ctx`` (optional)."""
        pass
