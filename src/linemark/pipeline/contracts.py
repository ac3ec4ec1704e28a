# topmark:header:start
#
#   project      : LineMark
#   file         : contracts.py
#   file_relpath : src/linemark/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Type contracts for pipeline steps.

Steps are instantiated objects that are *callable*; the runner invokes them
as ``step(ctx)`` where ``ctx`` is a `ConversionContext`.

Lifecycle
---------
1) ``step.may_proceed(ctx)`` gates execution.
2) If allowed, ``step.run(ctx)`` mutates ``ctx`` in place.
3) Regardless, ``step.hint(ctx)`` may attach diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .context import ConversionContext
    from .status import ConversionState


class Step(Protocol):
    """Protocol for a single pipeline step.

    Implementations typically subclass
    [`linemark.pipeline.steps.base.BaseStep`][].
    """

    name: str
    state: ConversionState

    def may_proceed(self, ctx: ConversionContext) -> bool:
        """Return whether the step should run given the current context."""
        ...

    def run(self, ctx: ConversionContext) -> None:
        """Execute the step, mutating the context in place.

        Fatal conditions (no template declared, unreadable template) are
        raised; they are never recorded as diagnostics.
        """
        ...

    def hint(self, ctx: ConversionContext) -> None:
        """Attach advisory diagnostics to the context."""
        ...

    def __call__(self, ctx: ConversionContext) -> ConversionContext:
        """Run the step lifecycle: gate → run (optional) → hint."""
        ...
