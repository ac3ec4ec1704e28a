# topmark:header:start
#
#   project      : LineMark
#   file         : context.py
#   file_relpath : src/linemark/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Per-run conversion context for the LineMark pipeline.

A `ConversionContext` holds the complete, mutable state of one conversion
as it flows through the pipeline steps. Contexts are never shared between
runs, so independent conversions may run in parallel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING

from linemark.core.diagnostics import Diagnostic, DiagnosticLevel
from linemark.core.files import read_template
from linemark.markup.keywords import local_now
from linemark.pipeline.status import ConversionState

if TYPE_CHECKING:
    from linemark.config.model import Config
    from linemark.core.files import TemplateLoader
    from linemark.markup.keywords import Clock
    from linemark.pipeline.contracts import Step


@dataclass
class ConversionContext:
    """Context for converting a single LineMark document.

    Attributes:
        source_lines (list[str]): The raw source lines, without terminators.
        config (Config): Effective configuration for this run.
        source_path (str | None): Path of the source document; ``None`` for
            stdin or in-memory input. Templates resolve relative to it.
        template_loader (TemplateLoader): Reads a template given its
            resolved path.
        clock (Clock): Returns the current time for ``TIME(...)`` expansion.
        state (ConversionState): The state most recently entered.
        steps (list[Step]): Steps invoked so far, in order.
        lines (list[str]): Working lines, rewritten by each step.
        variables (dict[str, str]): Declared variables (last declaration wins).
        content (str | None): The assembled document body.
        template_path (str | None): Resolved template path.
        template (str | None): Template text, loaded while templating.
        result (str | None): The merged HTML document.
        diagnostics (list[Diagnostic]): Advisory messages collected during the run.
    """

    source_lines: list[str]
    config: Config
    source_path: str | None = None
    template_loader: TemplateLoader | None = None
    clock: Clock = local_now

    state: ConversionState = ConversionState.START
    steps: list[Step] = field(default_factory=lambda: [])

    lines: list[str] = field(default_factory=lambda: [])
    variables: dict[str, str] = field(default_factory=lambda: {})
    content: str | None = None

    template_path: str | None = None
    template: str | None = None
    result: str | None = None

    diagnostics: list[Diagnostic] = field(default_factory=list[Diagnostic])

    def __post_init__(self) -> None:
        if self.template_loader is None:
            self.template_loader = partial(read_template, encoding=self.config.input_encoding)

    @classmethod
    def bootstrap(
        cls,
        *,
        lines: list[str],
        config: Config,
        source_path: str | None = None,
        template_loader: TemplateLoader | None = None,
        clock: Clock | None = None,
    ) -> ConversionContext:
        """Create a fresh context with no derived state.

        Args:
            lines (list[str]): Source lines to convert.
            config (Config): Effective configuration.
            source_path (str | None): Path of the source document, if any.
            template_loader (TemplateLoader | None): Template reader; defaults
                to reading from disk with the configured input encoding.
            clock (Clock | None): Time source; defaults to the local clock.

        Returns:
            ConversionContext: Newly created context instance.
        """
        return cls(
            source_lines=list(lines),
            config=config,
            source_path=source_path,
            template_loader=template_loader,
            clock=clock or local_now,
        )

    @property
    def is_done(self) -> bool:
        """Return True once the runner has finished this context."""
        return self.state == ConversionState.DONE

    def enter(self, state: ConversionState) -> None:
        """Advance to ``state``.

        Raises:
            RuntimeError: If ``state`` does not come after the current state.
        """
        if state.order <= self.state.order:
            raise RuntimeError(f"Cannot move from state {self.state.value!r} to {state.value!r}")
        self.state = state

    # --- Convenience helpers -------------------------------------------------
    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic to the context."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic to the context."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))

    def summary(self) -> str:
        """Return a one-line summary of this run."""
        where: str = self.source_path or "<lines>"
        return (
            f"{where}: {self.state.value}, {len(self.variables)} variable(s), "
            f"{len(self.lines)} line(s), {len(self.diagnostics)} diagnostic(s)"
        )
