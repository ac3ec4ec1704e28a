# topmark:header:start
#
#   project      : LineMark
#   file         : scanner.py
#   file_relpath : src/linemark/pipeline/steps/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Line scanning step: variable extraction and inline conversion.

Every working line is either a variable declaration, which is recorded on
the context and replaced by an empty line, or ordinary text, which goes
through the inline converter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.config.logging import get_logger
from linemark.constants import CONTENT_VARIABLE, EMPTY_LINE
from linemark.markup.inline import convert_inline
from linemark.markup.variables import parse_variable_line
from linemark.pipeline.status import ConversionState
from linemark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from linemark.config.logging import LinemarkLogger
    from linemark.markup.variables import Variable
    from linemark.pipeline.context import ConversionContext

logger: LinemarkLogger = get_logger(__name__)


class ScannerStep(BaseStep):
    """Map each working line through the variable parser or the inline converter.

    Preconditions:
      - ``ctx.lines`` holds the tagged lines (set by TaggerStep).

    Sets:
      - ``ctx.variables``: declarations in source order, last one wins.
      - ``ctx.lines``: converted lines; declarations become ``""``.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, state=ConversionState.LINE_SCAN)

    def run(self, ctx: ConversionContext) -> None:
        """Scan every working line."""
        scanned: list[str] = []
        for lineno, line in enumerate(ctx.lines, start=1):
            variable: Variable | None = parse_variable_line(line, clock=ctx.clock)
            if variable is None:
                scanned.append(convert_inline(line))
                continue

            previous: str | None = ctx.variables.get(variable.name)
            if previous is not None:
                ctx.add_info(
                    f"Variable {variable.name!r} redeclared; "
                    f"replacing {previous!r} with {variable.value!r}"
                )
            if variable.name == CONTENT_VARIABLE:
                ctx.add_warning(
                    f"Variable {CONTENT_VARIABLE!r} is overridden by the document body when merging"
                )
            logger.trace("Working line %d declares %s=%r", lineno, variable.name, variable.value)
            ctx.variables[variable.name] = variable.value
            scanned.append(EMPTY_LINE)

        ctx.lines = scanned
        logger.debug("Scanned %d line(s), %d variable(s)", len(scanned), len(ctx.variables))
