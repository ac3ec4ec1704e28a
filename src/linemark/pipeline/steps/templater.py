# topmark:header:start
#
#   project      : LineMark
#   file         : templater.py
#   file_relpath : src/linemark/pipeline/steps/templater.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Template merging step.

Resolves the template named by the ``template`` variable relative to the
source document, loads it through the context's template loader and merges
the document variables and body into it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.config.logging import get_logger
from linemark.constants import CONTENT_VARIABLE, TEMPLATE_VARIABLE
from linemark.core.errors import TemplateNotDeclaredError
from linemark.markup.template import (
    find_placeholders,
    merge_with_template,
    resolve_template_path,
)
from linemark.pipeline.status import ConversionState
from linemark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from linemark.config.logging import LinemarkLogger
    from linemark.pipeline.context import ConversionContext

logger: LinemarkLogger = get_logger(__name__)


class TemplaterStep(BaseStep):
    """Load the declared template and merge variables and content into it.

    Preconditions:
      - ``ctx.content`` is set (by FilterStep).

    Sets:
      - ``ctx.template_path``, ``ctx.template``, ``ctx.result``.

    Raises:
      - TemplateNotDeclaredError: no ``template`` variable was declared.
      - InvalidPathError: the source path has no file name.
      - OSError: the template cannot be read.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, state=ConversionState.TEMPLATING)

    def run(self, ctx: ConversionContext) -> None:
        """Resolve, load and merge the template."""
        template_name: str | None = ctx.variables.get(TEMPLATE_VARIABLE)
        if template_name is None:
            raise TemplateNotDeclaredError()

        ctx.template_path = resolve_template_path(ctx.source_path, template_name)
        logger.info("Loading template %s", ctx.template_path)
        assert ctx.template_loader is not None  # set in ConversionContext.__post_init__
        ctx.template = ctx.template_loader(ctx.template_path)

        values: dict[str, str] = dict(ctx.variables)
        values[CONTENT_VARIABLE] = ctx.content or ""
        ctx.result = merge_with_template(ctx.template, values)

    def hint(self, ctx: ConversionContext) -> None:
        """Warn about template placeholders that no variable resolved."""
        if ctx.template is None:
            return
        known: set[str] = set(ctx.variables) | {CONTENT_VARIABLE}
        known.discard(TEMPLATE_VARIABLE)
        for name in find_placeholders(ctx.template):
            if name not in known:
                ctx.add_warning(f"Template placeholder {{{{{name}}}}} was left unresolved")
