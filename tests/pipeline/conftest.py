# topmark:header:start
#
#   project      : LineMark
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Shared helpers for pipeline tests.

`make_context` builds a fresh `ConversionContext` with the default config,
an in-memory template loader and a pinned clock, so step tests never touch
the filesystem or the real time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.pipeline.context import ConversionContext
from tests.conftest import FIXED_NOW, make_config, make_loader

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linemark.config import Config
    from linemark.pipeline.contracts import Step

BASE_TEMPLATE: str = "<html><title>{{title}}</title><body>{{content}}</body></html>"


def make_context(
    lines: Sequence[str],
    *,
    source_path: str | None = "site/index.lm",
    templates: dict[str, str] | None = None,
    config: Config | None = None,
) -> ConversionContext:
    """Return a context over ``lines`` that loads templates from ``templates``.

    Args:
        lines (Sequence[str]): Source lines.
        source_path (str | None): Source document path.
        templates (dict[str, str] | None): Template texts by resolved path
            (defaults to `BASE_TEMPLATE` at ``site/base.html``).
        config (Config | None): Configuration (defaults if None).

    Returns:
        ConversionContext: A context in the START state.
    """
    return ConversionContext.bootstrap(
        lines=list(lines),
        config=config or make_config(),
        source_path=source_path,
        template_loader=make_loader(
            templates if templates is not None else {"site/base.html": BASE_TEMPLATE}
        ),
        clock=lambda: FIXED_NOW,
    )


def run_steps(ctx: ConversionContext, *steps: Step) -> ConversionContext:
    """Invoke ``steps`` on ``ctx`` in order (without the runner's DONE transition)."""
    for step in steps:
        ctx = step(ctx)
    return ctx
