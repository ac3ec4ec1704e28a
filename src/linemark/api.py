# topmark:header:start
#
#   project      : LineMark
#   file         : api.py
#   file_relpath : src/linemark/api.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Public API for LineMark.

This module is the stable entry point for converting LineMark documents from
Python code. It hides the pipeline internals behind a few functions:

    ```python
    from linemark import api

    html = api.convert_file("docs/index.lm")
    body = api.render_body(["# Title", "Some *text*."])
    ```

All functions accept an optional `Config`; when omitted, the built-in
defaults are used (no config file discovery). The CLI performs discovery and
passes the frozen result in.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from linemark.config.logging import get_logger
from linemark.config.model import MutableConfig
from linemark.core.files import read_source_lines, read_template
from linemark.pipeline import runner
from linemark.pipeline.context import ConversionContext
from linemark.pipeline.pipelines import Pipeline

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linemark.config.logging import LinemarkLogger
    from linemark.config.model import Config
    from linemark.core.files import TemplateLoader
    from linemark.markup.keywords import Clock

__all__ = [
    "convert",
    "convert_document",
    "convert_file",
    "read_source_lines",
    "read_template",
    "render_body",
]

logger: LinemarkLogger = get_logger(__name__)


def _effective_config(config: Config | None) -> Config:
    return config if config is not None else MutableConfig.from_defaults().freeze()


def _as_source_path(source_path: str | Path | None) -> str | None:
    if isinstance(source_path, Path):
        return source_path.as_posix()
    return source_path


def convert_document(
    lines: Iterable[str],
    *,
    source_path: str | Path | None = None,
    config: Config | None = None,
    template_loader: TemplateLoader | None = None,
    clock: Clock | None = None,
    pipeline: Pipeline = Pipeline.CONVERT,
) -> ConversionContext:
    """Run a pipeline over ``lines`` and return the finished context.

    Use this when you need more than the HTML string: the declared
    variables, the document body or the diagnostics of the run.

    Args:
        lines (Iterable[str]): Source lines, without line terminators.
        source_path (str | Path | None): Path of the source document; the
            template is resolved relative to its directory.
        config (Config | None): Effective configuration (defaults if None).
        template_loader (TemplateLoader | None): Callable reading a template
            from its resolved path; defaults to reading from disk.
        clock (Clock | None): Time source for ``TIME(...)`` expansion.
        pipeline (Pipeline): The pipeline to run.

    Returns:
        ConversionContext: The context after the runner has finished.

    Raises:
        TemplateNotDeclaredError: The CONVERT pipeline ran on a document
            without a ``template`` declaration.
        InvalidPathError: ``source_path`` has no file name.
        OSError: The template could not be read.
    """
    ctx: ConversionContext = ConversionContext.bootstrap(
        lines=list(lines),
        config=_effective_config(config),
        source_path=_as_source_path(source_path),
        template_loader=template_loader,
        clock=clock,
    )
    return runner.run(ctx, pipeline.steps)


def convert(
    lines: Iterable[str],
    *,
    source_path: str | Path | None = None,
    config: Config | None = None,
    template_loader: TemplateLoader | None = None,
    clock: Clock | None = None,
) -> str:
    """Convert source lines into a complete HTML document.

    Args:
        lines (Iterable[str]): Source lines, without line terminators.
        source_path (str | Path | None): Path of the source document.
        config (Config | None): Effective configuration (defaults if None).
        template_loader (TemplateLoader | None): Template reader override.
        clock (Clock | None): Time source for ``TIME(...)`` expansion.

    Returns:
        str: The merged HTML document.
    """
    ctx: ConversionContext = convert_document(
        lines,
        source_path=source_path,
        config=config,
        template_loader=template_loader,
        clock=clock,
    )
    assert ctx.result is not None
    return ctx.result


def convert_file(
    path: str | Path,
    *,
    config: Config | None = None,
    template_loader: TemplateLoader | None = None,
    clock: Clock | None = None,
) -> str:
    """Read and convert the document at ``path``.

    The template is resolved relative to the document's directory.
    """
    cfg: Config = _effective_config(config)
    logger.debug("convert_file(%s) with config from %s", path, cfg.config_files)
    lines: list[str] = read_source_lines(path, encoding=cfg.input_encoding)
    return convert(
        lines,
        source_path=path,
        config=cfg,
        template_loader=template_loader,
        clock=clock,
    )


def render_body(
    lines: Iterable[str],
    *,
    config: Config | None = None,
    clock: Clock | None = None,
) -> str:
    """Convert source lines into the document body only.

    No template is required or read; variable declarations are consumed
    but not merged anywhere.
    """
    ctx: ConversionContext = convert_document(
        lines,
        config=config,
        clock=clock,
        pipeline=Pipeline.BODY,
    )
    return ctx.content or ""
