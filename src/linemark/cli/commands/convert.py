# topmark:header:start
#
#   project      : LineMark
#   file         : convert.py
#   file_relpath : src/linemark/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""LineMark `convert` command.

Converts one LineMark document into HTML.

Input modes:
  * ``SRC`` is a document path, or ``-`` to read the document from STDIN.
    Templates are resolved relative to the document's directory (relative to
    the current directory in STDIN mode).

Output modes:
  * ``OUTPUT`` defaults to ``SRC`` with its suffix replaced by the configured
    output suffix (``.html``).
  * ``OUTPUT`` of ``-``, the ``--stdout`` flag, or STDIN input without an
    ``OUTPUT`` print the result to stdout.

Nothing is written when the conversion fails.
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import TYPE_CHECKING

import click

from linemark.api import convert_document
from linemark.cli.cmd_common import (
    build_config,
    cli_errors,
    get_console,
    get_effective_verbosity,
)
from linemark.cli.errors import LinemarkUsageError
from linemark.cli.options import common_config_options
from linemark.config.logging import get_logger
from linemark.constants import STDIO_SENTINEL
from linemark.core.diagnostics import compute_diagnostic_stats
from linemark.core.files import read_source_lines, split_source_text, write_output
from linemark.pipeline.pipelines import Pipeline

if TYPE_CHECKING:
    from linemark.cli.console import ConsoleLike
    from linemark.config.model import Config
    from linemark.core.diagnostics import DiagnosticStats
    from linemark.pipeline.context import ConversionContext

logger = get_logger(__name__)


def _validate_encoding(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> str | None:
    if value is None:
        return None
    try:
        codecs.lookup(value)
    except LookupError as e:
        raise click.BadParameter(f"unknown encoding {value!r}") from e
    return value


@click.command(
    name="convert",
    help=(
        "Convert a LineMark document to HTML. "
        "Use '-' as SRC to read from STDIN and '-' as OUTPUT (or --stdout) to write to STDOUT."
    ),
)
@click.argument("source", metavar="SRC", type=str)
@click.argument("output", metavar="[OUTPUT]", type=str, required=False)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Write the result to STDOUT instead of a file.",
)
@click.option(
    "--body-only",
    is_flag=True,
    help="Emit only the converted body; no template is read or required.",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    callback=_validate_encoding,
    help="Encoding for the document, the template and the output (overrides config).",
)
@common_config_options
def convert_command(
    *,
    source: str,
    output: str | None,
    to_stdout: bool,
    body_only: bool,
    encoding: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Convert SRC to HTML.

    Args:
        source: Document path, or ``-`` for STDIN.
        output: Output path, or ``-`` for STDOUT.
        to_stdout: Write the result to STDOUT.
        body_only: Run the body-only pipeline (no template).
        encoding: Encoding override for input and output.
        config_paths: Additional TOML config files merged after discovery.
        no_config: If True, skip loading project configuration files.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    stdin_mode: bool = source == STDIO_SENTINEL
    if to_stdout and output not in (None, STDIO_SENTINEL):
        raise LinemarkUsageError("--stdout cannot be combined with an OUTPUT path.")
    write_stdout: bool = to_stdout or output == STDIO_SENTINEL or (stdin_mode and output is None)

    source_path: Path | None = None if stdin_mode else Path(source)
    config: Config = build_config(
        anchor=None if source_path is None else source_path.parent,
        config_paths=config_paths,
        no_config=no_config,
        cli_args={"encoding": encoding},
    )

    out_path: Path | None = None
    if not write_stdout:
        if output:
            out_path = Path(output)
        else:
            assert source_path is not None
            if not source_path.name:
                raise LinemarkUsageError(f"Cannot derive an output path from {source!r}.")
            out_path = source_path.with_suffix(config.output_suffix)
        if source_path is not None and out_path.resolve() == source_path.resolve():
            raise LinemarkUsageError(f"Refusing to overwrite the source document {source}.")

    subject: str = "<stdin>" if stdin_mode else source
    with cli_errors(subject):
        if stdin_mode:
            stream = click.get_text_stream("stdin", encoding=config.input_encoding)
            lines: list[str] = split_source_text(stream.read())
        else:
            lines = read_source_lines(source, encoding=config.input_encoding)

        result_ctx: ConversionContext = convert_document(
            lines,
            source_path=None if stdin_mode else source,
            config=config,
            pipeline=Pipeline.BODY if body_only else Pipeline.CONVERT,
        )

    text: str = (result_ctx.content if body_only else result_ctx.result) or ""

    if vlevel > 1:
        for step in result_ctx.steps:
            state_text: str = step.state.value
            if _color_enabled(ctx):
                state_text = step.state.color(state_text)
            console.note(f"{subject}: {step.name} -> {state_text}")

    if vlevel > 0:
        for diag in result_ctx.diagnostics:
            console.note(f"{subject}: {diag.render(color=_color_enabled(ctx))}")

    if out_path is None:
        console.print(text, nl=False)
    else:
        with cli_errors(out_path):
            write_output(out_path, text, encoding=config.output_encoding)

    if vlevel > 0:
        stats: DiagnosticStats = compute_diagnostic_stats(result_ctx.diagnostics)
        target: str = "<stdout>" if out_path is None else str(out_path)
        console.note(
            f"Converted {subject} -> {target} "
            f"({len(result_ctx.variables)} variable(s), {stats.n_warning} warning(s))"
        )


def _color_enabled(ctx: click.Context) -> bool:
    return bool(ctx.obj.get("color_enabled", False)) if ctx.obj else False
