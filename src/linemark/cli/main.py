# topmark:header:start
#
#   project      : LineMark
#   file         : main.py
#   file_relpath : src/linemark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""LineMark command line entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import click

from linemark.cli.commands.convert import convert_command
from linemark.cli.commands.dump_config import dump_config_command
from linemark.cli.commands.version import version_command
from linemark.cli.console import ClickConsole, ConsoleLike
from linemark.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from linemark.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env:
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    override: ColorMode | None = ColorMode.NEVER if no_color else None
    if override is None and color_mode is not None:
        override = ColorMode(color_mode)
    enable_color: bool = resolve_color_mode(color_mode_override=override)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="LineMark: convert line-oriented markup to HTML.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the LineMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'linemark convert SRC [OUTPUT]' to convert a document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(dump_config_command)

cli.add_command(convert_command)

if __name__ == "__main__":
    cli()
