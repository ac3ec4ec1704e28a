# topmark:header:start
#
#   project      : LineMark
#   file         : dump_config.py
#   file_relpath : src/linemark/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""LineMark `dump-config` command.

Emits the effective LineMark configuration as TOML after applying defaults,
discovered project config files and explicit ``--config`` files. The output
is wrapped between `# === BEGIN ===` and `# === END ===` markers for easy
parsing in tests or tooling.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from linemark.cli.cmd_common import build_config, get_console, get_effective_verbosity
from linemark.cli.options import common_config_options
from linemark.config.logging import get_logger

if TYPE_CHECKING:
    from linemark.config.model import Config

logger = get_logger(__name__)

BEGIN_MARKER: str = "# === BEGIN ==="
END_MARKER: str = "# === END ==="


@click.command(
    name="dump-config",
    help=(
        "Dump the effective LineMark configuration as TOML. "
        "Discovery starts at PATH (a document or directory; default: the current directory)."
    ),
)
@click.argument("path", required=False, type=click.Path(path_type=Path))
@common_config_options
def dump_config_command(
    *,
    path: Path | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Dump the merged configuration as TOML.

    Args:
        path: Optional document or directory where config discovery starts.
        config_paths: Additional TOML config files merged after discovery.
        no_config: If True, skip loading project configuration files.
    """
    ctx: click.Context = click.get_current_context()
    console = get_console(ctx)

    anchor: Path | None = None
    if path is not None:
        anchor = path if path.is_dir() else path.parent

    config: Config = build_config(anchor=anchor, config_paths=config_paths, no_config=no_config)
    logger.trace("Config after merging: %s", config)

    if get_effective_verbosity(ctx) > 0:
        console.note("# Merged from: " + ", ".join(str(p) for p in config.config_files))

    console.print(BEGIN_MARKER)
    console.print(config.to_toml(), nl=False)
    console.print(END_MARKER)
