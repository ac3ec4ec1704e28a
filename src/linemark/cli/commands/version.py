# topmark:header:start
#
#   project      : LineMark
#   file         : version.py
#   file_relpath : src/linemark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""LineMark `version` command.

Prints the current LineMark version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from linemark.cli.cmd_common import get_console, get_effective_verbosity
from linemark.constants import LINEMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of LineMark.",
)
def version_command() -> None:
    """Show the current version of LineMark."""
    ctx: click.Context = click.get_current_context()
    console = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("LineMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(LINEMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(LINEMARK_VERSION, bold=True))
