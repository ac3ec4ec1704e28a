# topmark:header:start
#
#   project      : LineMark
#   file         : options.py
#   file_relpath : src/linemark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Common CLI option utilities for the LineMark CLI.

This module centralizes reusable options (verbosity, color, configuration)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from enum import Enum
from typing import ParamSpec, TypeVar

import click

from linemark.cli.errors import LinemarkUsageError
from linemark.config.logging import TRACE_LEVEL, get_logger

P = ParamSpec("P")
R = TypeVar("R")

# Program-output verbosity levels, expressed as standard logging levels
LOG_LEVELS: dict[str, int] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The level as an integer: TRACE for ``-vvv``, DEBUG for ``-vv``, INFO
        for ``-v``, ERROR for ``-q``, WARNING otherwise.

    Raises:
        LinemarkUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LinemarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]
    return LOG_LEVELS["WARNING"]


def verbosity_from_level(level: int) -> int:
    """Return the number of ``-v`` flags a resolved level corresponds to (0 if none)."""
    if level <= LOG_LEVELS["TRACE"]:
        return 3
    if level <= LOG_LEVELS["DEBUG"]:
        return 2
    if level <= LOG_LEVELS["INFO"]:
        return 1
    return 0


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**: ``FORCE_COLOR`` (set, not ``"0"``) → True;
           ``NO_COLOR`` (set) → False.
        3. **Auto**: ``stdout.isatty()``.

    Args:
        color_mode_override: Parsed `ColorMode` from ``--color``; ``None`` if absent.
        stdout_isatty: Optional override for TTY detection.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` options to a command.

    Both options count occurrences and are mutually exclusive.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (report diagnostics). Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config`` options to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore project config files (pyproject.toml, linemark.toml).",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        type=click.Path(dir_okay=False, path_type=str),
        multiple=True,
        help="Merge this TOML config file after discovered ones (repeatable).",
    )(f)
    return f
