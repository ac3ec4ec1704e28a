# topmark:header:start
#
#   project      : LineMark
#   file         : cmd_common.py
#   file_relpath : src/linemark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Helpers shared by LineMark CLI commands.

This module wraps configuration loading and the translation of runtime
exceptions into CLI errors so that command bodies don't duplicate
try/except blocks.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from linemark.cli.errors import (
    LinemarkConfigError,
    LinemarkEncodingError,
    LinemarkFileNotFoundError,
    LinemarkIOError,
    LinemarkPermissionDeniedError,
    LinemarkPipelineError,
)
from linemark.cli.options import verbosity_from_level
from linemark.config.logging import get_logger
from linemark.config.model import MutableConfig
from linemark.core.errors import LinemarkError

if TYPE_CHECKING:
    from linemark.cli.console import ConsoleLike
    from linemark.config.logging import LinemarkLogger
    from linemark.config.model import Config

logger: LinemarkLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the number of ``-v`` flags in effect for this command (0 = terse)."""
    level: int | None = ctx.obj.get("verbosity_level") if ctx.obj else None
    return 0 if level is None else verbosity_from_level(level)


def build_config(
    *,
    anchor: Path | None,
    config_paths: tuple[str, ...] | list[str],
    no_config: bool,
    cli_args: dict[str, Any] | None = None,
) -> Config:
    """Discover, merge and freeze the effective configuration.

    Args:
        anchor (Path | None): Directory where config discovery starts
            (the current directory if None).
        config_paths (tuple[str, ...] | list[str]): Explicit ``--config`` files.
        no_config (bool): Skip discovery of project config files.
        cli_args (dict[str, Any] | None): CLI overrides (see
            `MutableConfig.apply_cli_args`).

    Returns:
        Config: The frozen configuration.

    Raises:
        LinemarkConfigError: A config file is unreadable or malformed.
    """
    with cli_errors("configuration"):
        draft: MutableConfig = MutableConfig.load_merged(
            anchor=anchor,
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    draft.apply_cli_args(cli_args or {})
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


@contextmanager
def cli_errors(subject: str | Path) -> Iterator[None]:
    """Translate runtime exceptions raised in the block into CLI errors.

    Exit code mapping:
        FILE_NOT_FOUND → FileNotFoundError / IsADirectoryError
        PERMISSION_DENIED → PermissionError
        IO_ERROR → any other OSError
        ENCODING_ERROR → UnicodeError
        CONFIG_ERROR → LinemarkError (no template declared, invalid path,
        malformed config)
        PIPELINE_ERROR → RuntimeError (a step sequence that violates the state order)

    Args:
        subject (str | Path): What was being processed, used in messages.
    """
    try:
        yield
    except (FileNotFoundError, IsADirectoryError) as e:
        logger.error("File not found while processing %s: %s", subject, e)
        raise LinemarkFileNotFoundError(f"{subject}: {e}") from e
    except PermissionError as e:
        logger.error("Permission denied while processing %s: %s", subject, e)
        raise LinemarkPermissionDeniedError(f"{subject}: {e}") from e
    except OSError as e:
        logger.error("I/O error while processing %s: %s", subject, e)
        raise LinemarkIOError(f"{subject}: {e}") from e
    except UnicodeError as e:
        logger.error("Encoding error while processing %s: %s", subject, e)
        raise LinemarkEncodingError(f"Encoding error in {subject}: {e}") from e
    except LinemarkError as e:
        logger.error("Conversion of %s failed: %s", subject, e)
        raise LinemarkConfigError(f"{subject}: {e}") from e
    except RuntimeError as e:
        logger.error("Pipeline failure while processing %s: %s", subject, e)
        raise LinemarkPipelineError(f"{subject}: {e}") from e
