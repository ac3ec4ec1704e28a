# topmark:header:start
#
#   project      : LineMark
#   file         : errors.py
#   file_relpath : src/linemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Exceptions for the LineMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from linemark.cli.exit_codes import ExitCode


class LinemarkCliError(click.ClickException):
    """Base class for all LineMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class LinemarkUsageError(LinemarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LinemarkConfigError(LinemarkCliError):
    """Error for configuration errors (no template declared, malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class LinemarkFileNotFoundError(LinemarkCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LinemarkPermissionDeniedError(LinemarkCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class LinemarkIOError(LinemarkCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class LinemarkEncodingError(LinemarkCliError):
    """Error for text decoding/encoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class LinemarkPipelineError(LinemarkCliError):
    """Error for internal pipeline failures."""

    exit_code = ExitCode.PIPELINE_ERROR
