# topmark:header:start
#
#   project      : LineMark
#   file         : logging.py
#   file_relpath : src/linemark/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Custom LineMark logging with TRACE logging.

This module extends the standard logging module with a custom TRACE level, a
project logger class, and colored output formatting. Internal diagnostics go
through these loggers; user-facing program output goes through the CLI console.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from linemark.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class LinemarkLogger(logging.Logger):
    """Logger class for LineMark with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(LinemarkLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Lowest level first; a record takes the style of the highest threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by severity.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        message: str = super().format(record)
        style: Callable[[str], str] = chalk.dim
        for threshold, candidate in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = candidate
        return style(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by ``LINEMARK_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names in any case (``trace``, ``DEBUG``, ``warn``) and
    plain numbers (``"10"``).
    """
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    name: str = raw.strip().upper()
    if name.isdigit():
        return int(name)
    return _LEVEL_NAMES.get(name)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Logs go to stderr so they never mix with HTML written to stdout.

    Args:
        level (int | None): Level to apply; when None the environment is
            consulted via `resolve_env_log_level`, falling back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace earlier handlers (repeated CLI invocations in one process).
    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)

    handler: logging.Handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> LinemarkLogger:
    """Return the project logger for ``name`` (a `LinemarkLogger`)."""
    return cast("LinemarkLogger", logging.getLogger(name))
