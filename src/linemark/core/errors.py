# topmark:header:start
#
#   project      : LineMark
#   file         : errors.py
#   file_relpath : src/linemark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Exceptions raised by the LineMark conversion core.

These are framework-agnostic: the CLI layer maps them onto Click exceptions
and exit codes (see `linemark.cli.errors`). I/O failures are not wrapped; the
built-in `OSError` family raised while reading files propagates unchanged.
"""

from __future__ import annotations


class LinemarkError(Exception):
    """Base class for all LineMark conversion errors."""


class TemplateNotDeclaredError(LinemarkError):
    """The source document never declared a ``@template`` variable."""

    def __init__(self, message: str = "No template file provided") -> None:
        super().__init__(message)


class InvalidPathError(LinemarkError):
    """A path could not be decomposed into a directory and a file name."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid path: {path!r}")
        self.path = path


class ConfigError(LinemarkError):
    """A configuration file is unreadable or malformed."""
