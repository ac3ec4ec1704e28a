# topmark:header:start
#
#   project      : LineMark
#   file         : files.py
#   file_relpath : src/linemark/core/files.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Boundary readers and writers for source documents, templates and output.

These helpers are the only places where LineMark touches the filesystem.
`OSError` (and `UnicodeDecodeError`) propagate unchanged; mapping them to exit
codes is the CLI's job.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from linemark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from linemark.config.logging import LinemarkLogger

logger: LinemarkLogger = get_logger(__name__)

# Loads a template given its resolved path.
TemplateLoader = Callable[[str], str]


def split_source_text(text: str) -> list[str]:
    r"""Split source text into lines.

    ``\r\n`` and ``\r`` line endings count as ``\n``. A single trailing
    newline does not produce an extra empty line.
    """
    if not text:
        return []
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines: list[str] = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_source_lines(path: str | Path, *, encoding: str = "utf-8") -> list[str]:
    """Read a source document and return its lines without terminators.

    Newlines are normalized (universal newlines) before splitting.

    Args:
        path (str | Path): Path to the source document.
        encoding (str): Text encoding of the document.

    Returns:
        list[str]: The document lines.
    """
    logger.debug("Reading source document %s (%s)", path, encoding)
    with open(path, encoding=encoding, newline=None) as fh:
        return split_source_text(fh.read())


def read_template(path: str | Path, *, encoding: str = "utf-8") -> str:
    """Read a template file and return its text unchanged.

    Line endings are kept as stored; no newline translation is applied.

    Args:
        path (str | Path): Resolved template path.
        encoding (str): Text encoding of the template.

    Returns:
        str: The template text.
    """
    logger.debug("Reading template %s (%s)", path, encoding)
    with open(path, encoding=encoding, newline="") as fh:
        return fh.read()


def write_output(path: str | Path, text: str, *, encoding: str = "utf-8") -> None:
    """Write the converted document to ``path``.

    The text is written as-is (no newline translation).
    """
    logger.debug("Writing %d characters to %s (%s)", len(text), path, encoding)
    with open(path, "w", encoding=encoding, newline="") as fh:
        fh.write(text)
