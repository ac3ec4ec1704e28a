# topmark:header:start
#
#   project      : LineMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""CLI test helpers for running LineMark in a controlled working directory.

`run_cli_in()` changes the process working directory before invoking the
Click CLI so that relative document and template paths resolve against the
temporary test directory.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from linemark.cli.exit_codes import ExitCode
from linemark.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ANSI styling out of captured output regardless of the caller's env."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["convert", "index.lm"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def write_site(root: Path) -> Path:
    """Create a document and its template under ``root``; return the document path."""
    (root / "base.html").write_text(
        "<title>{{title}}</title>\n<body>\n{{content}}\n</body>\n", encoding="utf-8"
    )
    doc: Path = root / "index.lm"
    doc.write_text(
        "@title: Home\n@template: base.html\n# Welcome\nHello *there*.\n", encoding="utf-8"
    )
    return doc


EXPECTED_SITE_HTML: str = (
    "<title>Home</title>\n<body>\n<h1>Welcome</h1>\n<p>\nHello <em>there</em>.\n</p>\n</body>\n"
)
