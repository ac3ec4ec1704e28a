# topmark:header:start
#
#   project      : LineMark
#   file         : test_convert.py
#   file_relpath : tests/cli/test_convert.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Tests for the ``convert`` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    EXPECTED_SITE_HTML,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
    write_site,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_convert_writes_html_next_to_source(isolation: Path) -> None:
    """Without OUTPUT the result lands beside the source with an .html suffix."""
    write_site(isolation)
    result = run_cli(["convert", "index.lm"])

    assert_SUCCESS(result)
    assert result.stdout == ""
    assert (isolation / "index.html").read_text(encoding="utf-8") == EXPECTED_SITE_HTML


@mark_cli
def test_convert_to_explicit_output(isolation: Path) -> None:
    """An OUTPUT path is honoured."""
    write_site(isolation)
    (isolation / "out").mkdir()
    result = run_cli(["convert", "index.lm", "out/page.htm"])

    assert_SUCCESS(result)
    assert (isolation / "out" / "page.htm").read_text(encoding="utf-8") == EXPECTED_SITE_HTML
    assert not (isolation / "index.html").exists()


@mark_cli
def test_convert_to_stdout(isolation: Path) -> None:
    """``--stdout`` and ``-`` print the result instead of writing a file."""
    write_site(isolation)
    for argv in (["convert", "--stdout", "index.lm"], ["convert", "index.lm", "-"]):
        result = run_cli(argv)
        assert_SUCCESS(result)
        assert result.stdout == EXPECTED_SITE_HTML
    assert not (isolation / "index.html").exists()


@mark_cli
def test_convert_from_stdin(isolation: Path) -> None:
    """STDIN documents resolve templates against the working directory."""
    write_site(isolation)
    result = run_cli(["convert", "-"], input_text="@template: base.html\r\n@title: In\r\nx\r\n")

    assert_SUCCESS(result)
    assert result.stdout == "<title>In</title>\n<body>\n<p>\nx\n</p>\n</body>\n"


@mark_cli
def test_convert_from_stdin_to_file(isolation: Path) -> None:
    """STDIN input may still be written to an explicit OUTPUT."""
    write_site(isolation)
    result = run_cli(["convert", "-", "from-stdin.html"], input_text="@template: base.html\n")

    assert_SUCCESS(result)
    assert (isolation / "from-stdin.html").read_text(encoding="utf-8") == (
        "<title>{{title}}</title>\n<body>\n\n</body>\n"
    )


@mark_cli
def test_body_only_needs_no_template(isolation: Path) -> None:
    """``--body-only`` prints the converted body without reading a template."""
    (isolation / "doc.lm").write_text("# T\n`x`\n", encoding="utf-8")
    result = run_cli(["convert", "--body-only", "--stdout", "doc.lm"])

    assert_SUCCESS(result)
    assert result.stdout == "<h1>T</h1>\n<p>\n<code>x</code>\n</p>"


@mark_cli
def test_nested_document_uses_its_own_directory(tmp_path: Path) -> None:
    """Templates resolve relative to the document, not the working directory."""
    (tmp_path / "linemark.toml").write_text("root = true\n", encoding="utf-8")
    site = tmp_path / "site"
    site.mkdir()
    write_site(site)

    result = run_cli_in(tmp_path, ["convert", "site/index.lm"])
    assert_SUCCESS(result)
    assert (site / "index.html").read_text(encoding="utf-8") == EXPECTED_SITE_HTML


@mark_cli
def test_configured_suffix_and_separator(isolation: Path) -> None:
    """Project config drives the default output suffix and the line separator."""
    (isolation / "linemark.toml").write_text(
        "root = true\n[output]\nsuffix = '.htm'\nline_separator = ' '\n", encoding="utf-8"
    )
    (isolation / "t.html").write_text("{{content}}", encoding="utf-8")
    (isolation / "doc.lm").write_text("@template: t.html\na\nb\n", encoding="utf-8")

    result = run_cli(["convert", "doc.lm"])
    assert_SUCCESS(result)
    assert (isolation / "doc.htm").read_text(encoding="utf-8") == "<p> a b </p>"


@mark_cli
def test_encoding_option(isolation: Path) -> None:
    """``--encoding`` applies to the document, the template and the output."""
    (isolation / "t.html").write_bytes("é{{content}}".encode("latin-1"))
    (isolation / "doc.lm").write_bytes("@template: t.html\nà\n".encode("latin-1"))

    result = run_cli(["convert", "--encoding", "latin-1", "doc.lm"])
    assert_SUCCESS(result)
    assert (isolation / "doc.html").read_bytes() == "é<p>\nà\n</p>".encode("latin-1")


@mark_cli
def test_unknown_encoding_is_rejected(isolation: Path) -> None:
    """An unknown codec name is a parameter error."""
    write_site(isolation)
    result = run_cli(["convert", "--encoding", "no-such-codec", "index.lm"])
    assert result.exit_code == 2
    assert "unknown encoding" in result.output


@mark_cli
def test_verbose_reports_diagnostics_and_summary(isolation: Path) -> None:
    """``-v`` sends diagnostics and a summary line to stderr."""
    (isolation / "t.html").write_text("{{content}}{{missing}}", encoding="utf-8")
    (isolation / "doc.lm").write_text("@template: t.html\nhi\n", encoding="utf-8")

    result = run_cli(["-v", "convert", "doc.lm"])
    assert_SUCCESS(result)
    assert "{{missing}}" in result.stderr
    assert "Converted doc.lm -> doc.html" in result.stderr
    assert result.stdout == ""


@mark_cli
def test_default_verbosity_is_silent(isolation: Path) -> None:
    """Without ``-v`` a successful file conversion prints nothing."""
    write_site(isolation)
    result = run_cli(["convert", "index.lm"])
    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_refuses_to_overwrite_source(isolation: Path) -> None:
    """A source already carrying the output suffix is not overwritten."""
    (isolation / "page.html").write_text("@template: page.html\n", encoding="utf-8")
    result = run_cli(["convert", "page.html"])

    assert_USAGE_ERROR(result)
    assert (isolation / "page.html").read_text(encoding="utf-8") == "@template: page.html\n"


@mark_cli
def test_stdout_flag_conflicts_with_output_path(isolation: Path) -> None:
    """``--stdout`` together with an OUTPUT file is a usage error."""
    write_site(isolation)
    assert_USAGE_ERROR(run_cli(["convert", "--stdout", "index.lm", "out.html"]))


@mark_cli
def test_failed_conversion_writes_nothing(isolation: Path) -> None:
    """No output file is created when the conversion fails."""
    (isolation / "doc.lm").write_text("no template here\n", encoding="utf-8")
    result = run_cli(["convert", "doc.lm"])

    assert result.exit_code != 0
    assert not (isolation / "doc.html").exists()


@mark_cli
def test_very_verbose_lists_step_states(isolation: Path) -> None:
    """``-vv`` lists every executed step with the state it entered."""
    write_site(isolation)
    result = run_cli(["-vv", "convert", "index.lm"])

    assert_SUCCESS(result)
    assert "index.lm: TaggerStep -> tagging" in result.stderr
    assert "index.lm: TemplaterStep -> templating" in result.stderr
