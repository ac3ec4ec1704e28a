# topmark:header:start
#
#   project      : LineMark
#   file         : test_variables.py
#   file_relpath : tests/markup/test_variables.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Tests for declaration parsing and keyword expansion."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.markup.keywords import KEYWORDS, expand_keywords
from linemark.markup.variables import Variable, parse_variable_line
from tests.conftest import FIXED_NOW, parametrize

if TYPE_CHECKING:
    from datetime import datetime

    from linemark.markup.keywords import Clock


def test_parse_simple_declaration() -> None:
    """``@title: Hello`` declares ``title``."""
    assert parse_variable_line("@title: Hello") == Variable(name="title", value="Hello")


@parametrize(
    "line, name, value",
    [
        ("@author: /u/keppo", "author", "/u/keppo"),
        ("@template:base.html", "template", "base.html"),
        ("@x:    spaced", "x", "spaced"),
        ("@empty:", "empty", ""),
        ("@Mixed_Case9: v", "Mixed_Case9", "v"),
        ("@note: a: b :c ", "note", "a: b :c "),
    ],
)
def test_parse_declaration_variants(line: str, name: str, value: str) -> None:
    """Names are word characters; values are kept verbatim after the colon."""
    assert parse_variable_line(line) == Variable(name=name, value=value)


@parametrize(
    "line",
    [
        "plain text",
        " @indented: no",
        "@no colon",
        "@bad-name: x",
        "@: nameless",
        "email me @home: later",
    ],
)
def test_non_declarations(line: str) -> None:
    """Lines that do not match the grammar return None."""
    assert parse_variable_line(line) is None


def test_time_keyword_uses_clock(fixed_clock: Clock) -> None:
    """``TIME(fmt)`` is rendered with strftime on the injected clock."""
    var: Variable | None = parse_variable_line("@date: TIME(%Y-%m-%d)", clock=fixed_clock)
    assert var == Variable(name="date", value="2024-03-09")


def test_time_keyword_keeps_surrounding_text(fixed_clock: Clock) -> None:
    """Only the token is replaced."""
    value: str = expand_keywords("Updated TIME(%Y) by me", clock=fixed_clock)
    assert value == "Updated 2024 by me"


def test_multiple_time_tokens_share_one_instant() -> None:
    """Every token in a value sees the same instant; the clock is read once."""
    calls: list[datetime] = []

    def clock() -> datetime:
        calls.append(FIXED_NOW)
        return FIXED_NOW

    value: str = expand_keywords("TIME(%H):TIME(%M)", clock=clock)
    assert value == "14:05"
    assert len(calls) == 1


def test_value_without_keyword_skips_clock() -> None:
    """The clock is not consulted when no keyword is present."""

    def clock() -> datetime:
        raise AssertionError("clock must not be read")

    assert expand_keywords("no keywords here", clock=clock) == "no keywords here"


def test_keyword_table() -> None:
    """TIME is the registered keyword."""
    assert [kw.name for kw in KEYWORDS] == ["TIME"]
