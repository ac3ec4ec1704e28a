# topmark:header:start
#
#   project      : LineMark
#   file         : strategies_linemark.py
#   file_relpath : tests/strategies_linemark.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating LineMark documents.

Documents are built from a small vocabulary of line shapes (paragraph text,
blank lines, headings, declarations, blockquotes, comments) so property
tests explore every transition between paragraph and special lines.
"""

from __future__ import annotations

from hypothesis import strategies as st

# Characters that never form markup on their own.
PLAIN_ALPHABET: str = "abcdefghijklmnopqrstuvwxyz ABCXYZ0123456789.,!?-"

# Prefixes that make a line special (never wrapped in a paragraph).
SPECIAL_PREFIXES: tuple[str, ...] = ("#", "@", ">", ";;")

INDENTS: tuple[str, ...] = ("", " ", "  ", "\t")


def s_words() -> st.SearchStrategy[str]:
    """Plain text that starts with a letter (so it is never special)."""
    return st.builds(
        lambda head, tail: head + tail,
        st.sampled_from("abcdefghijklmnopqrstuvwxyz"),
        st.text(alphabet=PLAIN_ALPHABET, max_size=20),
    )


def s_paragraph_line() -> st.SearchStrategy[str]:
    """A line that takes part in paragraph wrapping."""
    return st.builds(lambda indent, words: indent + words, st.sampled_from(INDENTS), s_words())


def s_blank_line() -> st.SearchStrategy[str]:
    """An empty or whitespace-only line."""
    return st.sampled_from(INDENTS)


def s_special_line() -> st.SearchStrategy[str]:
    """A heading, declaration, blockquote or comment line (possibly indented)."""
    return st.builds(
        lambda indent, prefix, words: indent + prefix + words,
        st.sampled_from(INDENTS),
        st.sampled_from(SPECIAL_PREFIXES),
        st.text(alphabet=PLAIN_ALPHABET, max_size=12),
    )


def s_declaration_line() -> st.SearchStrategy[str]:
    """A well-formed ``@name: value`` declaration."""
    return st.builds(
        lambda name, value: f"@{name}: {value}",
        st.from_regex(r"[a-z][a-z0-9_]{0,8}", fullmatch=True),
        s_words(),
    )


def s_document() -> st.SearchStrategy[list[str]]:
    """A document mixing paragraph, blank and special lines."""
    return st.lists(
        st.one_of(s_paragraph_line(), s_blank_line(), s_special_line()),
        max_size=40,
    )
