# topmark:header:start
#
#   project      : LineMark
#   file         : test_escapes.py
#   file_relpath : tests/markup/test_escapes.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Tests for backslash escape masking (`linemark.markup.escapes`)."""

from __future__ import annotations

from linemark.markup.escapes import ESCAPABLE_TOKENS, mask_escapes, unmask_escapes
from tests.conftest import parametrize


@parametrize("token", list(ESCAPABLE_TOKENS))
def test_escaped_token_is_masked_and_restored(token: str) -> None:
    """An escaped token disappears while masked and comes back without the backslash."""
    masked: str = mask_escapes("a\\" + token + "b")
    assert token not in masked
    assert unmask_escapes(masked) == "a" + token + "b"


def test_unescapable_characters_keep_backslash() -> None:
    """A backslash before an ordinary character is left alone."""
    assert mask_escapes("C:\\path") == "C:\\path"
    assert unmask_escapes(mask_escapes("C:\\path")) == "C:\\path"


def test_doubled_backslash_blocks_escape_and_is_kept() -> None:
    """``\\\\#`` keeps both backslashes and leaves the ``#`` active."""
    masked: str = mask_escapes("\\\\#")
    assert masked.endswith("#")
    assert unmask_escapes(masked) == "\\\\#"


def test_doubled_backslash_without_token_is_unchanged() -> None:
    """Doubled backslashes outside any escape survive the round trip."""
    line: str = "C:\\\\share\\\\x"
    assert unmask_escapes(mask_escapes(line)) == line


def test_trailing_backslash_is_kept() -> None:
    """A lone backslash at the end of a line is literal text."""
    assert unmask_escapes(mask_escapes("end\\")) == "end\\"
