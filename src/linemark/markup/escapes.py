# topmark:header:start
#
#   project      : LineMark
#   file         : escapes.py
#   file_relpath : src/linemark/markup/escapes.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

r"""Backslash escapes for markup tokens.

A backslash in front of a markup token (``# @ > ; * `\``) makes that token
literal. Escapes are handled in two passes around the inline rules instead of
with regex lookbehinds:

1. `mask_escapes` scans the line left to right and replaces every escape
   pair with a private-use stand-in character that no rule matches.
2. After the rules ran, `unmask_escapes` maps every stand-in back to the
   literal token, which drops the escaping backslash.

A doubled backslash ``\\`` only stops the next character from being escaped:
both backslashes stay in the output, so ``\\#`` is ``\\`` followed by an
active ``#`` and ``C:\\share`` passes through unchanged.

Text already containing the stand-in characters (U+E000..U+E006) is not
supported.
"""

from __future__ import annotations

from typing import Final

ESCAPE_CHAR: Final[str] = "\\"

ESCAPABLE_TOKENS: Final[tuple[str, ...]] = ("#", "@", ">", ";", "*", "`")

_MASK_BASE: Final[int] = 0xE000

_MASKS: Final[dict[str, str]] = {
    token: chr(_MASK_BASE + idx) for idx, token in enumerate((*ESCAPABLE_TOKENS, ESCAPE_CHAR))
}

# A masked backslash pair restores both backslashes.
_UNMASK_TABLE: Final[dict[int, str]] = {
    ord(mask): ESCAPE_CHAR * 2 if token == ESCAPE_CHAR else token for token, mask in _MASKS.items()
}


def mask_escapes(line: str) -> str:
    """Replace each escape pair in ``line`` with its stand-in character."""
    out: list[str] = []
    i: int = 0
    n: int = len(line)
    while i < n:
        ch: str = line[i]
        if ch == ESCAPE_CHAR and i + 1 < n and line[i + 1] in _MASKS:
            out.append(_MASKS[line[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def unmask_escapes(line: str) -> str:
    """Turn stand-in characters back into literal text.

    Escaped tokens lose their backslash; a doubled backslash is restored as is.
    """
    return line.translate(_UNMASK_TABLE)
