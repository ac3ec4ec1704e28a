# topmark:header:start
#
#   project      : LineMark
#   file         : inline.py
#   file_relpath : src/linemark/markup/inline.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Inline conversion of a single line.

`INLINE_RULES` is the ordered rule table. Order matters: each rule runs on
the output of the previous ones.

1. ``comment``  – ``text ;; note`` → ``text``
2. ``code``     – text between backticks → ``<code>text</code>``
3. ``emphasis`` – ``*x*`` → ``<em>x</em>``
4. ``link``     – ``[label](target)`` → ``<a href="target">label</a>``
5. ``heading``  – ``## Title`` → ``<h2>Title</h2>`` (whole line)

Substitutions do not cascade: the HTML a rule produces is parked in a
`_FragmentStash` and replaced by an opaque token, so later rules can wrap it
but never rewrite inside it (a code span keeps the asterisks inside it).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from linemark.config.logging import get_logger
from linemark.markup.escapes import mask_escapes, unmask_escapes

logger = get_logger(__name__)

_STASH_OPEN: Final[str] = "\ue00e"
_STASH_CLOSE: Final[str] = "\ue00f"
_STASH_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    re.escape(_STASH_OPEN) + r"(\d+)" + re.escape(_STASH_CLOSE)
)


@dataclass(frozen=True)
class InlineRule:
    """A named, ordered inline substitution.

    Attributes:
        name (str): Stable rule name, used in logs.
        pattern (re.Pattern[str]): What the rule matches.
        replace (Callable[[re.Match[str]], str]): Builds the replacement for one match.
        protect (bool): Whether the replacement is shielded from later rules.
    """

    name: str
    pattern: re.Pattern[str]
    replace: Callable[[re.Match[str]], str]
    protect: bool = True


def _expand(template: str) -> Callable[[re.Match[str]], str]:
    def _replace(match: re.Match[str]) -> str:
        return match.expand(template)

    return _replace


def _heading(match: re.Match[str]) -> str:
    level: int = len(match.group(1))
    return f"<h{level}>{match.group(2)}</h{level}>"


INLINE_RULES: Final[tuple[InlineRule, ...]] = (
    InlineRule(
        name="comment",
        pattern=re.compile(r"\s*;;.*"),
        replace=lambda _match: "",
        protect=False,
    ),
    InlineRule(
        name="code",
        pattern=re.compile(r"`([^`]*)`"),
        replace=_expand(r"<code>\1</code>"),
    ),
    InlineRule(
        name="emphasis",
        pattern=re.compile(r"\*([^*]*)\*"),
        replace=_expand(r"<em>\1</em>"),
    ),
    InlineRule(
        name="link",
        pattern=re.compile(r"\[([^\]]+)\]\(([^)]+)\)"),
        replace=_expand(r'<a href="\2">\1</a>'),
    ),
    InlineRule(
        name="heading",
        pattern=re.compile(r"^\s*(#+)\s*(.*)$"),
        replace=_heading,
    ),
)


class _FragmentStash:
    """Holds converted fragments behind opaque tokens for one line."""

    def __init__(self) -> None:
        self._fragments: list[str] = []

    def protect(self, fragment: str) -> str:
        self._fragments.append(fragment)
        return f"{_STASH_OPEN}{len(self._fragments) - 1}{_STASH_CLOSE}"

    def restore(self, text: str) -> str:
        # Fragments may hold tokens of earlier fragments; unwrap until none remain.
        while _STASH_TOKEN_RE.search(text):
            text = _STASH_TOKEN_RE.sub(lambda m: self._fragments[int(m.group(1))], text)
        return text


def _apply_rule(rule: InlineRule, line: str, stash: _FragmentStash) -> str:
    if not rule.protect:
        return rule.pattern.sub(rule.replace, line)

    def _protected(match: re.Match[str]) -> str:
        return stash.protect(rule.replace(match))

    return rule.pattern.sub(_protected, line)


def convert_inline(line: str, rules: tuple[InlineRule, ...] = INLINE_RULES) -> str:
    """Convert inline markup in ``line`` to HTML.

    Args:
        line (str): One source line (without its line terminator).
        rules (tuple[InlineRule, ...]): Rule table to apply, in order.

    Returns:
        str: The converted line; unchanged when no rule applies.
    """
    stash = _FragmentStash()
    work: str = mask_escapes(line)
    for rule in rules:
        converted: str = _apply_rule(rule, work, stash)
        if converted != work:
            logger.trace("Inline rule %s applied to %r", rule.name, line)
        work = converted
    return unmask_escapes(stash.restore(work))
