# topmark:header:start
#
#   project      : LineMark
#   file         : keywords.py
#   file_relpath : src/linemark/markup/keywords.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Keyword expansion for variable values.

A keyword is a call-like token inside a declared value, e.g.
``@date: Updated TIME(%Y-%m-%d)``. Expansion runs on the parsed value only,
after the declaration grammar has matched, and replaces each token in place.

Supported keywords:
    ``TIME(<format>)``: current local time rendered with ``strftime(<format>)``.

The clock is injectable so callers (and tests) can pin "now".
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Final

from linemark.config.logging import get_logger

Clock = Callable[[], datetime]

logger = get_logger(__name__)


def local_now() -> datetime:
    """Return the current time as a timezone-aware local datetime."""
    return datetime.now().astimezone()


@dataclass(frozen=True)
class Keyword:
    """A keyword token and the function that expands one occurrence of it.

    Attributes:
        name (str): Keyword name as written in documents (e.g. ``"TIME"``).
        pattern (re.Pattern[str]): Pattern matching one token; group 1 is the argument.
        expand (Callable[[str, datetime], str]): Maps ``(argument, now)`` to the
            replacement text.
    """

    name: str
    pattern: re.Pattern[str]
    expand: Callable[[str, datetime], str]


def _expand_time(time_format: str, now: datetime) -> str:
    return now.strftime(time_format)


KEYWORDS: Final[tuple[Keyword, ...]] = (
    Keyword(name="TIME", pattern=re.compile(r"TIME\(([^)]*)\)"), expand=_expand_time),
)


def expand_keywords(value: str, *, clock: Clock = local_now) -> str:
    """Return ``value`` with every keyword token replaced by its expansion.

    The clock is read at most once per call so every token in one value sees
    the same instant.

    Args:
        value (str): A parsed variable value.
        clock (Clock): Source of the current time.

    Returns:
        str: The expanded value (unchanged when it holds no keyword).
    """
    now: datetime | None = None
    for keyword in KEYWORDS:
        if not keyword.pattern.search(value):
            continue
        if now is None:
            now = clock()

        def _sub(match: re.Match[str], kw: Keyword = keyword, at: datetime = now) -> str:
            return kw.expand(match.group(1), at)

        value = keyword.pattern.sub(_sub, value)
        logger.debug("Expanded keyword %s -> %r", keyword.name, value)
    return value
