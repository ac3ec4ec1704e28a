# topmark:header:start
#
#   project      : LineMark
#   file         : template.py
#   file_relpath : src/linemark/markup/template.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Template placeholder merging and template path resolution.

Templates are plain text holding ``{{name}}`` placeholders (case-sensitive,
no whitespace inside the braces). Merging replaces every placeholder whose
name is a known variable; anything else is left verbatim.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from linemark.config.logging import get_logger
from linemark.constants import TEMPLATE_VARIABLE
from linemark.core.errors import InvalidPathError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)

PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"\{\{(\w+)\}\}")

# Captures the directory part (with its trailing "/") of "dir/file", or
# nothing for a bare "file".
_FILE_PATH_RE: Final[re.Pattern[str]] = re.compile(r"^(?:(.*/)[^/]+|[^/]+)$")


def placeholder(name: str) -> str:
    """Return the placeholder token for ``name`` (``{{name}}``)."""
    return "{{" + name + "}}"


def find_placeholders(template: str) -> list[str]:
    """Return placeholder names in ``template``, in order of first appearance."""
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_RE.finditer(template):
        seen.setdefault(match.group(1), None)
    return list(seen)


def merge_with_template(template: str, variables: Mapping[str, str]) -> str:
    """Substitute ``{{key}}`` placeholders in ``template``.

    The ``template`` key is never merged. All replacements happen in a single
    scan of the template, so inserted values are not searched for further
    placeholders.

    Args:
        template (str): Template text.
        variables (Mapping[str, str]): Values by name (normally the document
            variables plus ``content``).

    Returns:
        str: The merged text; unknown placeholders are left as they were.
    """
    values: dict[str, str] = {k: v for k, v in variables.items() if k != TEMPLATE_VARIABLE}
    if not values:
        return template

    # Longest first so no key is shadowed by a shorter alternative.
    keys: list[str] = sorted(values, key=len, reverse=True)
    pattern: re.Pattern[str] = re.compile("|".join(re.escape(placeholder(k)) for k in keys))

    def _lookup(match: re.Match[str]) -> str:
        return values[match.group(0)[2:-2]]

    merged: str = pattern.sub(_lookup, template)
    logger.debug("Merged %d variable(s) into template", len(values))
    return merged


def get_file_dir(filepath: str) -> str:
    """Return the directory part of ``filepath``, including the trailing ``/``.

    Examples:
        ``"docs/a/page.lm"`` → ``"docs/a/"``; ``"page.lm"`` → ``""``.

    Args:
        filepath (str): A file path using ``/`` separators.

    Returns:
        str: The directory prefix, or ``""`` when there is none.

    Raises:
        InvalidPathError: If ``filepath`` is empty or ends with a separator.
    """
    match: re.Match[str] | None = _FILE_PATH_RE.match(filepath)
    if match is None:
        raise InvalidPathError(filepath)
    return match.group(1) or ""


def resolve_template_path(source_path: str | None, template_name: str) -> str:
    """Return the template path for a document.

    The template name is taken relative to the source document's directory;
    without a source path (stdin, in-memory lines) it is used as given.
    """
    directory: str = get_file_dir(source_path) if source_path is not None else ""
    return directory + template_name
