# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : src/linemark/markup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""LineMark markup language: line classification, conversion and templating.

The functions in this package are pure; the pipeline steps in
`linemark.pipeline` thread a document through them.
"""

from __future__ import annotations

from linemark.markup.inline import INLINE_RULES, InlineRule, convert_inline
from linemark.markup.markers import NON_PARAGRAPH_MARKERS, LineMarker, is_paragraph_line
from linemark.markup.paragraphs import add_paragraph_tags
from linemark.markup.template import (
    find_placeholders,
    get_file_dir,
    merge_with_template,
    resolve_template_path,
)
from linemark.markup.variables import Variable, parse_variable_line

__all__: list[str] = [
    "INLINE_RULES",
    "InlineRule",
    "LineMarker",
    "NON_PARAGRAPH_MARKERS",
    "Variable",
    "add_paragraph_tags",
    "convert_inline",
    "find_placeholders",
    "get_file_dir",
    "is_paragraph_line",
    "merge_with_template",
    "parse_variable_line",
    "resolve_template_path",
]
