# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : src/linemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""LineMark package.

LineMark converts a small, line-oriented markup language into HTML and merges
the result into a user-supplied HTML template. It exposes both a CLI and a
small typed API (see `linemark.api`).
"""

from __future__ import annotations
