# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : src/linemark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Core, dependency-light building blocks shared across LineMark layers."""

from __future__ import annotations
