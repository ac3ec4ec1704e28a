# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : src/linemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Configuration layer for LineMark.

Re-exports the configuration model so callers can write
``from linemark.config import Config, MutableConfig``.
"""

from __future__ import annotations

from linemark.config.model import Config, MutableConfig

__all__: list[str] = [
    "Config",
    "MutableConfig",
]
