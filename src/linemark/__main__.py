# topmark:header:start
#
#   project      : LineMark
#   file         : __main__.py
#   file_relpath : src/linemark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Module entry point for running LineMark via ``python -m linemark``.

Delegates to :func:`linemark.cli.main.cli`, the same entry point as the
``linemark`` console script.

Examples:
    Convert a document next to its template::

        python -m linemark convert docs/index.lm
"""

from __future__ import annotations

from linemark.cli.main import cli

if __name__ == "__main__":
    cli()
