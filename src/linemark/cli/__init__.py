# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : src/linemark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Click-based command line interface for LineMark."""
