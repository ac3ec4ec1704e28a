# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : tests/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end
