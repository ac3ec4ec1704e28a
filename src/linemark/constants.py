# topmark:header:start
#
#   project      : LineMark
#   file         : constants.py
#   file_relpath : src/linemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""LineMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    LINEMARK_VERSION: str = get_version("linemark")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    LINEMARK_VERSION = "0.0.0"

# Project configuration files, in same-directory merge order.
PYPROJECT_TOML_NAME: str = "pyproject.toml"
LINEMARK_TOML_NAME: str = "linemark.toml"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "LINEMARK_LOG_LEVEL"

# Reserved variable names.
TEMPLATE_VARIABLE: str = "template"
CONTENT_VARIABLE: str = "content"

# Paragraph markers emitted by the paragraph tagger.
PARAGRAPH_OPEN: str = "<p>"
PARAGRAPH_CLOSE: str = "</p>"

# Sentinel for a line that contributes nothing to content.
EMPTY_LINE: str = ""

# Source/output sentinel for the standard streams.
STDIO_SENTINEL: str = "-"

VALUE_NOT_SET: str = "<not set>"
