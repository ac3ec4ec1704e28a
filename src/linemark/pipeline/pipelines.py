# topmark:header:start
#
#   project      : LineMark
#   file         : pipelines.py
#   file_relpath : src/linemark/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Named pipeline variants for LineMark (immutable, typed step sequences).

Overview
--------
- ``BODY``: tag → scan → filter (document body only, no template)
- ``CONVERT``: BODY + template merge

Notes:
* Pipelines are immutable (Final[tuple[Step, ...]]) and steps are
  instantiated objects (not functions).
* Steps keep no per-run state, so one instance may serve many runs.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from linemark.pipeline.contracts import Step

from .steps import filtering, scanner, tagger, templater

# Produce the document body without touching a template:
BODY_PIPELINE: Final[tuple[Step, ...]] = (
    tagger.TaggerStep(),  # Wrap paragraph runs in <p>...</p>
    scanner.ScannerStep(),  # Record variables, convert inline markup
    filtering.FilterStep(),  # Drop empty lines, join the body
)

# Full conversion:
CONVERT_PIPELINE: Final[tuple[Step, ...]] = BODY_PIPELINE + (
    templater.TemplaterStep(),  # Load the template and merge
)


class Pipeline(tuple[Step, ...], Enum):
    """Available conversion pipelines, mapped to their step sequences."""

    CONVERT = CONVERT_PIPELINE
    BODY = BODY_PIPELINE

    @property
    def steps(self) -> tuple[Step, ...]:
        """Return the instantiated, ordered step sequence for this pipeline."""
        return self.value
