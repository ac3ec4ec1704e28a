# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : src/linemark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""LineMark conversion pipeline package.

This package turns a list of source lines into the final HTML document. It
contains:

- the per-run `ConversionContext` shared by all steps,
- the step implementations (tagger, scanner, filter, templater),
- the named pipelines and the sequential runner.

The public entry points are [`linemark.pipeline.pipelines`][linemark.pipeline.pipelines]
and [`linemark.pipeline.runner`][linemark.pipeline.runner].
"""
