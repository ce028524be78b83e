"""Markdown document structure analysis."""

from mdlint.document.blocks import (
    ContentBlock,
    Heading,
    Section,
    find_headings,
    parse_sections,
    segment,
    segment_classified,
)
from mdlint.document.lines import ClassifiedLine, FenceRun, LineKind, classify_lines
from mdlint.document.references import (
    ReferenceDefinition,
    ReferenceUsage,
    find_definitions,
    find_usages,
    last_content_line,
    normalize_label,
)

__all__ = [
    "ClassifiedLine",
    "ContentBlock",
    "FenceRun",
    "Heading",
    "LineKind",
    "ReferenceDefinition",
    "ReferenceUsage",
    "Section",
    "classify_lines",
    "find_definitions",
    "find_headings",
    "find_usages",
    "last_content_line",
    "normalize_label",
    "parse_sections",
    "segment",
    "segment_classified",
]
