"""Reference link definition placement checking.

A reference definition belongs at the end of the content block that holds
the first usage of its label, after all prose of that block. Content
blocks are the spans between headings of any level, so links used in the
introduction of a section (before its first subheading) are defined before
that subheading.

Thematic breaks do not end a block, but a definition directly in front of
one counts as being at the end: only prose up to the next break matters.

Correct::

    Some section
    ------------

    Intro text with a [link][intro-link].

    [intro-link]: https://example.com/intro

    ### Subsection

    Content with another [link][sub-link].

    [sub-link]: https://example.com/sub
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from mdlint.document.blocks import ContentBlock, segment_classified
from mdlint.document.lines import ClassifiedLine, LineKind, classify_lines
from mdlint.document.references import (
    ReferenceDefinition,
    find_definitions,
    find_usages,
    last_content_line,
)
from mdlint.rules.base import BaseRule, LintContext
from mdlint.rules.schemas import LintIssue

logger = logging.getLogger(__name__)


class ViolationKind(Enum):
    """Why a definition is misplaced."""

    CROSS_BLOCK = "cross_block"
    NOT_AT_END = "not_at_end"

    @property
    def reason(self) -> str:
        """Human-readable reason."""
        if self is ViolationKind.CROSS_BLOCK:
            return "should be in the same content block where it is used"
        return "should be at content block end"


@dataclass(frozen=True)
class Violation:
    """A misplaced reference definition."""

    line_number: int
    label: str
    kind: ViolationKind
    context: str = ""

    @property
    def detail(self) -> str:
        """Human-readable description of the violation."""
        return f'Reference link definition for "{self.label}" {self.kind.reason}'

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "line_number": self.line_number,
            "label": self.label,
            "kind": self.kind.value,
            "detail": self.detail,
            "context": self.context,
        }


def check(lines: Sequence[str], blocks: Sequence[ContentBlock] | None = None) -> list[Violation]:
    """Check the placement of every reference definition in a document.

    Args:
        lines: Document lines without line terminators.
        blocks: Content blocks of the document; segmented from ``lines``
            when omitted.

    Returns:
        Violations ordered by definition line.
    """
    return check_classified(classify_lines(lines), blocks)


def check_classified(
    classified: Sequence[ClassifiedLine],
    blocks: Sequence[ContentBlock] | None = None,
) -> list[Violation]:
    """Check reference definition placement over classified lines."""
    if blocks is None:
        blocks = segment_classified(classified)

    first_usage = index_first_usages(classified, blocks)
    violations: list[Violation] = []

    for block in blocks:
        definitions = find_definitions(classified, block)
        if not definitions:
            continue

        stretches = _stretches(classified, block)
        for definition in definitions:
            kind = _classify_definition(definition, first_usage, stretches)
            if kind is None:
                continue
            violations.append(Violation(
                line_number=definition.line_number,
                label=definition.label,
                kind=kind,
                context=classified[definition.line_number - 1].text.strip(),
            ))

    logger.debug("Found %d misplaced reference definitions", len(violations))
    return violations


def index_first_usages(
    classified: Sequence[ClassifiedLine],
    blocks: Sequence[ContentBlock],
) -> dict[str, ContentBlock]:
    """Map each normalized label to the block holding its first usage."""
    first_usage: dict[str, ContentBlock] = {}
    for block in blocks:
        for usage in find_usages(classified, block):
            first_usage.setdefault(usage.label, block)
    return first_usage


def _stretches(classified: Sequence[ClassifiedLine], block: ContentBlock) -> list[tuple[int, int, int]]:
    """Split a block at thematic breaks.

    Returns:
        List of (start line, end line, last content line) per stretch.
    """
    bounds = []
    start = block.start_line
    for line in classified[block.start_line - 1:max(block.end_line, 0)]:
        if line.kind is LineKind.THEMATIC_BREAK:
            bounds.append((start, line.number - 1))
            start = line.number + 1
    bounds.append((start, block.end_line))

    return [(start, end, last_content_line(classified, start, end)) for start, end in bounds]


def _classify_definition(
    definition: ReferenceDefinition,
    first_usage: dict[str, ContentBlock],
    stretches: list[tuple[int, int, int]],
) -> ViolationKind | None:
    used_in = first_usage.get(definition.key)
    if used_in is not None and used_in != definition.block:
        return ViolationKind.CROSS_BLOCK

    for start, end, last_content in stretches:
        if start <= definition.line_number <= end:
            if definition.line_number < last_content:
                return ViolationKind.NOT_AT_END
            break

    return None


class ReferencePlacementRule(BaseRule):
    """Reference link definitions must sit at the end of their content block."""

    rule_id = "HM003"
    name = "reference-link-section-placement"
    description = "Reference link definitions should appear at the end of their content block"
    tags = ("links", "references")

    def check(self, context: LintContext) -> list[LintIssue]:
        """Report misplaced definitions.

        No fix is offered: where a definition should move to is a judgment
        call.
        """
        return [
            self.issue(context, violation.line_number, violation.detail, excerpt=violation.context)
            for violation in check_classified(context.classified)
        ]
