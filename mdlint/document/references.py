"""Reference-style link definitions and usages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from mdlint.document.blocks import ContentBlock
from mdlint.document.lines import ClassifiedLine, LineKind

# [text][label], [label][] and [label]; inline links and definitions excluded
REFERENCE_PATTERN = re.compile(r"!?\[([^\[\]]+)\](?:\[([^\[\]]*)\]|(?![\[(:]))")
CODE_SPAN_PATTERN = re.compile(r"(`+).+?\1")

USAGE_KINDS = frozenset({LineKind.TEXT, LineKind.CONTINUATION})


def normalize_label(label: str) -> str:
    """Normalize a reference label for case-insensitive comparison."""
    return " ".join(label.split()).casefold()


@dataclass(frozen=True)
class ReferenceDefinition:
    """A ``[label]: target`` definition, possibly spanning several lines."""

    label: str  # As written in the document
    line_number: int
    end_line: int  # Last continuation line, or line_number
    block: ContentBlock

    @property
    def key(self) -> str:
        """Normalized label."""
        return normalize_label(self.label)


@dataclass(frozen=True)
class ReferenceUsage:
    """An occurrence of a label in reference link syntax."""

    label: str  # Normalized
    line_number: int
    block: ContentBlock


def _lines_in(classified: Sequence[ClassifiedLine], start_line: int, end_line: int) -> Sequence[ClassifiedLine]:
    return classified[max(start_line, 1) - 1:max(end_line, 0)]


def extract_labels(text: str) -> list[str]:
    """Extract the normalized labels referenced on one line of prose."""
    labels = []
    for match in REFERENCE_PATTERN.finditer(CODE_SPAN_PATTERN.sub("", text)):
        text_part, label_part = match.group(1), match.group(2)
        labels.append(normalize_label(label_part or text_part))
    return labels


def find_usages(classified: Sequence[ClassifiedLine], block: ContentBlock) -> list[ReferenceUsage]:
    """Find every reference usage inside a block, in line order.

    Fenced code, headings and definition lines never contribute usages.
    """
    usages = []
    for line in _lines_in(classified, block.start_line, block.end_line):
        if line.kind not in USAGE_KINDS:
            continue
        for label in extract_labels(line.text):
            usages.append(ReferenceUsage(label=label, line_number=line.number, block=block))
    return usages


def find_definitions(classified: Sequence[ClassifiedLine], block: ContentBlock) -> list[ReferenceDefinition]:
    """Find every reference definition starting inside a block.

    Each definition extends over the continuation lines directly below it.
    """
    definitions = []
    lines = _lines_in(classified, block.start_line, block.end_line)

    for index, line in enumerate(lines):
        if line.kind is not LineKind.DEFINITION:
            continue

        end_line = line.number
        for follower in lines[index + 1:]:
            if follower.kind is not LineKind.CONTINUATION:
                break
            end_line = follower.number

        definitions.append(ReferenceDefinition(
            label=line.label,
            line_number=line.number,
            end_line=end_line,
            block=block,
        ))

    return definitions


def last_content_line(classified: Sequence[ClassifiedLine], start_line: int, end_line: int) -> int:
    """Find the last line of prose in a line range.

    Blank lines, fenced code, thematic breaks and reference definitions
    (continuations included) are not prose.

    Returns:
        1-based line number, or 0 if the range holds no prose.
    """
    for line in reversed(_lines_in(classified, start_line, end_line)):
        if line.kind is LineKind.TEXT:
            return line.number
    return 0
