"""Content block segmentation for Markdown documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from mdlint.document.lines import ClassifiedLine, LineKind, classify_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentBlock:
    """Lines between one heading and the next heading of any level.

    Heading lines (both lines of an underline heading) are never part of a
    block. A block directly followed by another heading is empty and has
    ``end_line == start_line - 1``.
    """

    start_line: int  # 1-based, inclusive
    end_line: int  # 1-based, inclusive

    @property
    def is_empty(self) -> bool:
        """Check if the block holds no lines."""
        return self.end_line < self.start_line

    def contains(self, line_number: int) -> bool:
        """Check if a 1-based line number falls inside the block."""
        return self.start_line <= line_number <= self.end_line

    def line_numbers(self) -> range:
        """Line numbers covered by the block."""
        return range(self.start_line, self.end_line + 1)

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary."""
        return {"start_line": self.start_line, "end_line": self.end_line}


@dataclass(frozen=True)
class Heading:
    """A heading found in a document."""

    line_number: int  # Line of the heading text
    level: int
    text: str
    is_setext: bool

    @property
    def last_line(self) -> int:
        """Last line occupied by the heading construct."""
        return self.line_number + 1 if self.is_setext else self.line_number


@dataclass(frozen=True)
class Section:
    """A document section bounded by headings up to a given level."""

    level: int  # 0 for content before the first heading
    heading: str
    start_line: int  # Heading line, or 1 for pre-heading content
    end_line: int
    is_setext: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "heading": self.heading,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "is_setext": self.is_setext,
        }


def find_headings(classified: Sequence[ClassifiedLine]) -> list[Heading]:
    """Collect every heading from classified lines."""
    return [
        Heading(
            line_number=line.number,
            level=line.level,
            text=line.heading,
            is_setext=line.kind is LineKind.SETEXT_TEXT,
        )
        for line in classified
        if line.is_heading
    ]


def segment(lines: Sequence[str]) -> list[ContentBlock]:
    """Split a document into content blocks.

    Args:
        lines: Document lines without line terminators.

    Returns:
        Blocks in document order. Together with the heading lines they
        cover every line exactly once.
    """
    return segment_classified(classify_lines(lines))


def segment_classified(classified: Sequence[ClassifiedLine]) -> list[ContentBlock]:
    """Split already classified lines into content blocks."""
    blocks: list[ContentBlock] = []
    start_line = 1

    for heading in find_headings(classified):
        # A heading on line 1 has no pre-heading block in front of it
        if heading.line_number > 1:
            blocks.append(ContentBlock(start_line, heading.line_number - 1))
        start_line = heading.last_line + 1

    blocks.append(ContentBlock(start_line, len(classified)))

    logger.debug("Segmented %d lines into %d content blocks", len(classified), len(blocks))
    return blocks


def parse_sections(lines: Sequence[str], section_level: int = 2) -> list[Section]:
    """Split a document into sections at headings of ``section_level`` or above.

    Deeper headings stay inside the enclosing section. Content before the
    first qualifying heading forms a level-0 section.

    Args:
        lines: Document lines without line terminators.
        section_level: Deepest heading level that starts a new section.

    Returns:
        Sections in document order.
    """
    sections: list[Section] = []
    current: Heading | None = None

    for heading in find_headings(classify_lines(lines)):
        if heading.level > section_level:
            continue

        if current is not None:
            sections.append(_section_for(current, heading.line_number - 1))
        elif heading.line_number > 1:
            sections.append(Section(level=0, heading="", start_line=1, end_line=heading.line_number - 1))

        current = heading

    if current is not None:
        sections.append(_section_for(current, len(lines)))
    elif lines:
        sections.append(Section(level=0, heading="", start_line=1, end_line=len(lines)))

    return sections


def _section_for(heading: Heading, end_line: int) -> Section:
    return Section(
        level=heading.level,
        heading=heading.text,
        start_line=heading.line_number,
        end_line=end_line,
        is_setext=heading.is_setext,
    )
