"""Line classification for Markdown documents.

Every structural question the rules ask (is this line a heading, inside a
fenced code block, a reference definition, ...) is answered by one forward
pass that tags each line with a :class:`LineKind`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence

FENCE_PATTERN = re.compile(r"^(\s*)(`{3,}|~{3,})(.*)$")
ATX_HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.*)$")
ATX_CLOSING_PATTERN = re.compile(r"(?:^|\s+)#+\s*$")
SETEXT_UNDERLINE_PATTERN = re.compile(r"^(={3,}|-{3,})\s*$")
THEMATIC_BREAK_PATTERN = re.compile(r"^\s*([-*_])(?: ?\1){2,}\s*$")
DEFINITION_PATTERN = re.compile(r"^\s*\[([^\]]+)\]:\s+\S")


class LineKind(Enum):
    """Structural role of a single line."""

    BLANK = "blank"
    FENCE = "fence"  # Opening or closing fence delimiter
    CODE = "code"  # Inside a fenced code block
    ATX_HEADING = "atx_heading"
    SETEXT_TEXT = "setext_text"
    SETEXT_UNDERLINE = "setext_underline"
    THEMATIC_BREAK = "thematic_break"
    DEFINITION = "definition"  # First line of a reference definition
    CONTINUATION = "continuation"  # Follow-up line of a reference definition
    TEXT = "text"


HEADING_KINDS = frozenset({LineKind.ATX_HEADING, LineKind.SETEXT_TEXT})
FENCED_KINDS = frozenset({LineKind.FENCE, LineKind.CODE})
UNDERLINABLE_KINDS = frozenset({
    LineKind.TEXT,
    LineKind.DEFINITION,
    LineKind.CONTINUATION,
    LineKind.THEMATIC_BREAK,
})


@dataclass(frozen=True)
class FenceRun:
    """State of the fenced code block scan.

    The scan threads one of these through the document; ``advance`` never
    mutates, it returns the state for the next line.
    """

    active: bool = False
    character: str = ""
    length: int = 0
    indent: int = 0

    def advance(self, line: str) -> tuple[FenceRun, bool]:
        """Feed one line to the state machine.

        Returns:
            Tuple of (state after the line, whether the line is a fence
            delimiter that opened or closed a block).
        """
        match = FENCE_PATTERN.match(line)
        if match is None:
            return self, False

        indent = len(match.group(1))
        fence = match.group(2)

        if not self.active:
            return FenceRun(active=True, character=fence[0], length=len(fence), indent=indent), True

        if self.closes(fence, indent):
            return FenceRun(), True

        return self, False

    def closes(self, fence: str, indent: int) -> bool:
        """Check if a fence run of ``fence`` at ``indent`` closes this block."""
        return (
            self.active
            and fence[0] == self.character
            and len(fence) >= self.length
            and indent >= self.indent
        )


@dataclass(frozen=True)
class ClassifiedLine:
    """A document line with its structural role."""

    number: int  # 1-based
    text: str
    kind: LineKind
    level: int = 0  # Heading level, 0 for non-headings
    heading: str = ""  # Heading text without markers
    label: str = ""  # Reference label for definition lines

    @property
    def is_heading(self) -> bool:
        """Check if this line carries heading text."""
        return self.kind in HEADING_KINDS

    @property
    def is_fenced(self) -> bool:
        """Check if this line belongs to a fenced code block."""
        return self.kind in FENCED_KINDS

    @property
    def is_blank(self) -> bool:
        return self.kind is LineKind.BLANK


def strip_closing_sequence(text: str) -> str:
    """Remove an optional closing ``#`` sequence from ATX heading text."""
    return ATX_CLOSING_PATTERN.sub("", text).strip()


def classify_lines(lines: Sequence[str]) -> list[ClassifiedLine]:
    """Classify every line of a document.

    Underline headings are resolved when the underline is reached: the
    previous line is re-tagged as heading text. A ``---`` below anything but
    plain text is a thematic break.

    Args:
        lines: Document lines without line terminators.

    Returns:
        One ClassifiedLine per input line, in order.
    """
    classified: list[ClassifiedLine] = []
    fence = FenceRun()

    for number, text in enumerate(lines, 1):
        inside = fence.active
        fence, is_delimiter = fence.advance(text)

        if is_delimiter:
            classified.append(ClassifiedLine(number, text, LineKind.FENCE))
            continue

        if inside:
            classified.append(ClassifiedLine(number, text, LineKind.CODE))
            continue

        previous = classified[-1] if classified else None

        underline = SETEXT_UNDERLINE_PATTERN.match(text)
        if underline and _can_underline(previous, underline.group(1)[0]):
            level = 1 if underline.group(1)[0] == "=" else 2
            classified[-1] = replace(
                previous,
                kind=LineKind.SETEXT_TEXT,
                level=level,
                heading=previous.text.strip(),
                label="",
            )
            classified.append(ClassifiedLine(number, text, LineKind.SETEXT_UNDERLINE, level=level))
            continue

        classified.append(_classify_plain(number, text, previous))

    return classified


def _classify_plain(number: int, text: str, previous: ClassifiedLine | None) -> ClassifiedLine:
    """Classify a line outside fenced code that is not an underline."""
    if not text.strip():
        return ClassifiedLine(number, text, LineKind.BLANK)

    atx = ATX_HEADING_PATTERN.match(text)
    if atx:
        return ClassifiedLine(
            number,
            text,
            LineKind.ATX_HEADING,
            level=len(atx.group(1)),
            heading=strip_closing_sequence(atx.group(2)),
        )

    if THEMATIC_BREAK_PATTERN.match(text):
        return ClassifiedLine(number, text, LineKind.THEMATIC_BREAK)

    definition = DEFINITION_PATTERN.match(text)
    if definition:
        return ClassifiedLine(number, text, LineKind.DEFINITION, label=definition.group(1))

    if previous is not None and previous.kind in (LineKind.DEFINITION, LineKind.CONTINUATION):
        return ClassifiedLine(number, text, LineKind.CONTINUATION)

    return ClassifiedLine(number, text, LineKind.TEXT)


def _can_underline(previous: ClassifiedLine | None, marker: str) -> bool:
    """Check if ``previous`` becomes heading text under a ``marker`` underline.

    ``===`` can never be a thematic break, so it underlines any non-blank
    line that is not already part of a heading. ``---`` underlines plain
    text only; anywhere else it is a break.
    """
    if previous is None:
        return False
    if marker == "=":
        return previous.kind in UNDERLINABLE_KINDS
    return previous.kind is LineKind.TEXT
