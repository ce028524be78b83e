"""Unordered list item spacing checking."""

from __future__ import annotations

import re

from mdlint.document.lines import LineKind
from mdlint.rules.base import BaseRule, LintContext
from mdlint.rules.schemas import LineFix, LintIssue

LIST_ITEM_PATTERN = re.compile(r"^(\s*)([-*+])(\s+)(.*)$")


class ListMarkerSpaceRule(BaseRule):
    """Dash list items use the `` -  `` layout.

    One space before the marker at the top level, ``nested_indent`` more
    per nesting level, and ``post_marker_spaces`` after the marker, so item
    text starts on a column that nested content can align with.
    """

    rule_id = "HM001"
    name = "list-item-marker-space"
    description = "List items should use ' -  ' format (one space before, two after)"
    tags = ("bullet", "ul", "whitespace")
    fixable = True
    default_options = {"nested_indent": 4, "post_marker_spaces": 2}
    option_minimums = {"nested_indent": 1, "post_marker_spaces": 1}

    def check(self, context: LintContext) -> list[LintIssue]:
        """Check leading and post-marker spacing of dash list items."""
        nested_indent = self.option(context, "nested_indent")
        post_marker_spaces = self.option(context, "post_marker_spaces")
        issues = []

        for line in context.classified:
            # Fenced code, breaks such as "- - -" and underlines are not lists
            if line.kind is not LineKind.TEXT:
                continue

            match = LIST_ITEM_PATTERN.match(line.text)
            if match is None or match.group(2) != "-":
                continue

            leading = len(match.group(1))
            after = len(match.group(3))
            content = match.group(4)

            if leading < 1 or (leading - 1) % nested_indent != 0:
                expected = self._nearest_indent(leading, nested_indent)
                issues.append(self.issue(
                    context,
                    line.number,
                    f"Expected {expected} leading space(s), found {leading}",
                    fix=LineFix(
                        line_number=line.number,
                        replacement=" " * expected + "-" + " " * post_marker_spaces + content,
                    ),
                ))
                continue

            if after != post_marker_spaces:
                issues.append(self.issue(
                    context,
                    line.number,
                    f"Expected {post_marker_spaces} space(s) after marker, found {after}",
                    fix=LineFix(
                        line_number=line.number,
                        replacement=" " * leading + "-" + " " * post_marker_spaces + content,
                    ),
                ))

        return issues

    def _nearest_indent(self, leading: int, nested_indent: int) -> int:
        """Closest valid leading indentation to ``leading``."""
        if leading < 1:
            return 1
        level = int((leading - 1) / nested_indent + 0.5)
        return 1 + level * nested_indent
