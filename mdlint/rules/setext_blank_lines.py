"""Blank line checking in front of underline headings."""

from __future__ import annotations

from mdlint.document.lines import LineKind
from mdlint.rules.base import BaseRule, LintContext
from mdlint.rules.schemas import LineFix, LintIssue


class SetextBlankLinesRule(BaseRule):
    """Underline headings need blank lines above them.

    Section headings (``---``) get two by default so sections stand apart;
    the document title (``===``) usually sits at the top and gets one. The
    first heading of a document is exempt.
    """

    rule_id = "HM004"
    name = "setext-heading-blank-lines"
    description = "Setext headings should have the required number of blank lines before them"
    tags = ("headings", "blank_lines")
    fixable = True
    default_options = {"lines_before_h1": 1, "lines_before_h2": 2}
    option_minimums = {"lines_before_h1": 0, "lines_before_h2": 0}

    def check(self, context: LintContext) -> list[LintIssue]:
        """Count blank lines above every underline heading."""
        issues = []
        classified = context.classified

        for line in classified:
            if line.kind is not LineKind.SETEXT_TEXT:
                continue

            required = self.option(context, "lines_before_h1" if line.level == 1 else "lines_before_h2")

            blank_count = 0
            index = line.number - 2
            while index >= 0 and classified[index].is_blank:
                blank_count += 1
                index -= 1

            # Nothing but blank lines above: first heading of the document
            if index < 0:
                continue

            if blank_count < required:
                issues.append(self.issue(
                    context,
                    line.number,
                    f"Expected {required} blank line(s) before h{line.level}, found {blank_count}",
                    fix=LineFix(
                        line_number=line.number,
                        insert_before=("",) * (required - blank_count),
                    ),
                ))

        return issues
