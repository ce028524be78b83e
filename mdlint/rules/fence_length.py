"""Fenced code block delimiter checking."""

from __future__ import annotations

from mdlint.document.lines import FENCE_PATTERN, FenceRun
from mdlint.rules.base import BaseRule, LintContext
from mdlint.rules.schemas import LineFix, LintIssue


class FenceLengthRule(BaseRule):
    """Fenced code blocks use tildes, exactly ``fence_length`` of them.

    Four tildes leave room for triple-tilde examples inside documentation
    about Markdown itself.
    """

    rule_id = "HM002"
    name = "fenced-code-fence-length"
    description = "Fenced code blocks should use the specified fence length"
    tags = ("code", "fence")
    fixable = True
    default_options = {"fence_length": 4}
    option_minimums = {"fence_length": 3}

    def check(self, context: LintContext) -> list[LintIssue]:
        """Check opening and closing fence delimiters."""
        fence_length = self.option(context, "fence_length")
        issues = []
        state = FenceRun()

        for number, line in enumerate(context.lines, 1):
            opening = not state.active
            state, is_delimiter = state.advance(line)
            if not is_delimiter:
                continue

            match = FENCE_PATTERN.match(line)
            indent, fence, info = match.group(1), match.group(2), match.group(3)
            detail = self._describe(fence, fence_length)
            if detail is None:
                continue

            replacement = indent + "~" * fence_length + (info if opening else "")
            issues.append(self.issue(
                context,
                number,
                detail,
                fix=LineFix(line_number=number, replacement=replacement),
            ))

        return issues

    def _describe(self, fence: str, fence_length: int) -> str | None:
        """Describe what is wrong with a fence run, or None if it is fine."""
        is_backtick = fence[0] == "`"
        wrong_length = len(fence) != fence_length

        if is_backtick and wrong_length:
            return f"Expected {fence_length} tildes, found {len(fence)} backticks"
        if is_backtick:
            return "Expected tildes, found backticks"
        if wrong_length:
            return f"Expected {fence_length} tildes, found {len(fence)}"
        return None
