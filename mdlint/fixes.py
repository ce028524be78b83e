"""Applying automatic fixes to document lines."""

from __future__ import annotations

from typing import Iterable, Sequence

from mdlint.rules.schemas import LineFix, LintIssue


def apply_fixes(lines: Sequence[str], issues: Iterable[LintIssue]) -> list[str]:
    """Apply the fixes carried by ``issues`` to a copy of ``lines``.

    Fixes are applied bottom-up so earlier line numbers stay valid. Only the
    first replacement per line is applied; on the same line a replacement
    goes before an insertion.

    Returns:
        The fixed lines.
    """
    fixes = [issue.fix for issue in issues if issue.fix is not None]
    fixed = list(lines)
    replaced: set[int] = set()

    for fix in sorted(fixes, key=_fix_order, reverse=True):
        index = fix.line_number - 1
        if not 0 <= index < len(fixed):
            continue

        if fix.replacement is not None:
            if fix.line_number in replaced:
                continue
            fixed[index] = fix.replacement
            replaced.add(fix.line_number)

        if fix.insert_before:
            fixed[index:index] = list(fix.insert_before)

    return fixed


def _fix_order(fix: LineFix) -> tuple[int, int]:
    return fix.line_number, 1 if fix.replacement is not None else 0
