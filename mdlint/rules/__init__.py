"""Markdown lint rules."""

from mdlint.rules.base import BaseRule, LintContext
from mdlint.rules.fence_length import FenceLengthRule
from mdlint.rules.heading_case import HeadingCaseRule
from mdlint.rules.list_marker_space import ListMarkerSpaceRule
from mdlint.rules.reference_placement import (
    ReferencePlacementRule,
    Violation,
    ViolationKind,
    check,
)
from mdlint.rules.registry import RuleRegistry
from mdlint.rules.schemas import LineFix, LintIssue, LintResult, LintSeverity
from mdlint.rules.setext_blank_lines import SetextBlankLinesRule

__all__ = [
    "BaseRule",
    "FenceLengthRule",
    "HeadingCaseRule",
    "LineFix",
    "LintContext",
    "LintIssue",
    "LintResult",
    "LintSeverity",
    "ListMarkerSpaceRule",
    "ReferencePlacementRule",
    "RuleRegistry",
    "SetextBlankLinesRule",
    "Violation",
    "ViolationKind",
    "check",
]
