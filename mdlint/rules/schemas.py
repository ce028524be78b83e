"""Lint result data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class LintSeverity(Enum):
    """Severity of lint issues."""

    ERROR = "error"  # Style violation
    WARNING = "warning"  # Heuristic, may be a false positive


@dataclass(frozen=True)
class LineFix:
    """An edit that resolves a lint issue.

    Either replaces the line at ``line_number`` or inserts lines in front
    of it.
    """

    line_number: int
    replacement: str | None = None
    insert_before: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "line_number": self.line_number,
            "replacement": self.replacement,
            "insert_before": list(self.insert_before),
        }


@dataclass
class LintIssue:
    """A single lint issue."""

    rule_id: str
    rule_name: str
    line_number: int
    detail: str
    context: str = ""  # Stripped content of the offending line
    severity: LintSeverity = LintSeverity.ERROR
    fix: LineFix | None = None

    @property
    def fixable(self) -> bool:
        """Check if the issue carries an automatic fix."""
        return self.fix is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "rule_id": self.rule_id,
            "rule_name": self.rule_name,
            "line_number": self.line_number,
            "detail": self.detail,
            "context": self.context,
            "severity": self.severity.value,
            "fix": self.fix.to_dict() if self.fix else None,
        }

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.line_number}: {self.rule_id}/{self.rule_name} {self.detail}"


@dataclass
class LintResult:
    """Result of linting one document."""

    path: str
    issues: list[LintIssue] = field(default_factory=list)
    fixed_count: int = 0

    @property
    def error_count(self) -> int:
        """Count of errors."""
        return sum(1 for i in self.issues if i.severity == LintSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        """Count of warnings."""
        return sum(1 for i in self.issues if i.severity == LintSeverity.WARNING)

    @property
    def fixable_count(self) -> int:
        """Count of issues with an automatic fix."""
        return sum(1 for i in self.issues if i.fixable)

    @property
    def passed(self) -> bool:
        """Check if linting passed (no issues at all)."""
        return not self.issues

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "path": self.path,
            "passed": self.passed,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "fixed_count": self.fixed_count,
            "issues": [i.to_dict() for i in self.issues],
        }
