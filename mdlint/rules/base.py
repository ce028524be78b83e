"""Base rule interface for Markdown linting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from mdlint.document.lines import ClassifiedLine, classify_lines
from mdlint.errors import ConfigError
from mdlint.rules.schemas import LineFix, LintIssue, LintSeverity


@dataclass
class LintContext:
    """Context handed to a rule for one document.

    ``classified`` is computed once on construction; contexts derived with
    :meth:`for_options` share it.
    """

    lines: list[str]
    path: str = ""
    options: dict[str, Any] = field(default_factory=dict)
    classified: list[ClassifiedLine] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.classified is None:
            self.classified = classify_lines(self.lines)

    def for_options(self, options: dict[str, Any]) -> LintContext:
        """Same document, with another rule's options."""
        return replace(self, options=options)

    def line(self, line_number: int) -> str:
        """Get a line by 1-based number."""
        return self.lines[line_number - 1]


class BaseRule(ABC):
    """Abstract base class for lint rules."""

    rule_id: str = "HM000"
    name: str = "base"
    description: str = "Base rule"
    tags: tuple[str, ...] = ()
    severity: LintSeverity = LintSeverity.ERROR
    fixable: bool = False
    default_options: Mapping[str, Any] = {}
    option_minimums: Mapping[str, int] = {}

    @abstractmethod
    def check(self, context: LintContext) -> list[LintIssue]:
        """Check a document for issues.

        Args:
            context: Lint context with lines and resolved options.

        Returns:
            List of lint issues, in line order.
        """

    def resolve_options(self, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Merge user options over the rule defaults.

        Raises:
            ConfigError: If an option is unknown or has the wrong type.
        """
        resolved = dict(self.default_options)
        for key, value in (options or {}).items():
            if key not in self.default_options:
                raise ConfigError(f"Unknown option '{key}' for rule {self.name}")

            default = self.default_options[key]
            # bool is an int subclass; keep the two apart
            if isinstance(default, bool) or isinstance(value, bool):
                valid = isinstance(default, bool) and isinstance(value, bool)
            elif isinstance(default, (list, tuple)):
                valid = isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)
            else:
                valid = isinstance(value, type(default))

            if not valid:
                raise ConfigError(
                    f"Option '{key}' for rule {self.name} must be of type {type(default).__name__}"
                )
            minimum = self.option_minimums.get(key)
            if minimum is not None and value < minimum:
                raise ConfigError(f"Option '{key}' for rule {self.name} must be at least {minimum}")

            resolved[key] = value
        return resolved

    def option(self, context: LintContext, key: str) -> Any:
        """Get an option from the context, falling back to the rule default."""
        return context.options.get(key, self.default_options[key])

    def matches(self, key: str) -> bool:
        """Check if ``key`` names this rule (by name or id)."""
        return key == self.name or key.upper() == self.rule_id

    def issue(
        self,
        context: LintContext,
        line_number: int,
        detail: str,
        fix: LineFix | None = None,
        excerpt: str | None = None,
    ) -> LintIssue:
        """Build an issue for a line of the document."""
        return LintIssue(
            rule_id=self.rule_id,
            rule_name=self.name,
            line_number=line_number,
            detail=detail,
            context=excerpt if excerpt is not None else context.line(line_number).strip(),
            severity=self.severity,
            fix=fix,
        )

    def to_dict(self) -> dict[str, Any]:
        """Describe the rule."""
        return {
            "rule_id": self.rule_id,
            "name": self.name,
            "description": self.description,
            "tags": list(self.tags),
            "severity": self.severity.value,
            "fixable": self.fixable,
            "default_options": dict(self.default_options),
        }
