"""Rule registry for managing available rules."""

from __future__ import annotations

from mdlint.errors import ConfigError
from mdlint.rules.base import BaseRule
from mdlint.rules.fence_length import FenceLengthRule
from mdlint.rules.heading_case import HeadingCaseRule
from mdlint.rules.list_marker_space import ListMarkerSpaceRule
from mdlint.rules.reference_placement import ReferencePlacementRule
from mdlint.rules.setext_blank_lines import SetextBlankLinesRule


class RuleRegistry:
    """Registry for lint rules, keyed by rule name."""

    def __init__(self, register_defaults: bool = True):
        """Initialize, optionally with the built-in rules."""
        self._rules: dict[str, BaseRule] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in rules."""
        self.register(ListMarkerSpaceRule())
        self.register(FenceLengthRule())
        self.register(ReferencePlacementRule())
        self.register(SetextBlankLinesRule())
        self.register(HeadingCaseRule())

    def register(self, rule: BaseRule) -> None:
        """Register a rule."""
        self._rules[rule.name] = rule

    def get(self, key: str) -> BaseRule | None:
        """Get a rule by name or id."""
        if key in self._rules:
            return self._rules[key]
        for rule in self._rules.values():
            if rule.matches(key):
                return rule
        return None

    def require(self, key: str) -> BaseRule:
        """Get a rule by name or id.

        Raises:
            ConfigError: If no such rule is registered.
        """
        rule = self.get(key)
        if rule is None:
            raise ConfigError(f"Unknown rule: {key}")
        return rule

    def list_rules(self) -> list[str]:
        """List all registered rule names."""
        return list(self._rules.keys())

    def get_all_rules(self) -> list[BaseRule]:
        """Get all rules in registration order."""
        return list(self._rules.values())

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._rules)
