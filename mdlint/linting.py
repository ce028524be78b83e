"""Markdown linting."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Mapping

from mdlint.config import RuleSettings, resolve_config
from mdlint.fixes import apply_fixes
from mdlint.rules.base import LintContext
from mdlint.rules.registry import RuleRegistry
from mdlint.rules.schemas import LintIssue, LintResult, LintSeverity

logger = logging.getLogger(__name__)

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def split_lines(content: str) -> list[str]:
    """Split document text into lines without terminators."""
    if not content:
        return []
    lines = LINE_BREAK_PATTERN.split(content)
    if content.endswith(("\n", "\r")):
        lines.pop()
    return lines


def join_lines(lines: list[str], original: str) -> str:
    """Join lines back, keeping the newline style and final newline of ``original``."""
    newline = "\r\n" if "\r\n" in original else "\n"
    text = newline.join(lines)
    if original.endswith(("\n", "\r")):
        text += newline
    return text


class MarkdownLinter:
    """Lint Markdown documents against the registered rules."""

    def __init__(self, config: Mapping[str, Any] | None = None, registry: RuleRegistry | None = None):
        """Initialize linter.

        Args:
            config: Rule configuration layered over the preset.
            registry: Rules to run; the built-in rules by default.

        Raises:
            ConfigError: If the configuration is invalid.
        """
        self.registry = registry or RuleRegistry()
        self.settings: dict[str, RuleSettings] = resolve_config(config, self.registry)

    def lint(self, content: str, path: str = "") -> LintResult:
        """Lint a document.

        Args:
            content: Document text.
            path: Path of the document (for reporting).

        Returns:
            LintResult with all issues found, in line order.
        """
        return self.lint_lines(split_lines(content), path)

    def lint_lines(self, lines: list[str], path: str = "") -> LintResult:
        """Lint a document given as lines."""
        result = LintResult(path=path)
        document = LintContext(lines=lines, path=path)

        for rule in self.registry.get_all_rules():
            settings = self.settings[rule.name]
            if not settings.enabled:
                continue

            try:
                result.issues.extend(rule.check(document.for_options(settings.options)))
            except Exception as e:
                logger.exception("Rule %s failed on %s", rule.name, path or "<string>")
                result.issues.append(LintIssue(
                    rule_id=rule.rule_id,
                    rule_name=rule.name,
                    line_number=1,
                    detail=f"Rule check failed: {e}",
                    severity=LintSeverity.ERROR,
                ))

        result.issues.sort(key=lambda i: (i.line_number, i.rule_id))
        logger.debug("Linted %s: %d issue(s)", path or "<string>", len(result.issues))
        return result

    def lint_file(self, path: Path | str) -> LintResult:
        """Lint a Markdown file.

        Args:
            path: Path to the file.

        Returns:
            LintResult with all issues found.
        """
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        return self.lint(content, str(path))

    def fix(self, content: str, path: str = "") -> tuple[str, LintResult]:
        """Fix what can be fixed automatically.

        Returns:
            Tuple of (fixed text, result of linting the fixed text).
        """
        lines = split_lines(content)
        before = self.lint_lines(lines, path)
        fixable = [issue for issue in before.issues if issue.fixable]
        if not fixable:
            return content, before

        fixed_lines = apply_fixes(lines, fixable)
        after = self.lint_lines(fixed_lines, path)
        after.fixed_count = max(len(before.issues) - len(after.issues), 0)
        return join_lines(fixed_lines, content), after

    def fix_file(self, path: Path | str) -> LintResult:
        """Fix a Markdown file in place.

        Returns:
            LintResult for the file after fixing.
        """
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        fixed, result = self.fix(content, str(path))
        if fixed != content:
            path.write_text(fixed, encoding="utf-8")
            logger.info("Fixed %d issue(s) in %s", result.fixed_count, path)
        return result

    def enable_rule(self, key: str) -> None:
        """Enable a rule by name or id."""
        self.settings[self.registry.require(key).name].enabled = True

    def disable_rule(self, key: str) -> None:
        """Disable a rule by name or id."""
        self.settings[self.registry.require(key).name].enabled = False

    def list_rules(self) -> list[dict[str, Any]]:
        """List all rules with their effective settings."""
        rules = []
        for rule in self.registry.get_all_rules():
            settings = self.settings[rule.name]
            info = rule.to_dict()
            info["enabled"] = settings.enabled
            info["options"] = settings.options
            rules.append(info)
        return rules
