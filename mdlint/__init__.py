"""Markdown style linting with content-block aware rules."""

from mdlint.config import PRESET, load_config
from mdlint.errors import ConfigError, MdlintError
from mdlint.linting import MarkdownLinter
from mdlint.rules.schemas import LintIssue, LintResult, LintSeverity

__version__ = "0.3.0"

__all__ = [
    "ConfigError",
    "LintIssue",
    "LintResult",
    "LintSeverity",
    "MarkdownLinter",
    "MdlintError",
    "PRESET",
    "load_config",
]
