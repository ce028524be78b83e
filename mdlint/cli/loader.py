"""Linter construction shared by CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from mdlint.config import find_config, load_config
from mdlint.errors import ConfigError
from mdlint.linting import MarkdownLinter

logger = logging.getLogger(__name__)


def build_linter(console: Console, config_path: Path | None = None) -> MarkdownLinter:
    """Build a linter from an explicit or discovered config file.

    Exits with status 2 if the configuration is invalid.
    """
    if config_path is None:
        config_path = find_config(Path.cwd())

    try:
        config = load_config(config_path) if config_path else {}
        if config_path:
            logger.info("Using config %s", config_path)
        return MarkdownLinter(config)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(2)
