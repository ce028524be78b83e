"""Rule listing CLI command."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdlint.cli.loader import build_linter

console = Console()


@click.command("rules")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Config file (default: nearest .mdlint.yaml)")
def rules(config_path: Path | None) -> None:
    """List available rules and their effective settings."""
    linter = build_linter(console, config_path)

    table = Table(title="Lint Rules")
    table.add_column("Rule ID", style="cyan")
    table.add_column("Name")
    table.add_column("Tags")
    table.add_column("Fixable")
    table.add_column("Enabled")
    table.add_column("Options")

    for rule in linter.list_rules():
        options = ", ".join(f"{k}={v}" for k, v in rule["options"].items())
        table.add_row(
            rule["rule_id"],
            rule["name"],
            ", ".join(rule["tags"]),
            "yes" if rule["fixable"] else "no",
            "[green]yes[/green]" if rule["enabled"] else "[red]no[/red]",
            escape(options) or "-",
        )

    console.print(table)
