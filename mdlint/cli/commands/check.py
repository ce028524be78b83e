"""Markdown linting CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdlint.cli.loader import build_linter
from mdlint.errors import ConfigError
from mdlint.rules.schemas import LintResult, LintSeverity

console = Console()

MARKDOWN_SUFFIXES = (".md", ".markdown")


def collect_markdown_files(paths: tuple[Path, ...]) -> list[Path]:
    """Expand files and directories into a sorted list of Markdown files.

    Hidden directories (``.git`` and the like) are not searched.
    """
    files: set[Path] = set()
    for path in paths:
        if path.is_dir():
            for candidate in path.rglob("*"):
                relative = candidate.relative_to(path)
                if any(part.startswith(".") for part in relative.parts[:-1]):
                    continue
                if candidate.is_file() and candidate.suffix.lower() in MARKDOWN_SUFFIXES:
                    files.add(candidate)
        else:
            files.add(path)
    return sorted(files)


@click.command("check")
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Config file (default: nearest .mdlint.yaml)")
@click.option("--fix", is_flag=True, help="Auto-fix issues where possible")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--enable", "enable", multiple=True, help="Enable a rule by name or id")
@click.option("--disable", "disable", multiple=True, help="Disable a rule by name or id")
def check(
    paths: tuple[Path, ...],
    config_path: Path | None,
    fix: bool,
    output_json: bool,
    enable: tuple[str, ...],
    disable: tuple[str, ...],
) -> None:
    """Lint Markdown files.

    PATHS are files or directories (default: current directory).

    Examples:

        mdlint check README.md

        mdlint check docs/ --disable heading-sentence-case

        mdlint check --fix docs/
    """
    linter = build_linter(console, config_path)

    try:
        for key in enable:
            linter.enable_rule(key)
        for key in disable:
            linter.disable_rule(key)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(2)

    files = collect_markdown_files(paths or (Path("."),))
    results = []
    for path in files:
        try:
            results.append(linter.fix_file(path) if fix else linter.lint_file(path))
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Error:[/red] Could not read {escape(str(path))}: {escape(str(e))}")
            raise SystemExit(2)

    if output_json:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        _display_results(results)

    if any(not r.passed for r in results):
        raise SystemExit(1)


def _display_results(results: list[LintResult]) -> None:
    """Print issue tables and a summary."""
    for result in results:
        if not result.issues:
            continue

        console.print(f"\n[bold]{escape(result.path)}[/bold]")

        table = Table(show_header=True)
        table.add_column("Line", justify="right")
        table.add_column("Rule")
        table.add_column("Severity", style="bold")
        table.add_column("Detail")

        for issue in result.issues:
            severity_style = {
                LintSeverity.ERROR: "red",
                LintSeverity.WARNING: "yellow",
            }.get(issue.severity, "white")

            table.add_row(
                str(issue.line_number),
                f"{issue.rule_id}/{issue.rule_name}",
                f"[{severity_style}]{issue.severity.value}[/{severity_style}]",
                escape(issue.detail),
            )

        console.print(table)

    total_errors = sum(r.error_count for r in results)
    total_warnings = sum(r.warning_count for r in results)
    total_fixed = sum(r.fixed_count for r in results)

    console.print()
    if total_fixed > 0:
        console.print(f"[green]Fixed: {total_fixed}[/green]", end=" ")
    if total_errors > 0:
        console.print(f"[red]Errors: {total_errors}[/red]", end=" ")
    if total_warnings > 0:
        console.print(f"[yellow]Warnings: {total_warnings}[/yellow]", end=" ")
    if total_errors == 0 and total_warnings == 0:
        console.print(f"[green]No issues found in {len(results)} file(s)[/green]", end="")
    console.print()
