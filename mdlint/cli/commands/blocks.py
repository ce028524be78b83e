"""Document structure CLI commands."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdlint.document.blocks import parse_sections, segment
from mdlint.linting import split_lines

console = Console()


def _read_lines(path: Path) -> list[str]:
    try:
        return split_lines(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Could not read {escape(str(path))}: {escape(str(e))}")
        raise SystemExit(2)


@click.command("blocks")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def blocks(path: Path) -> None:
    """Show the content blocks of a Markdown file.

    A content block is the span between one heading and the next heading
    of any level.
    """
    lines = _read_lines(path)

    table = Table(title=f"Content blocks of {escape(str(path))}")
    table.add_column("#", justify="right")
    table.add_column("Lines")
    table.add_column("First line")

    for number, block in enumerate(segment(lines), 1):
        if block.is_empty:
            span = f"{block.start_line} (empty)"
            first = ""
        else:
            span = f"{block.start_line}-{block.end_line}"
            first = next((lines[n - 1].strip() for n in block.line_numbers() if lines[n - 1].strip()), "")
        table.add_row(str(number), span, escape(first))

    console.print(table)


@click.command("outline")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--level", default=2, type=click.IntRange(1, 6), help="Deepest heading level that starts a section")
def outline(path: Path, level: int) -> None:
    """Show the sections of a Markdown file."""
    lines = _read_lines(path)

    table = Table(title=f"Sections of {escape(str(path))}")
    table.add_column("Level", justify="right")
    table.add_column("Heading")
    table.add_column("Lines")
    table.add_column("Style")

    for section in parse_sections(lines, section_level=level):
        style = "-" if section.level == 0 else ("setext" if section.is_setext else "atx")
        table.add_row(
            str(section.level),
            escape(section.heading) or "[dim](before first heading)[/dim]",
            f"{section.start_line}-{section.end_line}",
            style,
        )

    console.print(table)
