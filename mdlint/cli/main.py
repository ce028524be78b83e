"""Main CLI entry point for mdlint."""

import click

from mdlint import __version__
from mdlint.cli.commands import blocks, check, outline, rules
from mdlint.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-vv for debug)")
def cli(verbose: int) -> None:
    """mdlint - Markdown style linting.

    \b
    COMMANDS:
      mdlint check docs/ README.md       Lint Markdown files
      mdlint check --fix README.md       Fix what can be fixed automatically
      mdlint rules                       List rules and their settings
      mdlint blocks README.md            Show content blocks of a file
      mdlint outline README.md           Show sections of a file
    """
    setup_logging(verbose)


cli.add_command(check)
cli.add_command(rules)
cli.add_command(blocks)
cli.add_command(outline)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
