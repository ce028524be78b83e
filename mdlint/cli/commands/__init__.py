"""CLI commands for mdlint."""

from mdlint.cli.commands.blocks import blocks, outline
from mdlint.cli.commands.check import check
from mdlint.cli.commands.rules import rules

__all__ = [
    "blocks",
    "check",
    "outline",
    "rules",
]
