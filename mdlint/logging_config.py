"""Logging configuration for the mdlint CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbosity: int = 0) -> None:
    """Route mdlint logging through rich on stderr.

    Args:
        verbosity: 0 for warnings, 1 for info, 2 or more for debug.
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
