"""Logging setup.

Library modules log through ``logging.getLogger(__name__)``; the CLI calls
:func:`setup_logging` once to render records with rich on stderr, keeping
stdout for the result.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure the ``bump_py`` logger.

    Args:
        verbose: Log at DEBUG level instead of WARNING
        console: Console to render to (defaults to stderr)
    """
    logger = logging.getLogger("bump_py")
    logger.handlers.clear()
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
