"""Logging setup for the caesar-cipher command-line tool.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed once, by the CLI, through :func:`setup_logging`.  Rich is used
for rendering when it is installed, plain stderr otherwise.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME: str = "caesar_cipher"


def _build_handler() -> logging.Handler:
    """Return a Rich handler when available, else a plain stderr handler."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s | %(name)s | %(message)s"),
        )
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure and return the package logger.

    Idempotent: a second call only adjusts the level.
    """
    log = logging.getLogger(ROOT_LOGGER_NAME)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not log.handlers:
        log.addHandler(_build_handler())
    return log
