"""
Logging setup for Ayah Cards.

Library modules log through ``logging.getLogger(__name__)`` and stay quiet
until the application calls :func:`configure_logging`.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "ayah_cards"


def configure_logging(
    level: int = logging.INFO,
    console: Optional[Console] = None,
    show_path: bool = False,
) -> logging.Logger:
    """
    Configure logging for the ayah_cards package.

    Args:
        level: Logging level (default: INFO)
        console: Rich console to write to (default: stderr console)
        show_path: Whether to show the source file for each record

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Replace whatever was installed before
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=show_path,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for the package."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Silence all package logging."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
