"""Logging setup for graphql_bindgen.

All modules obtain their logger through :func:`get_logger` so that the
package shares a single ``graphql_bindgen`` logger hierarchy. Console output
is rendered through rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "graphql_bindgen"
DEFAULT_FORMAT = "%(message)s"

_configured = False


def setup_logging(
    level: int | str = logging.WARNING,
    console: Console | None = None,
    show_path: bool = False,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level name or number.
        console: Rich console to log to (defaults to stderr).
        show_path: Whether to show the source location of each record.

    Returns:
        The configured package logger.
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=show_path,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the package hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
