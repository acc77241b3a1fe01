"""Console logging for the order-placing CLI.

Log records go to stderr through Rich so the workflow's own ``[ok]`` /
``[ng]`` / ``[event]`` lines on stdout stay machine readable.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "order_placing"


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False
) -> RichHandler:
    """Return a RichHandler writing to stderr.

    In debug mode the handler drops to DEBUG and shows source paths and
    logger names.
    """
    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=debug_mode,
        show_path=debug_mode,
    )
    fmt = "%(message)s" if not debug_mode else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    return handler


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach the console handler to the project logger and return it."""
    logger = logging.getLogger(PROJECT_PREFIX)
    logger.handlers.clear()
    logger.addHandler(config_console_handler(level, debug_mode=level <= logging.DEBUG))
    logger.setLevel(level)
    logger.propagate = False
    return logger
