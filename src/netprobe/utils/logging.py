"""Logging setup for the netprobe CLI."""

import logging
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "netprobe"


def setup_logging(
    verbose: bool = False,
    log_file: str | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Attach rich console (and optional rotating file) handlers to the netprobe logger.

    Calling it again only adjusts the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if logger.handlers:
        return logger

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    logger.addHandler(handler)

    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=3)
        file_handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
