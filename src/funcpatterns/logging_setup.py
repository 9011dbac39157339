"""
Logging configuration for the command-line interface.

Library modules only create module-level loggers; handlers are installed here,
once, by the CLI.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .app import config


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Routes the package's log records through a rich handler."""
    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))

    package_logger = logging.getLogger("funcpatterns")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
