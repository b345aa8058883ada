"""
Rich logging for htmlquill.

Provides colorful console logging using the rich library.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _level(level: str) -> int:
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    return getattr(logging, level.upper())


def create_rich_handler(console: Optional[Console] = None) -> RichHandler:
    """
    Create a rich handler with the project's formatting.

    Args:
        console: Console to write to (stderr console by default)

    Returns:
        Configured RichHandler
    """
    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return rich_handler


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to use rich logging
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(_level(level))
    root_logger.handlers.clear()

    if use_rich:
        root_logger.addHandler(create_rich_handler())
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(handler)
