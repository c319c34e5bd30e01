"""
Rich logging for the DOCX exporter.

Provides colorful console logging using the rich library. The library
modules only create named loggers; handlers are installed by the
application (or the CLI) through :func:`setup_logging`.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _resolve_level(level: str) -> int:
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    return getattr(logging, level.upper())


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance for module.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if not name or not isinstance(name, str):
        raise ValueError("Logger name must be a non-empty string")
    return logging.getLogger(name)


def create_rich_handler(console: Optional[Console] = None) -> RichHandler:
    """
    Create a rich handler with the project's formatting.

    Args:
        console: Console to write to (stderr console by default)

    Returns:
        Configured RichHandler
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(level: str = "INFO", use_rich: bool = True,
                  console: Optional[Console] = None) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_rich: Whether to use rich logging
        console: Optional console for the rich handler
    """
    numeric_level = _resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if use_rich:
        root_logger.addHandler(create_rich_handler(console))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(f"Logging initialized at {level.upper()} level")
