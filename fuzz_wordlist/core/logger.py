"""
Logging setup for fuzz-wordlist.

Everything logs below the ``fuzz_wordlist`` logger. The CLI attaches a rich
console handler on stderr, so stdout only carries wordlist values, and an
optional plain file handler.
"""

import logging
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

install(show_locals=False)

PACKAGE_LOGGER = "fuzz_wordlist"

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(
        level: str = "INFO",
        log_file: Optional[Path] = None,
        show_time: bool = True,
        show_path: bool = False
) -> logging.Logger:
    """
    Install the package handlers, replacing any from an earlier call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file, parents are created
        show_time: Show timestamps in console output
        show_path: Show file paths in console output

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    _drop_handlers(logger)
    logger.setLevel(getattr(logging, level.upper()))

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True
    )
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_component_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., 'input', 'cli')

    Returns:
        Logger instance specific to the component
    """
    return logging.getLogger(f"{PACKAGE_LOGGER}.{component}")
