"""
Logging utilities for the tabular profiler.
All module loggers hang off the package logger, which owns the handlers.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
import colorlog

PACKAGE_LOGGER = "tabular_profiler"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def setup_logger(
    name: str = PACKAGE_LOGGER,
    log_file: Optional[str] = None,
    level: str = "INFO",
    colorize: bool = True
) -> logging.Logger:
    """
    Configure a logger with a console handler and an optional file handler.

    Calling it again replaces the previous handlers, so the CLI can
    reconfigure logging once the config file has been read.

    Args:
        name: Logger name (defaults to the package logger)
        log_file: Path to log file (optional)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        colorize: Whether to colorize console output

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger(level="DEBUG", log_file="logs/profiler.log")
        >>> logger.info("Profiling file: data.csv")
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if colorize:
        console_formatter = colorlog.ColoredFormatter(
            '%(log_color)s' + LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors=LOG_COLORS
        )
    else:
        console_formatter = file_formatter

    # Keep stdout free for JSON output of the CLI
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger, making sure the package logger has handlers.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        Logger instance
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        setup_logger(PACKAGE_LOGGER, level="WARNING")

    return logging.getLogger(name)
