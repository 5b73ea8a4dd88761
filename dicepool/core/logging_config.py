"""
Logging configuration for dicepool.

Console output is colour-coded by level; an optional log file receives plain text.
"""

import logging
import sys
from typing import Optional
from colorama import Fore, Back, Style, init

# Initialize colorama for cross-platform color support
init(autoreset=True)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colours the level name.

    Colors:
    - DEBUG: Cyan
    - INFO: Green
    - WARNING: Yellow
    - ERROR: Red
    - CRITICAL: Red on white background
    """

    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Back.WHITE + Style.BRIGHT,
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, '')

        original_levelname = record.levelname
        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        formatted = super().format(record)

        # Restore for other handlers sharing this record
        record.levelname = original_levelname

        return formatted


def setup_logging(
    level: str = 'WARNING',
    log_file: Optional[str] = None,
    use_colors: bool = True
) -> logging.Logger:
    """
    Configure the root logger.

    Console output goes to stderr so that roll results on stdout stay clean
    for piping.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        use_colors: Whether to use colored console output

    Returns:
        Configured root logger

    Example:
        logger = setup_logging(level='DEBUG', log_file='dicepool.log')
        logger.debug("Rolled 2d6")  # Cyan
    """
    numeric_level = getattr(logging, level.upper())

    logger = logging.getLogger()
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)

    if use_colors:
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(console_handler)

    # No colors in file output
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Logger name (usually __name__)
    """
    return logging.getLogger(name)


__all__ = ['LOG_FORMAT', 'ColoredFormatter', 'setup_logging', 'get_logger']
