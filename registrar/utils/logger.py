"""
Centralized logging configuration with colored output
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional
import colorlog


LOGS_DIR = Path("logs")

# Set REGISTRAR_LOG_FILE to also write every record to logs/<name>
LOG_FILE_ENV = "REGISTRAR_LOG_FILE"


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Set up a logger with colored console output and optional file logging.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name (saved in logs/ directory)
        console: Whether to output to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    # Console handler with colored output
    if console:
        console_handler = colorlog.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level.upper()))

        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(blue)s[%(name)s]%(reset)s %(message)s",
            datefmt=None,
            reset=True,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            },
            secondary_log_colors={},
            style='%'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    # File handler
    if log_file:
        LOGS_DIR.mkdir(exist_ok=True)
        file_path = LOGS_DIR / log_file
        file_handler = logging.FileHandler(file_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    """
    Get or create a logger with default configuration.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Initial logging level; the configured LOG_LEVEL is applied
            later through set_level

    Returns:
        Configured logger instance
    """
    return setup_logger(
        name=name,
        level=level,
        log_file=os.environ.get(LOG_FILE_ENV) or None,
        console=True
    )


def set_level(level: str) -> None:
    """Apply a level to every registrar logger created so far"""
    numeric = getattr(logging, level.upper())
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and (name == "registrar" or name.startswith("registrar.")):
            logger.setLevel(numeric)
            for handler in logger.handlers:
                if not isinstance(handler, logging.FileHandler):
                    handler.setLevel(numeric)
