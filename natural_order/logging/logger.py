"""Logging setup for sort runs."""

import logging
import sys
from pathlib import Path


def setup_logger(log_file: Path | None = None, verbose: bool = False) -> logging.Logger:
    """Setup logger that writes to stderr and, optionally, a file (DEBUG).

    The console handler goes to stderr so sorted output on stdout stays clean.

    Args:
        log_file: Path to write log file (no file handler if None)
        verbose: Show INFO messages on the console (WARNING otherwise)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("natural_order")
    logger.setLevel(logging.DEBUG)

    # Remove any existing handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_format = logging.Formatter(
        "%(levelname)s: %(message)s"
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler (DEBUG level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger
