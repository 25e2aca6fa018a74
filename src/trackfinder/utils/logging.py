"""Logging configuration for trackfinder."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

# librosa pulls in numba, which logs compilation details at DEBUG
_NOISY_LOGGERS = ("numba", "librosa", "audioread")


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[Path] = None,
    verbose: bool = False,
) -> logging.Logger:
    """Set up the ``trackfinder`` logger for console and optional file output."""
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger("trackfinder")
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logger.setLevel(level)

    # Re-running setup replaces handlers instead of stacking them
    logger.handlers.clear()

    if verbose:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "trackfinder") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
