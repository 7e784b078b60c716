"""Logging configuration and utilities."""

import logging
import sys
from pathlib import Path

# Create module logger
logger = logging.getLogger("skeinsum")


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
) -> None:
    """Configure application logging.

    Diagnostics meant for the user (FAILED lines, open errors) are printed
    by the CLI output layer; this logger carries debug and trace detail.

    Args:
        log_file: Optional path to log file.
        verbose: If True, log at DEBUG and include timestamps; otherwise
            only warnings and errors are shown.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(log_level)

    # Clear existing handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    # Format - simpler for console
    if verbose:
        console_format = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        console_format = logging.Formatter("%(name)s: %(message)s")

    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Always verbose in file

        file_format = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)
        if logger.level > logging.DEBUG:
            logger.setLevel(logging.DEBUG)
