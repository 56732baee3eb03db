"""Logging setup for the ``space_vectors`` namespace."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.WARNING, log_file: str | None = None) -> None:
    """Configure the package logger.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``.
        log_file: Optional path to also write log records to.
    """
    logger = logging.getLogger("space_vectors")
    logger.setLevel(level)

    # Repeated setup (one per CLI invocation in tests) must not stack handlers.
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
