"""Logging for CopyMind: rich output on stderr, optional plain log file."""

import logging
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "copymind"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(level: LogLevel = "INFO", log_file: Path | None = None) -> logging.Logger:
    """Install handlers on the ``copymind`` logger, replacing earlier ones.

    Terminal output goes to stderr so ``copymind check --json`` keeps a
    clean stdout.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the ``copymind`` namespace, e.g. ``copymind.semantic``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)
