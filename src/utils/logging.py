"""
Logging utilities for transform benchmarks.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def setup_logging(
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    name: Optional[str] = None,
    console_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Configure a logger for a benchmark run.

    Args:
        log_file: Path to a log file, created with its parent directories.
            None keeps output on the console only.
        level: Level of the logger and of the file handler.
        name: Logger name (None configures the root logger).
        console_level: Threshold for stdout; rich owns the normal display,
            so only warnings reach the console by default.

    Returns:
        The configured logger. Handlers from an earlier call are closed
        and replaced.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    handlers = [(logging.StreamHandler(sys.stdout), console_level)]
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append((logging.FileHandler(log_file, mode='a', encoding='utf-8'), level))

    for handler, handler_level in handlers:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def log_config(logger: logging.Logger, config: Mapping[str, Any], title: str = "CONFIGURATION"):
    """Log a configuration mapping between banner lines."""
    logger.info("=" * 60)
    logger.info(title)
    logger.info("=" * 60)
    for key, value in config.items():
        logger.info(f"  {key}: {value}")
    logger.info("=" * 60)
