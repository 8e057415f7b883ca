"""
Logging configuration for Structured Report.

Library modules only obtain loggers through get_logger(); handlers are
installed by the embedding application via setup_logging().
"""

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from structured_report.config import ReportConfig

LOGGER_NAME = "structured_report"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    verbose: bool = False,
    config: Optional["ReportConfig"] = None,
) -> logging.Logger:
    """Install handlers on the structured_report logger.

    Args:
        level: Log level name; defaults to config.log_level, then INFO
        log_file: Optional path of a file that receives detailed records
        verbose: Use the detailed format on stdout as well
        config: Report configuration supplying the default level

    Returns:
        The configured package logger
    """
    if level is None:
        level = config.log_level if config is not None else "INFO"
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter(DEFAULT_FORMAT if verbose else SIMPLE_FORMAT)
    )
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(file_handler)

    # Records stop here; the application's root handlers are left alone.
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or the child logger ``structured_report.<name>``."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
