"""Logging utilities for the staging workflow."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

PACKAGE_LOGGER = 'opc_staging'

logger = logging.getLogger(__name__)


def setup_logging(config: Any) -> logging.Logger:
    """Setup logging configuration with file and console handlers.

    Args:
        config: Config instance or dictionary with 'log_file' and
            'log_level' keys

    Returns:
        Configured package logger
    """
    log_file = config.get('log_file', 'opc_staging.log')
    log_level = str(config.get('log_level', 'INFO')).upper()
    level = getattr(logging, log_level, logging.INFO)

    # Create output directory if it doesn't exist
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    # Remove existing handlers
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
    )
    console_handler.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    package_logger.addHandler(console_handler)
    package_logger.addHandler(file_handler)

    return package_logger


def set_verbose(package_logger: logging.Logger):
    """Switch the package logger and its handlers to DEBUG."""
    package_logger.setLevel(logging.DEBUG)
    for handler in package_logger.handlers:
        handler.setLevel(logging.DEBUG)
