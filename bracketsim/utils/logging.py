"""
Logging configuration for the bracket simulator.

Log records always go to stderr: stdout is reserved for the bracket itself,
which must stay byte-identical between runs with the same seed.
"""
import logging
import sys
from pathlib import Path
from typing import Optional
import os

from pythonjsonlogger.json import JsonFormatter


def setup_logging(
    name: str = "bracketsim",
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    environment: Optional[str] = None,
    log_format: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging with environment-aware configuration.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var LOG_LEVEL
        log_file: Optional file path for log output
        environment: development, staging or production. Defaults to env var ENVIRONMENT
        log_format: console or json. Defaults to env var LOG_FORMAT, else json in production

    Returns:
        Configured logger instance
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "WARNING")
    if environment is None:
        environment = os.getenv("ENVIRONMENT", "development")
    if log_format is None:
        log_format = os.getenv("LOG_FORMAT") or ("json" if environment.lower() == "production" else "console")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stderr)

    if log_format.lower() == "json":
        # JSON logging (structured logs)
        formatter = JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S"
        )
    else:
        # Human-readable for development
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (optional)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
