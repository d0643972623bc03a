"""Logging setup shared by the API server and the CLI.

Usage:
    from fundtrack.logging_config import setup_logging
    setup_logging("INFO")
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that are chatty at INFO
NOISY_LOGGERS = [
    "sqlalchemy.engine",
    "uvicorn.access",
    "httpx",
    "httpcore",
]


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Configure the root logger with a single console handler.

    Calling it again replaces the handler instead of adding a second one.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level

    Returns:
        The configured root logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
