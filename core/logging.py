"""
Logging setup

Shared by the web service and the client.
- Console: INFO
- File: INFO (TimedRotatingFileHandler, daily)

Usage:
    from core.logging import setup_logging
    setup_logging("web")     # service
    setup_logging("client")  # client CLI
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7  # keep 7 days

# Loggers that produce too much output (raised to WARNING)
NOISY_LOGGERS = [
    "aiosqlite",  # executing/completed per query
    "httpcore",
    "httpx",
    "asyncio",
]


def get_log_file_path(process_name: str) -> Path:
    """Log file path for a process ("web", "client", other)"""
    if process_name == "web":
        return Paths.WEB_LOGS_DIR / f"{process_name}.log"
    elif process_name == "client":
        return Paths.CLIENT_LOGS_DIR / f"{process_name}.log"
    else:
        return Paths.LOGS_DIR / f"{process_name}.log"


def setup_logging(
    process_name: str,
    console_level: int = logging.INFO,
    file_level: int = logging.INFO,
    log_to_file: bool = True,
) -> logging.Logger:
    """Initialize logging

    Log files roll over daily at midnight.

    Args:
        process_name: "web" or "client"
        console_level: console level (default INFO)
        file_level: file level (default INFO)
        log_to_file: add the rotating file handler

    Returns:
        configured root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # handlers filter

    # Drop existing handlers (avoid duplicates)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # 1. Console
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # 2. File (daily rotation)
    log_file = get_log_file_path(process_name)
    if log_to_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",
            interval=1,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.suffix = "%Y-%m-%d"  # web.log.2026-02-21
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # 3. Quiet noisy loggers
    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.debug(f"Logging initialized: {process_name}")
    if log_to_file:
        root_logger.debug(f"  - file: {log_file} (daily rotation, {LOG_FILE_BACKUP_COUNT} days)")

    return root_logger
