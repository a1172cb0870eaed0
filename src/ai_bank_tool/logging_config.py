"""
Logging configuration for the AI bank tool server.

Writes rotating logs to $LOG_DIR/ai_bank_tool.log. The console handler
writes to stderr only, so the stdio transport keeps stdout clean.
"""

import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler

from ai_bank_tool import config

SERVICE_LOGGER = "ai_bank_tool"
LOG_FILE_NAME = "ai_bank_tool.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


def _setup_file_logger(name: str, log_file: Path, level: int) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


def setup_logging(log_dir: str | Path | None = None) -> None:
    """
    Configure root + service loggers.
    """
    log_level = config.LOG_LEVEL.upper()
    level = getattr(logging, log_level, logging.INFO)

    directory = Path(log_dir or config.LOG_DIR)
    directory.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    _setup_file_logger(SERVICE_LOGGER, directory / LOG_FILE_NAME, level)


def get_logger(name: str) -> logging.Logger:
    """
    Convenience wrapper to get a named logger.
    """
    return logging.getLogger(name)
