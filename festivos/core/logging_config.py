# festivos/core/logging_config.py
"""
Logging configuration for Festivos.

Structured JSON logging to rotating files in production, coloured
human-readable console output in development.
"""

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

from festivos.core.config import IS_PRODUCTION

LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))

APP_LOG_FILE = LOG_DIR / "app.log"
ERROR_LOG_FILE = LOG_DIR / "error.log"


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line.

    Values passed as extra={"extra_fields": {...}} become top-level keys, so
    request logs carry request_id, path and duration_ms as fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter that wraps the level name in an ANSI colour."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers see the same record: restore the plain level name
        original = record.levelname
        color = self.LEVEL_COLORS.get(original)
        if color:
            record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


CONSOLE_FORMAT = "%(levelname)-8s %(asctime)s [%(name)s] %(message)s"
FILE_FORMAT = "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# (path, max bytes, backups, level) of each production log file
PRODUCTION_FILES = (
    (APP_LOG_FILE, 10_000_000, 5, logging.INFO),
    (ERROR_LOG_FILE, 10_000_000, 10, logging.ERROR),
)


def _file_handler(
    path: Path,
    max_bytes: int,
    backup_count: int,
    level: int,
    formatter: logging.Formatter,
) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(production: bool = IS_PRODUCTION) -> None:
    """
    Replace the root logger's handlers for the festivos service.

    Production writes JSON lines to app.log (INFO) and error.log (ERROR)
    under LOG_DIR and only echoes warnings to stdout. Development logs
    everything at DEBUG, coloured on stdout and plain text in app.log.
    Calling it again reconfigures from scratch.
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO if production else logging.DEBUG)
    root_logger.handlers.clear()

    if production:
        for path, max_bytes, backup_count, level in PRODUCTION_FILES:
            root_logger.addHandler(_file_handler(path, max_bytes, backup_count, level, JSONFormatter()))
        root_logger.addHandler(_console_handler(logging.WARNING, JSONFormatter()))
    else:
        root_logger.addHandler(
            _console_handler(logging.DEBUG, ColoredFormatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        )
        root_logger.addHandler(
            _file_handler(APP_LOG_FILE, 5_000_000, 2, logging.DEBUG, logging.Formatter(FILE_FORMAT))
        )

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).setLevel(logging.INFO)
    logging.getLogger("watchfiles").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (production=%s)",
        production,
        extra={"extra_fields": {"log_dir": str(LOG_DIR.absolute()), "production": production}},
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a festivos module (pass __name__)."""
    return logging.getLogger(name)
