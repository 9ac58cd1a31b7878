# src/core/logger.py
"""Logging configuration for the User Directory service.

Everything goes to stderr; a rotating file is added when ``LOG_FILE`` is set.
uvicorn's loggers share the console handler so server and request logs
line up with application logs.
"""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from config import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# uvicorn logger name -> level; "uvicorn.access" carries one line per request
SERVER_LOGGERS = {
    "uvicorn": "WARNING",
    "uvicorn.error": "INFO",
    "uvicorn.access": "INFO",
}

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def _file_handler(log_file: str, log_level: str) -> Dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": "json" if settings.ENVIRONMENT == "production" else "text",
        "filename": log_file,
        "maxBytes": LOG_FILE_MAX_BYTES,
        "backupCount": LOG_FILE_BACKUPS,
        "level": log_level,
        "encoding": "utf-8",
    }


def build_logging_config(log_file: Optional[str], log_level: str) -> Dict[str, Any]:
    """
    Build the ``dictConfig`` mapping used by :func:`setup_logging`.

    Args:
        log_file: Path to the log file. If None, only the stderr handler is configured.
        log_level: Logging level name (e.g., 'DEBUG', 'INFO').
    """
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "text",
            "stream": sys.stderr,
            "level": log_level,
        },
    }
    if log_file:
        handlers["file"] = _file_handler(log_file, log_level)

    root_handlers: List[str] = list(handlers)
    loggers: Dict[str, Any] = {"": {"handlers": root_handlers, "level": log_level}}
    for name, level in SERVER_LOGGERS.items():
        loggers[name] = {"handlers": ["console"], "level": level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {"format": TEXT_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
            "json": {"class": "pythonjsonlogger.json.JsonFormatter", "format": JSON_FORMAT},
        },
        "handlers": handlers,
        "loggers": loggers,
    }


def setup_logging(log_file: Optional[str] = None, log_level: Optional[str] = None) -> Dict[str, Any]:
    """Apply the logging configuration; arguments default to the settings values."""
    log_level = (log_level or settings.LOG_LEVEL).upper()
    log_file = log_file or settings.LOG_FILE

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    log_config = build_logging_config(log_file, log_level)
    logging.config.dictConfig(log_config)
    return log_config


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


setup_logging()
logger = get_logger(__name__)
