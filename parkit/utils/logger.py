# parkit/utils/logger.py
"""
Logging setup shared by the API, the attendant shell and the scripts.
One console handler plus a rotating file (LOG_DIR/LOG_FILE), installed once on
the root logger. SQL echo from sqlalchemy.engine is held at SQL_LOG_LEVEL.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from parkit.config import settings

DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs")
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_handlers: list = []


def configure_logging(level=None, log_dir=None, log_file=None, force=False) -> list:
    """
    Install the console + rotating file handlers. Later calls are no-ops unless
    force=True, which swaps out the handlers installed by an earlier call.
    """
    root = logging.getLogger()
    if _handlers and not force:
        return _handlers
    for handler in _handlers:
        root.removeHandler(handler)
        handler.close()
    _handlers.clear()

    level = (level or settings.LOG_LEVEL).upper()
    log_dir = log_dir or settings.LOG_DIR or DEFAULT_LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    console = logging.StreamHandler()
    # Keeps the last 10 × 5MB files
    rotating = RotatingFileHandler(
        filename=os.path.join(log_dir, log_file or settings.LOG_FILE),
        maxBytes=5 * 1024 * 1024,
        backupCount=10,
        encoding="utf-8",
    )
    for handler in (console, rotating):
        handler.setLevel(level)
        handler.setFormatter(fmt)
        root.addHandler(handler)
        _handlers.append(handler)

    root.setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(settings.SQL_LOG_LEVEL.upper())
    return _handlers


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    configure_logging()
    return logging.getLogger(name)
