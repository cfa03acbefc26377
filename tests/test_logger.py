"""Unit tests for the logging setup."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging
import pytest
from logging.handlers import RotatingFileHandler
from parkit.utils.logger import configure_logging, get_logger


@pytest.fixture
def log_dir(tmp_path):
    yield tmp_path
    configure_logging(force=True)


class TestLogger:
    def test_second_call_reuses_handlers(self):
        first = configure_logging()
        assert configure_logging() is first
        assert len(first) == 2

    def test_force_writes_to_new_directory(self, log_dir):
        handlers = configure_logging(level="debug", log_dir=str(log_dir), log_file="test.log", force=True)
        root = logging.getLogger()
        assert sum(h in root.handlers for h in handlers) == 2
        assert root.level == logging.DEBUG

        get_logger("parkit.test").info("spot 3 released")
        for h in handlers:
            h.flush()
        assert "spot 3 released" in (log_dir / "test.log").read_text(encoding="utf-8")

    def test_force_replaces_previous_handlers(self, log_dir):
        old = list(configure_logging())
        configure_logging(log_dir=str(log_dir), force=True)
        root = logging.getLogger()
        assert not any(h in root.handlers for h in old)
        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)

    def test_sql_engine_logger_quieted(self):
        configure_logging()
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
