"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest
import structlog

from mediacache.config import LoggingConfig
from mediacache.infrastructure.logging.logger import (
    configure_structlog,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestSetupLogging:
    def test_stdout_destination(self, restore_root_logger):
        setup_logging(LoggingConfig(level="WARNING"))

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0], logging.StreamHandler)

    def test_file_and_stdout_destination(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "mediacache.log"

        setup_logging(LoggingConfig(level="INFO", destination="both", file_path=str(log_file)))
        get_logger("mediacache.test").info("Cache event", key="a")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert any(isinstance(h, RotatingFileHandler) for h in restore_root_logger.handlers)
        content = log_file.read_text()
        assert "Cache event" in content
        assert "key='a'" in content


class TestConfigureStructlog:
    def test_routes_through_stdlib(self):
        configure_structlog()

        config = structlog.get_config()
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger

    def test_debug_suppressed_at_warning_level(self, restore_root_logger, capsys):
        restore_root_logger.setLevel(logging.WARNING)
        configure_structlog()

        get_logger("mediacache.test").debug("Batch viewed", requested=2)

        captured = capsys.readouterr()
        assert "Batch viewed" not in captured.out
        assert "Batch viewed" not in captured.err
