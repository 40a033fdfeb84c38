import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import structlog

from mediacache.config.schemas import LogDestination, LoggingConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class DetailedFormatter(logging.Formatter):
    """Formatter that includes caller information."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def configure_structlog() -> None:
    """Route structlog through the standard library logging hierarchy.

    Levels and handlers then come from the root logger, so nothing is printed
    to stdout unless a handler is installed for it.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. Defaults are used when omitted.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    handlers = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if config.destination in (LogDestination.STDOUT, LogDestination.BOTH):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    configure_structlog()

    logger = structlog.get_logger("mediacache")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
        log_file=config.file_path,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for ``name``."""
    return structlog.get_logger(name)


configure_structlog()
