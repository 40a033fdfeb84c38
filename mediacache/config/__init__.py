"""Configuration package with clean public API."""

from .manager import ConfigurationManager
from .schemas import (
    AccessConfig,
    AppConfig,
    CacheConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputSinkType,
    validate_config,
)

__all__ = [
    "AppConfig",
    "validate_config",
    "AccessConfig",
    "CacheConfig",
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
    "OutputConfig",
    "OutputSinkType",
    "ConfigurationManager",
]
