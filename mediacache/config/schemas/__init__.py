"""Configuration schemas."""

from .access_schema import AccessConfig
from .app_schema import AppConfig, validate_config
from .cache_schema import CacheConfig
from .logging_schema import LogDestination, LoggingConfig, LogLevel
from .output_schema import OutputConfig, OutputSinkType

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
]
