"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .access_schema import AccessConfig
from .cache_schema import CacheConfig
from .logging_schema import LoggingConfig
from .output_schema import OutputConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    access: AccessConfig = Field(default_factory=lambda: AccessConfig())
    cache: CacheConfig = Field(default_factory=lambda: CacheConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
