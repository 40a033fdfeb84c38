"""Logging configuration schema."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where log records go")
    file_path: Optional[str] = Field(None, description="Log file path for file destinations")
    max_size_mb: int = Field(10, description="Rotate the log file after this many megabytes")
    backup_count: int = Field(5, description="Number of rotated log files to keep")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("destination", mode="before")
    @classmethod
    def normalize_destination(cls, v):
        """Accept destinations in any case."""
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 1:
            raise ValueError("Log rotation settings must be at least 1")
        return v

    @model_validator(mode="after")
    def validate_file_path(self) -> "LoggingConfig":
        """A file destination needs a path."""
        if self.destination in (LogDestination.FILE, LogDestination.BOTH) and not self.file_path:
            raise ValueError(f"file_path is required for log destination '{self.destination.value}'")
        return self
