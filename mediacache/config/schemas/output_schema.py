"""Output configuration schema."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class OutputSinkType(str, Enum):
    """Where user-facing output lines are written."""
    CONSOLE = "console"
    LOGGING = "logging"


class OutputConfig(BaseModel):
    """Output sink settings."""

    sink: OutputSinkType = Field(OutputSinkType.CONSOLE, description="Output sink to write lines to")
    logger_name: str = Field(
        "mediacache.output", description="Logger used by the logging sink"
    )

    @field_validator("sink", mode="before")
    @classmethod
    def normalize_sink(cls, v):
        """Accept sink names in any case."""
        if isinstance(v, str):
            return v.lower()
        return v
