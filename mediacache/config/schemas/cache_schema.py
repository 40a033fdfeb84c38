"""Cache configuration schema."""
from pydantic import BaseModel, Field, field_validator


class CacheConfig(BaseModel):
    """Intrinsic store and resource cache settings."""

    construction_delay_ms: int = Field(
        0, description="Simulated cost of constructing an intrinsic payload, in milliseconds"
    )
    payload_digest_length: int = Field(
        8, description="Number of digest characters embedded in synthesized payloads"
    )

    @field_validator("construction_delay_ms")
    @classmethod
    def validate_delay(cls, v: int) -> int:
        """Validate construction delay."""
        if v < 0:
            raise ValueError("Construction delay must be non-negative")
        return v

    @field_validator("payload_digest_length")
    @classmethod
    def validate_digest_length(cls, v: int) -> int:
        """Validate digest length."""
        if not 4 <= v <= 64:
            raise ValueError("Payload digest length must be between 4 and 64")
        return v
