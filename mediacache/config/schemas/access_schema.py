"""Access policy configuration schema."""
from pydantic import BaseModel, Field, field_validator

from mediacache.domain.media.value_objects import (
    DEFAULT_ADMIN_PRINCIPAL,
    DEFAULT_RESTRICTED_PREFIX,
)


class AccessConfig(BaseModel):
    """Naming-convention access policy."""

    restricted_prefix: str = Field(
        DEFAULT_RESTRICTED_PREFIX, description="Keys starting with this prefix are restricted"
    )
    admin_principal: str = Field(
        DEFAULT_ADMIN_PRINCIPAL, description="Principal allowed to access restricted keys"
    )

    @field_validator("restricted_prefix", "admin_principal")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Access policy values must not be empty")
        return v
