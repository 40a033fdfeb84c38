"""Data transfer objects for the media facade."""
from typing import Any, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, Field


class CacheStats(BaseModel):
    """Snapshot of both cache tiers."""

    model_config = ConfigDict(frozen=True)

    intrinsic_count: int = Field(..., description="Payloads in the intrinsic data store")
    resource_count: int = Field(..., description="Resources in the resource cache")
    keys: FrozenSet[str] = Field(default_factory=frozenset, description="Materialized payload keys")

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary with the keys sorted, suitable for JSON/YAML output."""
        return {
            "intrinsic_count": self.intrinsic_count,
            "resource_count": self.resource_count,
            "keys": sorted(self.keys),
        }
