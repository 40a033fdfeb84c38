"""Media bounded context - keys, payloads and renderable resources."""

from .resource import RealResource, Renderable
from .value_objects import (
    DEFAULT_ADMIN_PRINCIPAL,
    DEFAULT_RESTRICTED_PREFIX,
    IntrinsicPayload,
    ProxyState,
    ResourceKey,
    synthesize_payload,
)

__all__ = [
    "DEFAULT_ADMIN_PRINCIPAL",
    "DEFAULT_RESTRICTED_PREFIX",
    "IntrinsicPayload",
    "ProxyState",
    "RealResource",
    "Renderable",
    "ResourceKey",
    "synthesize_payload",
]
