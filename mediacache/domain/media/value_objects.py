# mediacache/domain/media/value_objects.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import hashlib
from mediacache.domain.core.exceptions import ValidationError

DEFAULT_RESTRICTED_PREFIX = "private_"
DEFAULT_ADMIN_PRINCIPAL = "admin"
DEFAULT_DIGEST_LENGTH = 8


@dataclass(frozen=True)
class ResourceKey:
    """Opaque resource identifier. Any string is accepted, including ''."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValidationError("Resource key must be a string")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntrinsicPayload:
    """Shared low-level data for one resource key.

    Payloads are equal when key and content are equal, so two payloads built
    for the same key by the same synthesizer compare equal.
    """
    key: str
    shared_bytes: bytes

    def __post_init__(self):
        if not isinstance(self.shared_bytes, bytes):
            raise ValidationError("Payload data must be bytes")

    @property
    def data_id(self) -> str:
        """Printable form of the shared data."""
        return self.shared_bytes.decode("utf-8", errors="replace")


def synthesize_payload(key: str, digest_length: int = DEFAULT_DIGEST_LENGTH) -> IntrinsicPayload:
    """Build the payload for ``key`` deterministically."""
    resource_key = ResourceKey(key)
    digest = hashlib.sha256(resource_key.value.encode("utf-8")).hexdigest()[:digest_length]
    data = f"BINARY_DATA_OF_{resource_key.value}_{digest}"
    return IntrinsicPayload(key=resource_key.value, shared_bytes=data.encode("utf-8"))


class ProxyState(str, Enum):
    """Lifecycle of a single proxied access."""
    UNREQUESTED = "unrequested"
    LOGGED = "logged"
    DENIED = "denied"
    AUTHORIZED = "authorized"
    RESOLVED = "resolved"
