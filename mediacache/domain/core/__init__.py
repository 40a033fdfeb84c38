"""Core domain primitives shared across bounded contexts."""

from .exceptions import (
    AccessDeniedError,
    ConfigurationError,
    DomainException,
    InvalidStateTransitionError,
    RetrievalError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "InvalidStateTransitionError",
    "AccessDeniedError",
    "RetrievalError",
]
