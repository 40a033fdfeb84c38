# mediacache/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class InvalidStateTransitionError(DomainException):
    """Raised when attempting an invalid state transition."""
    def __init__(self, current_state: str, attempted_state: str):
        super().__init__(
            f"Cannot transition from {current_state} to {attempted_state}"
        )
        self.current_state = current_state
        self.attempted_state = attempted_state


class AccessDeniedError(DomainException):
    """Raised when a principal may not access a resource key."""
    def __init__(self, key: str, principal: Optional[str]):
        super().__init__(f"Access denied for principal '{principal}' to '{key}'")
        self.key = key
        self.principal = principal


class RetrievalError(DomainException):
    """Raised when an intrinsic payload could not be constructed.

    Failed constructions are never cached, so the same key may be retried.
    """
    def __init__(self, key: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"Retrieval of '{key}' failed: {message}")
        self.key = key
        self.cause = cause
