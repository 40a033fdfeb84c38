"""Naming-convention access gate."""

from typing import Optional

from mediacache.domain.media.value_objects import (
    DEFAULT_ADMIN_PRINCIPAL,
    DEFAULT_RESTRICTED_PREFIX,
)


class AccessGate:
    """Decides whether a principal may access a key.

    Keys starting with the restricted prefix are reserved for the admin
    principal (compared case-insensitively); every other key is public.
    The gate holds only its immutable policy, so one instance can be shared
    by any number of threads.
    """

    def __init__(
        self,
        restricted_prefix: str = DEFAULT_RESTRICTED_PREFIX,
        admin_principal: str = DEFAULT_ADMIN_PRINCIPAL,
    ):
        self._restricted_prefix = restricted_prefix
        self._admin_principal = admin_principal.casefold()

    @property
    def restricted_prefix(self) -> str:
        return self._restricted_prefix

    def is_restricted(self, key: str) -> bool:
        return key.startswith(self._restricted_prefix)

    def evaluate(self, key: str, principal: Optional[str]) -> bool:
        """Return True when ``principal`` may access ``key``."""
        if not self.is_restricted(key):
            return True
        if principal is None:
            return False
        return principal.casefold() == self._admin_principal
