from typing import Protocol

from calearner.domain.common.value_objects import IdentityId
from calearner.domain.identity import Identity


class AuthServiceProtocol(Protocol):
    """Protocol for the auth provider."""

    async def login(self, email: str) -> Identity:
        """
        Sign an identity in.

        Args:
            email: Address entered by the user

        Returns:
            The signed-in Identity
        """
        ...

    async def logout(self) -> None:
        """Sign the current identity out."""
        ...

    def namespace_key(self, base_key: str, identity_id: IdentityId | None = None) -> str:
        """
        Scope a storage key to an identity.

        Args:
            base_key: Unscoped key, e.g. "calearner_settings"
            identity_id: Signed-in identity, None for the guest namespace

        Returns:
            The key under which the identity's record is stored
        """
        ...
