"""Local sign-in: identities derived from the email address alone."""

import hashlib

from calearner.domain.common.value_objects import IdentityId
from calearner.domain.identity import Identity

ID_LENGTH = 16


def normalize_email(email: str) -> str:
    return email.strip().lower()


class LocalAuthService:
    """
    Passwordless auth provider for a single local user.

    The same email always maps to the same IdentityId, so signing back in
    finds the identity's namespaced records again.
    """

    def __init__(self) -> None:
        self.current: Identity | None = None

    async def login(self, email: str) -> Identity:
        normalized = normalize_email(email)
        digest = hashlib.sha256(normalized.encode("utf-8")).hexdigest()
        self.current = Identity(id=IdentityId(digest[:ID_LENGTH]), email=normalized)
        return self.current

    async def logout(self) -> None:
        self.current = None

    def namespace_key(self, base_key: str, identity_id: IdentityId | None = None) -> str:
        if identity_id is None:
            return base_key
        return f"{base_key}_{identity_id.value}"
