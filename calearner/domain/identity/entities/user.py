"""Identity entity for signed-in users."""

from dataclasses import dataclass

from calearner.domain.common.entity import Entity
from calearner.domain.common.exceptions import ValidationError
from calearner.domain.common.value_objects.ids import IdentityId

# Domain constraints
MAX_EMAIL_LENGTH = 100


@dataclass
class Identity(Entity[IdentityId]):
    """
    A signed-in identity. Guests have no Identity at all.

    Business Rules:
    - Email must be non-empty, contain "@" and be at most MAX_EMAIL_LENGTH chars
    - The id scopes every persisted record of the identity
    """

    id: IdentityId
    email: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.email or "@" not in self.email:
            raise ValidationError("Email must be a valid address", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )
