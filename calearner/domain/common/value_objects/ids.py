from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class IdentityId(EntityId):
    """Identifier of a signed-in identity; also the storage namespace suffix."""
