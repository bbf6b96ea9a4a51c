"""
Base class for Value Objects.

A value object has no identity of its own: two instances holding the same
attributes are interchangeable. Subclasses are frozen dataclasses that
validate themselves in __post_init__, e.g. LessonDate or IdentityId.
"""


class ValueObject:
    """Equality, hashing and repr derived from the dataclass fields."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash((type(self).__name__, *self.__dict__.values()))

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{type(self).__name__}({attrs})"
