"""
Domain layer exceptions.

Raised by entities and domain services; the API layer maps each family to a
status code (ValidationError -> 400, BusinessRuleViolationError -> 409, any
other DomainError -> 500).
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, **context: object) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({extra})"


class ValidationError(DomainError):
    """
    Input that can never form a valid domain object.

    Example: A custom track selected without a topic, a malformed date.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message, field=field, value=value)
        self.field = field
        self.value = value


class BusinessRuleViolationError(DomainError):
    """
    A valid request the current state does not allow.

    Example: Onboarding an identity that has already been onboarded.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        super().__init__(message or f"Business rule violated: {rule}", rule=rule)
        self.rule = rule


class InvariantViolationError(DomainError):
    """An entity reached a state that should be impossible, e.g. negative streaks."""

    def __init__(self, entity: str, invariant: str) -> None:
        super().__init__(f"Invariant violation in {entity}: {invariant}")
        self.entity = entity
        self.invariant = invariant
