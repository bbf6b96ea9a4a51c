"""Learning domain exceptions."""

from calearner.domain.common.exceptions import BusinessRuleViolationError


class AlreadyOnboardedError(BusinessRuleViolationError):
    """Raised when onboarding runs for an identity that already finished it."""

    def __init__(self) -> None:
        super().__init__("single_onboarding", "Onboarding has already been completed")


class NoTrackSelectedError(BusinessRuleViolationError):
    """Raised when a lesson is requested before any track was selected."""

    def __init__(self) -> None:
        super().__init__("track_required", "No learning track selected")
