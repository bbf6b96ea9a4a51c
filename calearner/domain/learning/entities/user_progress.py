"""UserProgress entity: streak counters and completion history."""

from dataclasses import dataclass, field

from calearner.domain.common.exceptions import InvariantViolationError
from calearner.domain.common.value_objects import LessonDate


@dataclass(frozen=True)
class UserProgress:
    """
    Streak and completion history for one identity.

    Business Rules:
    - Streak counters are never negative
    - longest_streak >= current_streak
    - history only gains entries (cleared by an explicit reset only)
    """

    current_streak: int = 0
    longest_streak: int = 0
    last_completed_date: LessonDate | None = None
    history: dict[LessonDate, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.current_streak < 0 or self.longest_streak < 0:
            raise InvariantViolationError("UserProgress", "streaks cannot be negative")
        if self.longest_streak < self.current_streak:
            raise InvariantViolationError(
                "UserProgress", "longest_streak must be >= current_streak"
            )

    def has_completed(self, date: LessonDate) -> bool:
        return self.history.get(date, False)

    @property
    def total_completed(self) -> int:
        return sum(1 for done in self.history.values() if done)

    @classmethod
    def initial(cls) -> "UserProgress":
        return cls()
