"""
LessonDate value object.

Lessons, history entries and archive records are keyed by the user's local
calendar day. Dates are never normalized to UTC.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Self

from ..exceptions import ValidationError
from ..value_object import ValueObject

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class LessonDate(ValueObject):
    """One local calendar day, rendered as YYYY-MM-DD."""

    value: date

    def __post_init__(self) -> None:
        if isinstance(self.value, datetime) or not isinstance(self.value, date):
            raise ValidationError("LessonDate must wrap a calendar date", field="value")

    def __str__(self) -> str:
        return self.value.isoformat()

    def __lt__(self, other: "LessonDate") -> bool:
        return self.value < other.value

    @classmethod
    def today(cls) -> Self:
        """Return the current local calendar day."""
        return cls(datetime.now().date())  # noqa: DTZ005

    @classmethod
    def parse(cls, raw: str) -> Self:
        """
        Parse a YYYY-MM-DD string.

        Raises:
            ValidationError: If the string is not a valid calendar day
        """
        if not _DATE_PATTERN.match(raw):
            raise ValidationError("Date must be formatted as YYYY-MM-DD", field="date", value=raw)
        try:
            return cls(date.fromisoformat(raw))
        except ValueError as err:
            raise ValidationError(f"Invalid calendar date: {raw}", field="date") from err

    def days_between(self, other: "LessonDate") -> int:
        """Absolute number of whole days separating two dates."""
        return abs((self.value - other.value).days)
