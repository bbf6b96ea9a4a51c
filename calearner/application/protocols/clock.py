from typing import Protocol

from calearner.domain.common.value_objects import LessonDate


class ClockProtocol(Protocol):
    def today(self) -> LessonDate: ...


class LocalClock:
    """Reads the local calendar day from the system clock."""

    def today(self) -> LessonDate:
        return LessonDate.today()
