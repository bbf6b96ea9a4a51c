"""LessonArchive: completed lessons keyed by date."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from calearner.domain.common.value_objects import LessonDate
from calearner.domain.learning.entities.daily_lesson import DailyLesson


@dataclass(frozen=True)
class LessonArchive:
    """
    Durable record of completed lessons.

    Append-only: recording a date again replaces that date's entry, nothing
    is ever removed except by a progress reset (a new, empty archive).
    """

    entries: dict[LessonDate, DailyLesson] = field(default_factory=dict)

    def record(self, date: LessonDate, lesson: DailyLesson) -> "LessonArchive":
        """Return a new archive with `lesson` stored under `date`, replacing any prior entry."""
        return LessonArchive(entries={**self.entries, date: lesson})

    def get(self, date: LessonDate) -> DailyLesson | None:
        return self.entries.get(date)

    def newest_first(self) -> list[DailyLesson]:
        return [self.entries[d] for d in sorted(self.entries, reverse=True)]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[LessonDate]:
        return iter(self.entries)

    def __contains__(self, date: object) -> bool:
        return date in self.entries
