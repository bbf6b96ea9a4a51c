"""DailyLesson entity."""

from dataclasses import dataclass, replace

from calearner.domain.common.exceptions import ValidationError
from calearner.domain.common.value_objects import LessonDate
from calearner.domain.learning.entities.track import LearningTrack


@dataclass(frozen=True)
class DailyLesson:
    """
    The lesson produced for one calendar day.

    Business Rules:
    - At most one lesson exists per date per identity (keyed by `id`)
    - Title and content must be non-empty
    - `completed` flips to True once and stays there

    Lessons are immutable snapshots; state transitions return new instances
    so a completion can be committed together with progress and archive.
    """

    id: LessonDate
    track: LearningTrack
    title: str
    content: str
    practical_tip: str
    topic: str | None = None
    example: str | None = None
    completed: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Lesson title cannot be empty", field="title")
        if not self.content or not self.content.strip():
            raise ValidationError("Lesson content cannot be empty", field="content")

    @property
    def date(self) -> LessonDate:
        return self.id

    def is_for(self, date: LessonDate) -> bool:
        return self.id == date

    def mark_completed(self) -> "DailyLesson":
        """Return this lesson flagged as completed (idempotent)."""
        if self.completed:
            return self
        return replace(self, completed=True)

    @classmethod
    def create(
        cls,
        date: LessonDate,
        track: LearningTrack,
        title: str,
        content: str,
        practical_tip: str,
        topic: str | None = None,
        example: str | None = None,
    ) -> "DailyLesson":
        """
        Create a freshly generated lesson.

        Args:
            date: Local calendar day the lesson belongs to
            track: Track the lesson was generated for
            title: Lesson headline
            content: Lesson body
            practical_tip: One actionable takeaway
            topic: Free-text topic (CUSTOM track only)
            example: Optional worked example

        Returns:
            New, not yet completed DailyLesson
        """
        return cls(
            id=date,
            track=track,
            title=title.strip(),
            content=content.strip(),
            practical_tip=practical_tip.strip(),
            topic=topic.strip() if topic and track.is_custom else None,
            example=(example.strip() or None) if example else None,
        )
