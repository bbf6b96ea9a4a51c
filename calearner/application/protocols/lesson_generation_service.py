from typing import Protocol

from calearner.domain.common.value_objects import LessonDate
from calearner.domain.learning.entities import DailyLesson, LearningTrack


class LessonGenerationServiceProtocol(Protocol):
    """Produces the lesson for one day. Raises on upstream failure; never retries."""

    async def generate(
        self, track: LearningTrack, date: LessonDate, custom_topic: str | None
    ) -> DailyLesson: ...
