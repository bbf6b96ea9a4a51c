import structlog

from calearner.domain.common.value_objects import LessonDate
from calearner.domain.learning.entities import DailyLesson, LearningTrack
from calearner.exceptions import LessonGenerationError
from calearner.infrastructure.ai.ai_agents import get_lesson_agent

logger = structlog.get_logger(__name__)


def build_lesson_prompt(track: LearningTrack, date: LessonDate, custom_topic: str | None) -> str:
    subject = custom_topic if track.is_custom and custom_topic else track.value
    return f"Track: {subject}\nDate: {date}"


class AILessonGenerationService:
    async def generate(
        self,
        track: LearningTrack,
        date: LessonDate,
        custom_topic: str | None = None,
    ) -> DailyLesson:
        if track.is_custom and not custom_topic:
            raise LessonGenerationError("custom track requires a topic")

        agent = get_lesson_agent()
        try:
            result = await agent.run(build_lesson_prompt(track, date, custom_topic))
        except LessonGenerationError:
            raise
        except Exception as e:
            logger.error("ai_lesson_request_failed", track=track.value, error=str(e))
            raise LessonGenerationError(str(e)) from e

        output = result.output
        return DailyLesson.create(
            date=date,
            track=track,
            title=output.title,
            content=output.content,
            practical_tip=output.practical_tip,
            topic=custom_topic,
            example=output.example,
        )
