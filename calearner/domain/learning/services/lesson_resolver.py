"""Domain service deciding how today's lesson is obtained."""

from dataclasses import dataclass
from enum import StrEnum

from calearner.domain.common.value_objects import LessonDate
from calearner.domain.learning.entities import DailyLesson, LearningTrack, same_selection


class LessonAction(StrEnum):
    """What the caller has to do to show the requested lesson."""

    NO_OP = "no_op"
    REUSE_CACHED = "reuse_cached"
    SHOW_AD_THEN_GENERATE = "show_ad_then_generate"
    GENERATE_NOW = "generate_now"


@dataclass(frozen=True)
class LessonResolution:
    """Result of lesson resolution."""

    action: LessonAction
    lesson: DailyLesson | None = None


class LessonResolver:
    """Resolves today's lesson for a (track, topic) selection.

    Decision chain:
    1. The in-memory lesson already matches date and selection -> NO_OP
    2. A stored lesson for the date has the same track -> no ad. It is reused
       (REUSE_CACHED) unless it is a CUSTOM lesson about another topic, which
       is regenerated right away (GENERATE_NOW).
    3. Nothing stored for the track: non-premium -> SHOW_AD_THEN_GENERATE,
       premium -> GENERATE_NOW
    """

    def resolve(
        self,
        track: LearningTrack,
        date: LessonDate,
        custom_topic: str | None,
        current_lesson: DailyLesson | None,
        stored_lesson: DailyLesson | None,
        subscription_is_premium: bool,
    ) -> LessonResolution:
        if current_lesson is not None and self._matches(current_lesson, track, date, custom_topic):
            return LessonResolution(LessonAction.NO_OP, current_lesson)

        if (
            stored_lesson is not None
            and stored_lesson.is_for(date)
            and stored_lesson.track == track
        ):
            # Today's ad was already shown for this track
            if self._matches(stored_lesson, track, date, custom_topic):
                return LessonResolution(LessonAction.REUSE_CACHED, stored_lesson)
            return LessonResolution(LessonAction.GENERATE_NOW)

        if subscription_is_premium:
            return LessonResolution(LessonAction.GENERATE_NOW)
        return LessonResolution(LessonAction.SHOW_AD_THEN_GENERATE)

    def _matches(
        self,
        lesson: DailyLesson,
        track: LearningTrack,
        date: LessonDate,
        custom_topic: str | None,
    ) -> bool:
        return lesson.is_for(date) and same_selection(
            lesson.track, lesson.topic, track, custom_topic
        )
