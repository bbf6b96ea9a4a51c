"""Use case for resolving, generating and completing the daily lesson."""

import structlog

from calearner.application.protocols import (
    ClockProtocol,
    LessonGenerationServiceProtocol,
    SessionRepositoryProtocol,
)
from calearner.application.session.persistence import persist
from calearner.application.session.session import LearnerSession
from calearner.domain.common.value_objects import LessonDate
from calearner.domain.learning.entities import DailyLesson, LearningTrack
from calearner.domain.learning.exceptions import NoTrackSelectedError
from calearner.domain.learning.services import (
    CompletionResult,
    LessonAction,
    LessonResolution,
    LessonResolver,
    StreakArchiveUpdater,
)

logger = structlog.get_logger(__name__)


class DailyLessonUseCase:
    """Lesson cache & generation controller plus the completion commit."""

    def __init__(
        self,
        session_repository: SessionRepositoryProtocol,
        lesson_generation_service: LessonGenerationServiceProtocol,
        lesson_resolver: LessonResolver,
        streak_archive_updater: StreakArchiveUpdater,
        clock: ClockProtocol,
    ) -> None:
        self.session_repository = session_repository
        self.lesson_generation_service = lesson_generation_service
        self.lesson_resolver = lesson_resolver
        self.streak_archive_updater = streak_archive_updater
        self.clock = clock

    async def ensure_lesson_for_today(
        self,
        session: LearnerSession,
        track: LearningTrack | None = None,
        custom_topic: str | None = None,
    ) -> LessonResolution:
        """
        Make sure today's lesson for the selection is shown, or gated behind an ad.

        Safe to call repeatedly: once today's lesson matches the selection
        this is a no-op.

        Args:
            session: Active learner session
            track: Track to resolve, defaults to the selected track
            custom_topic: Topic for CUSTOM, defaults to the selected topic

        Returns:
            The resolution that was applied

        Raises:
            NoTrackSelectedError: If no track is given or selected
        """
        track = track or session.settings.selected_track
        if track is None:
            raise NoTrackSelectedError
        if track.is_custom and not custom_topic:
            custom_topic = session.settings.custom_topic

        today = self.clock.today()
        stored = self.session_repository.load_lesson(session.identity_id, today)
        resolution = self.lesson_resolver.resolve(
            track=track,
            date=today,
            custom_topic=custom_topic,
            current_lesson=session.today_lesson,
            stored_lesson=stored,
            subscription_is_premium=session.subscription.is_premium,
        )

        logger.debug(
            "lesson_resolved", track=track.value, date=str(today), action=resolution.action.value
        )

        if resolution.action is LessonAction.REUSE_CACHED:
            session.today_lesson = resolution.lesson
            session.generation_failed = False
        elif resolution.action is LessonAction.SHOW_AD_THEN_GENERATE:
            session.ad_pending = True
        elif resolution.action is LessonAction.GENERATE_NOW:
            await self.generate(session, track, today, custom_topic)

        return resolution

    async def close_ad(self, session: LearnerSession) -> DailyLesson | None:
        """
        Finish the ad gate and generate today's lesson.

        Generation uses the track and topic selected *now*, which may differ
        from the selection that raised the gate.
        """
        if not session.ad_pending:
            logger.warning("ad_close_without_pending_ad")
            return session.today_lesson

        session.ad_pending = False
        track = session.settings.selected_track
        if track is None:
            return None
        today = self.clock.today()
        return await self.generate(session, track, today, session.settings.custom_topic)

    async def generate(
        self,
        session: LearnerSession,
        track: LearningTrack,
        date: LessonDate,
        custom_topic: str | None,
    ) -> DailyLesson | None:
        """
        Generate, store and show the lesson for `date`.

        A lesson generated for a day already present in the completion history
        starts out completed. On failure no lesson is shown and the session is
        flagged for a manual retry.
        """
        session.is_loading = True
        session.generation_failed = False
        try:
            lesson = await self.lesson_generation_service.generate(track, date, custom_topic)
        except Exception as e:
            logger.error(
                "lesson_generation_failed", track=track.value, date=str(date), error=str(e)
            )
            session.today_lesson = None
            session.generation_failed = True
            return None
        finally:
            session.is_loading = False

        if session.progress.has_completed(date):
            lesson = lesson.mark_completed()

        session.today_lesson = lesson
        persist("lesson", lambda: self.session_repository.save_lesson(session.identity_id, lesson))

        logger.info(
            "lesson_generated", track=track.value, date=str(date), completed=lesson.completed
        )
        return lesson

    async def retry(self, session: LearnerSession) -> LessonResolution:
        """Manual retry after a failed generation; the failure flag is cleared first."""
        session.generation_failed = False
        return await self.ensure_lesson_for_today(session)

    def complete(self, session: LearnerSession) -> CompletionResult:
        """
        Complete today's lesson and commit lesson, progress and archive together.

        Completing an already-completed lesson changes nothing.
        """
        result = self.streak_archive_updater.complete(
            session.today_lesson, session.progress, session.archive, self.clock.today()
        )
        if not result.changed or result.lesson is None:
            return result

        lesson = result.lesson
        session.today_lesson = lesson
        session.progress = result.progress
        session.archive = result.archive

        repo = self.session_repository
        identity_id = session.identity_id
        persist("lesson", lambda: repo.save_lesson(identity_id, lesson))
        persist("progress", lambda: repo.save_progress(identity_id, result.progress))
        persist("archive", lambda: repo.save_archive(identity_id, result.archive))

        logger.info(
            "lesson_completed",
            date=str(lesson.id),
            current_streak=result.progress.current_streak,
            longest_streak=result.progress.longest_streak,
        )
        return result
