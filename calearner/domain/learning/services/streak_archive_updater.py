"""
Domain service for lesson completion bookkeeping.

This is a pure domain service with no infrastructure dependencies.
"""

from dataclasses import dataclass

from calearner.domain.common.value_objects import LessonDate
from calearner.domain.learning.entities import DailyLesson, LessonArchive, UserProgress


@dataclass(frozen=True)
class CompletionResult:
    """Lesson, progress and archive produced together by one completion."""

    lesson: DailyLesson | None
    progress: UserProgress
    archive: LessonArchive
    changed: bool


class StreakArchiveUpdater:
    """
    Recomputes streak counters and the archive when a lesson is completed.

    Inputs are never mutated; all three outputs are built before anything is
    returned so the caller can commit them as a unit.
    """

    def complete(
        self,
        today_lesson: DailyLesson | None,
        progress: UserProgress,
        archive: LessonArchive,
        today: LessonDate,
    ) -> CompletionResult:
        """
        Complete today's lesson.

        Args:
            today_lesson: Lesson currently shown, if any
            progress: Current streak/history state
            archive: Current archive
            today: Local calendar day of the completion

        Returns:
            CompletionResult; `changed` is False (inputs returned as-is) when
            there is no lesson or it is already completed
        """
        if today_lesson is None or today_lesson.completed:
            return CompletionResult(today_lesson, progress, archive, changed=False)

        current_streak = self.next_streak(progress, today)
        new_progress = UserProgress(
            current_streak=current_streak,
            longest_streak=max(current_streak, progress.longest_streak),
            last_completed_date=today,
            history={**progress.history, today: True},
        )

        completed_lesson = today_lesson.mark_completed()
        new_archive = archive.record(today, completed_lesson)

        return CompletionResult(completed_lesson, new_progress, new_archive, changed=True)

    def next_streak(self, progress: UserProgress, today: LessonDate) -> int:
        """
        Streak value after completing on `today`.

        One day after the last completion extends the streak, a longer gap
        restarts it at 1, and the same day leaves it unchanged.
        """
        if progress.last_completed_date is None:
            return 1

        diff_days = today.days_between(progress.last_completed_date)
        if diff_days == 1:
            return progress.current_streak + 1
        if diff_days > 1:
            return 1
        return progress.current_streak
