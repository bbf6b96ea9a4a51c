from .lesson_resolver import LessonAction, LessonResolution, LessonResolver
from .streak_archive_updater import CompletionResult, StreakArchiveUpdater

__all__ = [
    "CompletionResult",
    "LessonAction",
    "LessonResolution",
    "LessonResolver",
    "StreakArchiveUpdater",
]
