from .daily_lesson import DailyLesson
from .lesson_archive import LessonArchive
from .track import LearningTrack, normalize_topic, same_selection
from .user_progress import UserProgress
from .user_settings import UserSettings

__all__ = [
    "DailyLesson",
    "LearningTrack",
    "LessonArchive",
    "UserProgress",
    "UserSettings",
    "normalize_topic",
    "same_selection",
]
