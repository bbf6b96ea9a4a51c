from .ids import IdentityId
from .lesson_date import LessonDate

__all__ = [
    "IdentityId",
    "LessonDate",
]
