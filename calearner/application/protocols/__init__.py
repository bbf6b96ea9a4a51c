from .auth_service import AuthServiceProtocol
from .clock import ClockProtocol, LocalClock
from .key_value_store import KeyValueStoreProtocol
from .lesson_generation_service import LessonGenerationServiceProtocol
from .purchase_service import PurchaseServiceProtocol
from .session_repository import SessionRepositoryProtocol

__all__ = [
    "AuthServiceProtocol",
    "ClockProtocol",
    "KeyValueStoreProtocol",
    "LessonGenerationServiceProtocol",
    "LocalClock",
    "PurchaseServiceProtocol",
    "SessionRepositoryProtocol",
]
