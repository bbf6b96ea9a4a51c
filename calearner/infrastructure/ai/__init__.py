from .ai_service import AILessonGenerationService

__all__ = ["AILessonGenerationService"]
