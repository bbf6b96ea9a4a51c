"""Custom exception hierarchy for CaLearner application."""

from starlette import status


class CalearnerError(Exception):
    """Base exception for all CaLearner errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(CalearnerError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class ServiceError(CalearnerError):
    """Service layer error."""


class StorageError(ServiceError):
    """The key-value store could not complete a read or write."""

    def __init__(self, key: str, reason: str) -> None:
        """Initialize with the affected key and the backend's reason."""
        self.key = key
        self.reason = reason
        super().__init__(f"Storage operation on '{key}' failed: {reason}")


class LessonGenerationError(ServiceError):
    """The lesson generation service did not return a usable lesson."""

    def __init__(self, reason: str) -> None:
        """Initialize with the upstream reason and 502 status code."""
        self.reason = reason
        super().__init__(
            f"Lesson generation failed: {reason}", status_code=status.HTTP_502_BAD_GATEWAY
        )
