import logging

from fastapi import APIRouter, HTTPException
from starlette import status

from calearner.domain.common.exceptions import DomainError
from calearner.domain.common.value_objects import LessonDate
from calearner.exceptions import CalearnerError, NotFoundError
from calearner.infrastructure.common.di import Orchestrator
from calearner.infrastructure.common.exception_handlers import UNEXPECTED_ERROR_DETAIL
from calearner.infrastructure.schemas import (
    ArchiveResponse,
    CompletionResponse,
    LessonActionResponse,
    LessonSchema,
    SessionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lessons"])


@router.post("/lessons/today", response_model=LessonActionResponse, status_code=status.HTTP_200_OK)
async def ensure_today_lesson(orchestrator: Orchestrator) -> LessonActionResponse:
    """
    Make sure today's lesson for the selected track is available.

    Idempotent: a lesson already shown or stored for today is reused. Without
    one, premium users get a fresh lesson right away while everybody else
    first sees an ad (`show_ad_then_generate`). After a failed generation
    this is the manual retry.

    Raises:
        HTTPException: 409 if no track is selected yet
    """
    try:
        if orchestrator.session.generation_failed:
            resolution = await orchestrator.retry_lesson()
        else:
            resolution = await orchestrator.ensure_lesson_for_today()
        return LessonActionResponse(
            action=resolution.action,
            session=SessionResponse.from_domain(orchestrator.state()),
        )
    except (CalearnerError, DomainError):
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to resolve today's lesson: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.post(
    "/lessons/today/ad-closed", response_model=SessionResponse, status_code=status.HTTP_200_OK
)
async def close_ad(orchestrator: Orchestrator) -> SessionResponse:
    """Report the ad as closed and generate the lesson for the selected track."""
    try:
        await orchestrator.close_ad()
        return SessionResponse.from_domain(orchestrator.state())
    except (CalearnerError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to generate lesson after ad: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.post(
    "/lessons/today/complete", response_model=CompletionResponse, status_code=status.HTTP_200_OK
)
def complete_today_lesson(orchestrator: Orchestrator) -> CompletionResponse:
    """
    Complete today's lesson.

    Updates the streak and archives the lesson. Completing an already
    completed lesson (or when no lesson is shown) changes nothing.
    """
    try:
        result = orchestrator.complete_lesson()
        return CompletionResponse(
            changed=result.changed, session=SessionResponse.from_domain(orchestrator.state())
        )
    except (CalearnerError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to complete lesson: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.get("/archive", response_model=ArchiveResponse, status_code=status.HTTP_200_OK)
def get_archive(orchestrator: Orchestrator) -> ArchiveResponse:
    """List archived (completed) lessons, newest first."""
    lessons = orchestrator.session.archive.newest_first()
    return ArchiveResponse(
        items=[LessonSchema.from_domain(lesson) for lesson in lessons], total=len(lessons)
    )


@router.get("/archive/{lesson_date}", response_model=LessonSchema, status_code=status.HTTP_200_OK)
def get_archived_lesson(lesson_date: str, orchestrator: Orchestrator) -> LessonSchema:
    """
    Get the lesson archived for one day.

    Args:
        lesson_date: Day formatted as YYYY-MM-DD

    Raises:
        HTTPException: 400 for a malformed date, 404 if nothing was archived
    """
    lesson = orchestrator.session.archive.get(LessonDate.parse(lesson_date))
    if lesson is None:
        raise NotFoundError(f"No archived lesson for {lesson_date}")
    return LessonSchema.from_domain(lesson)
