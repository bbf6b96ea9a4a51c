import logging

from fastapi import APIRouter, HTTPException
from starlette import status

from calearner.domain.common.exceptions import DomainError
from calearner.exceptions import CalearnerError
from calearner.infrastructure.common.di import Orchestrator
from calearner.infrastructure.common.exception_handlers import UNEXPECTED_ERROR_DETAIL
from calearner.infrastructure.schemas import (
    LessonActionResponse,
    SessionResponse,
    TrackSelectionRequest,
    TrackSwitchResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tracks"])


@router.post(
    "/onboarding",
    response_model=LessonActionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def complete_onboarding(
    request: TrackSelectionRequest, orchestrator: Orchestrator
) -> LessonActionResponse:
    """
    Finish onboarding with the first track.

    The chosen track becomes the free trial entitlement. A custom track
    needs a topic; that topic is what the free entitlement covers.

    Args:
        request: Chosen track and, for the custom track, its topic

    Returns:
        How today's lesson is obtained, plus the updated session

    Raises:
        HTTPException: 400 for a custom track without topic, 409 when
            onboarding was already completed
    """
    try:
        resolution = await orchestrator.onboard(request.track, request.custom_topic)
        return LessonActionResponse(
            action=resolution.action,
            session=SessionResponse.from_domain(orchestrator.state()),
        )
    except (CalearnerError, DomainError):
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to complete onboarding: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.post("/tracks/switch", response_model=TrackSwitchResponse, status_code=status.HTTP_200_OK)
async def switch_track(
    request: TrackSelectionRequest, orchestrator: Orchestrator
) -> TrackSwitchResponse:
    """
    Switch the selected track.

    Switching to a track the user does not own changes nothing and answers
    `purchase_required`; the session then carries the purchase prompt.
    """
    try:
        outcome = await orchestrator.switch_track(request.track, request.custom_topic)
        return TrackSwitchResponse(
            outcome=outcome, session=SessionResponse.from_domain(orchestrator.state())
        )
    except (CalearnerError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to switch track to {request.track}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e
