import logging

from fastapi import APIRouter, HTTPException
from starlette import status

from calearner.domain.common.exceptions import DomainError
from calearner.exceptions import CalearnerError
from calearner.infrastructure.common.di import Orchestrator
from calearner.infrastructure.common.exception_handlers import UNEXPECTED_ERROR_DETAIL
from calearner.infrastructure.schemas import LoginRequest, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["session"])


@router.get("/session", response_model=SessionResponse, status_code=status.HTTP_200_OK)
def get_session(orchestrator: Orchestrator) -> SessionResponse:
    """
    Get the active learner session.

    Returns settings, progress, subscription, today's lesson and the
    in-flight flags (loading, purchase processing, pending ad) that the UI
    renders from.
    """
    return SessionResponse.from_domain(orchestrator.state())


@router.post("/auth/login", response_model=SessionResponse, status_code=status.HTTP_200_OK)
async def login(request: LoginRequest, orchestrator: Orchestrator) -> SessionResponse:
    """
    Sign in and switch to the identity's stored session.

    Args:
        request: Email address to sign in with

    Returns:
        The session loaded from the identity's namespace

    Raises:
        HTTPException: If signing in fails unexpectedly
    """
    try:
        session = await orchestrator.login(request.email)
        return SessionResponse.from_domain(session)
    except (CalearnerError, DomainError):
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to sign in: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.post("/auth/logout", response_model=SessionResponse, status_code=status.HTTP_200_OK)
async def logout(orchestrator: Orchestrator) -> SessionResponse:
    """Sign out and fall back to the guest session."""
    try:
        session = await orchestrator.logout()
        return SessionResponse.from_domain(session)
    except (CalearnerError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to sign out: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e
