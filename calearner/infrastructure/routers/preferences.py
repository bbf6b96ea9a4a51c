from fastapi import APIRouter
from starlette import status

from calearner.infrastructure.common.di import Orchestrator
from calearner.infrastructure.schemas import SessionResponse, ThemeResponse

router = APIRouter(tags=["preferences"])


@router.post("/settings/theme", response_model=ThemeResponse, status_code=status.HTTP_200_OK)
def toggle_theme(orchestrator: Orchestrator) -> ThemeResponse:
    """Toggle dark mode for the active identity."""
    return ThemeResponse(dark_mode=orchestrator.toggle_theme())


@router.post("/progress/reset", response_model=SessionResponse, status_code=status.HTTP_200_OK)
def reset_progress(orchestrator: Orchestrator) -> SessionResponse:
    """
    Reset streaks, completion history, archive and today's lesson.

    Purchases and the free track are kept.
    """
    orchestrator.reset_progress()
    return SessionResponse.from_domain(orchestrator.state())
