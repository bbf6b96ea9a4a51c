import logging

from fastapi import APIRouter, HTTPException
from starlette import status

from calearner.domain.common.exceptions import DomainError
from calearner.exceptions import CalearnerError
from calearner.infrastructure.common.di import Orchestrator
from calearner.infrastructure.common.exception_handlers import UNEXPECTED_ERROR_DETAIL
from calearner.infrastructure.schemas import (
    PurchaseFlowRequest,
    PurchaseResponse,
    SessionResponse,
    SubscriptionPurchaseRequest,
    TrackSelectionRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/purchases", tags=["purchases"])


@router.post("/open", response_model=SessionResponse, status_code=status.HTTP_200_OK)
def open_purchase_flow(request: PurchaseFlowRequest, orchestrator: Orchestrator) -> SessionResponse:
    """Open the purchase flow, for a specific track or the premium offer."""
    orchestrator.open_purchase_flow(request.track, request.custom_topic)
    return SessionResponse.from_domain(orchestrator.state())


@router.post("/dismiss", response_model=SessionResponse, status_code=status.HTTP_200_OK)
def dismiss_purchase_flow(orchestrator: Orchestrator) -> SessionResponse:
    orchestrator.dismiss_purchase_flow()
    return SessionResponse.from_domain(orchestrator.state())


@router.post("/subscription", response_model=PurchaseResponse, status_code=status.HTTP_200_OK)
async def purchase_subscription(
    request: SubscriptionPurchaseRequest, orchestrator: Orchestrator
) -> PurchaseResponse:
    """
    Buy a premium plan.

    A declined or failed purchase is not an HTTP error: the response carries
    `success=false` and a message to show.

    Raises:
        HTTPException: 400 if the plan is not purchasable
    """
    try:
        result = await orchestrator.purchase_subscription(request.plan)
        return PurchaseResponse(
            success=result.success,
            sku=result.sku,
            message=result.message,
            session=SessionResponse.from_domain(orchestrator.state()),
        )
    except (CalearnerError, DomainError):
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to purchase plan {request.plan}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e


@router.post("/track", response_model=PurchaseResponse, status_code=status.HTTP_200_OK)
async def purchase_track(
    request: TrackSelectionRequest, orchestrator: Orchestrator
) -> PurchaseResponse:
    """
    Buy a single track (or a single custom topic) and switch to it.

    Without a topic, a custom track purchase uses the topic of the open
    purchase flow.
    """
    try:
        result = await orchestrator.purchase_track(request.track, request.custom_topic)
        return PurchaseResponse(
            success=result.success,
            sku=result.sku,
            message=result.message,
            session=SessionResponse.from_domain(orchestrator.state()),
        )
    except (CalearnerError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to purchase track {request.track}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=UNEXPECTED_ERROR_DETAIL,
        ) from e
