"""Request and response schemas for session actions."""

from pydantic import BaseModel, Field

from calearner.application.session.orchestrator import TrackSwitchOutcome
from calearner.domain.billing.entities import PremiumType, Sku
from calearner.domain.learning.entities import LearningTrack
from calearner.domain.learning.services import LessonAction
from calearner.infrastructure.schemas.session_schemas import SessionResponse


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=100)


class TrackSelectionRequest(BaseModel):
    """Track plus the free-text topic used by the custom track."""

    track: LearningTrack
    custom_topic: str | None = Field(None, max_length=100)


class PurchaseFlowRequest(BaseModel):
    track: LearningTrack | None = None
    custom_topic: str | None = Field(None, max_length=100)


class SubscriptionPurchaseRequest(BaseModel):
    plan: PremiumType


class LessonActionResponse(BaseModel):
    """What was done to obtain today's lesson, with the resulting state."""

    action: LessonAction
    session: SessionResponse


class TrackSwitchResponse(BaseModel):
    outcome: TrackSwitchOutcome
    session: SessionResponse


class CompletionResponse(BaseModel):
    changed: bool
    session: SessionResponse


class PurchaseResponse(BaseModel):
    success: bool
    sku: Sku
    message: str | None = None
    session: SessionResponse


class ThemeResponse(BaseModel):
    dark_mode: bool
