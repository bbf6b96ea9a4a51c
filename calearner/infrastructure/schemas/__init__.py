from .action_schemas import (
    CompletionResponse,
    LessonActionResponse,
    LoginRequest,
    PurchaseFlowRequest,
    PurchaseResponse,
    SubscriptionPurchaseRequest,
    ThemeResponse,
    TrackSelectionRequest,
    TrackSwitchResponse,
)
from .session_schemas import (
    ArchiveResponse,
    LessonSchema,
    ProgressSchema,
    PurchasePromptSchema,
    SessionResponse,
    SettingsSchema,
    SubscriptionSchema,
)

__all__ = [
    "ArchiveResponse",
    "CompletionResponse",
    "LessonActionResponse",
    "LessonSchema",
    "LoginRequest",
    "ProgressSchema",
    "PurchaseFlowRequest",
    "PurchasePromptSchema",
    "PurchaseResponse",
    "SessionResponse",
    "SettingsSchema",
    "SubscriptionPurchaseRequest",
    "SubscriptionSchema",
    "ThemeResponse",
    "TrackSelectionRequest",
    "TrackSwitchResponse",
]
