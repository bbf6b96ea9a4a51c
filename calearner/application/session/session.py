"""The LearnerSession context object."""

from dataclasses import dataclass, field

from calearner.domain.billing.entities import SubscriptionState
from calearner.domain.common.value_objects import IdentityId
from calearner.domain.identity import Identity
from calearner.domain.learning.entities import (
    DailyLesson,
    LearningTrack,
    LessonArchive,
    UserProgress,
    UserSettings,
)


@dataclass(frozen=True)
class PurchasePrompt:
    """An open purchase flow. `track=None` means the generic premium offer."""

    track: LearningTrack | None = None
    custom_topic: str | None = None


@dataclass
class LearnerSession:
    """
    Everything the engine knows about the active identity.

    One session exists per active identity; identity changes replace every
    slice with the copies stored in the new identity's namespace. The flags
    are what UI collaborators poll while async work is in flight.
    """

    identity: Identity | None = None
    settings: UserSettings = field(default_factory=UserSettings.initial)
    progress: UserProgress = field(default_factory=UserProgress.initial)
    archive: LessonArchive = field(default_factory=LessonArchive)
    subscription: SubscriptionState = field(default_factory=SubscriptionState.initial)
    today_lesson: DailyLesson | None = None

    is_loading: bool = False
    is_purchase_processing: bool = False
    ad_pending: bool = False
    generation_failed: bool = False
    purchase_prompt: PurchasePrompt | None = None

    @property
    def identity_id(self) -> IdentityId | None:
        return self.identity.id if self.identity else None
