"""Protocol for the namespaced session state repository."""

from typing import Protocol

from calearner.domain.billing.entities import SubscriptionState
from calearner.domain.common.value_objects import IdentityId, LessonDate
from calearner.domain.learning.entities import (
    DailyLesson,
    LessonArchive,
    UserProgress,
    UserSettings,
)


class SessionRepositoryProtocol(Protocol):
    """Loads and stores the per-identity state slices.

    Loads never fail: an absent or unreadable record yields the slice's
    default value. Saves and removals raise StorageError on backend failure.
    `identity_id=None` addresses the guest namespace.
    """

    def load_settings(self, identity_id: IdentityId | None) -> UserSettings: ...

    def load_progress(self, identity_id: IdentityId | None) -> UserProgress: ...

    def load_archive(self, identity_id: IdentityId | None) -> LessonArchive: ...

    def load_subscription(self, identity_id: IdentityId | None) -> SubscriptionState: ...

    def load_lesson(
        self, identity_id: IdentityId | None, date: LessonDate
    ) -> DailyLesson | None: ...

    def save_settings(self, identity_id: IdentityId | None, settings: UserSettings) -> None: ...

    def save_progress(self, identity_id: IdentityId | None, progress: UserProgress) -> None: ...

    def save_archive(self, identity_id: IdentityId | None, archive: LessonArchive) -> None: ...

    def save_subscription(
        self, identity_id: IdentityId | None, subscription: SubscriptionState
    ) -> None: ...

    def save_lesson(self, identity_id: IdentityId | None, lesson: DailyLesson) -> None: ...

    def remove_progress(self, identity_id: IdentityId | None) -> None: ...

    def remove_archive(self, identity_id: IdentityId | None) -> None: ...

    def remove_lesson(self, identity_id: IdentityId | None, date: LessonDate) -> None: ...
