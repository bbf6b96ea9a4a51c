"""Key-value implementation of the session repository."""

from collections.abc import Callable
from typing import TypeVar

import structlog
from pydantic import BaseModel

from calearner.application.protocols import AuthServiceProtocol, KeyValueStoreProtocol
from calearner.domain.billing.entities import SubscriptionState
from calearner.domain.common.exceptions import DomainError
from calearner.domain.common.value_objects import IdentityId, LessonDate
from calearner.domain.learning.entities import (
    DailyLesson,
    LessonArchive,
    UserProgress,
    UserSettings,
)
from calearner.exceptions import StorageError
from calearner.infrastructure.persistence.mappers import (
    ArchiveMapper,
    LessonMapper,
    ProgressMapper,
    SettingsMapper,
    SubscriptionMapper,
)
from calearner.infrastructure.persistence.schemas import (
    ArchiveRecord,
    LessonRecord,
    ProgressRecord,
    SettingsRecord,
    SubscriptionRecord,
)

logger = structlog.get_logger(__name__)

R = TypeVar("R", bound=BaseModel)
T = TypeVar("T")


class KeyValueSessionRepository:
    """Stores each state slice as one JSON value under a namespaced key."""

    def __init__(
        self,
        store: KeyValueStoreProtocol,
        auth_service: AuthServiceProtocol,
        key_prefix: str = "calearner",
    ) -> None:
        self.store = store
        self.auth_service = auth_service
        self.key_prefix = key_prefix
        self.settings_mapper = SettingsMapper()
        self.progress_mapper = ProgressMapper()
        self.archive_mapper = ArchiveMapper()
        self.subscription_mapper = SubscriptionMapper()
        self.lesson_mapper = LessonMapper()

    def _key(self, name: str, identity_id: IdentityId | None) -> str:
        return self.auth_service.namespace_key(f"{self.key_prefix}_{name}", identity_id)

    def _lesson_key(self, identity_id: IdentityId | None, date: LessonDate) -> str:
        return self._key(f"lesson_{date}", identity_id)

    def _load(self, key: str, schema: type[R], to_domain: Callable[[R], T]) -> T | None:
        try:
            raw = self.store.get(key)
        except StorageError as e:
            logger.warning("stored_record_read_failed", key=key, error=e.reason)
            return None
        if raw is None:
            return None

        try:
            return to_domain(schema.model_validate_json(raw))
        except (ValueError, DomainError) as e:
            # pydantic's ValidationError is a ValueError
            logger.warning("stored_record_unreadable", key=key, error=str(e))
            return None

    def _save(self, key: str, record: BaseModel) -> None:
        self.store.set(key, record.model_dump_json())
        logger.debug("stored_record_saved", key=key)

    # Loads

    def load_settings(self, identity_id: IdentityId | None) -> UserSettings:
        loaded = self._load(
            self._key("settings", identity_id), SettingsRecord, self.settings_mapper.to_domain
        )
        return loaded or UserSettings.initial()

    def load_progress(self, identity_id: IdentityId | None) -> UserProgress:
        loaded = self._load(
            self._key("progress", identity_id), ProgressRecord, self.progress_mapper.to_domain
        )
        return loaded or UserProgress.initial()

    def load_archive(self, identity_id: IdentityId | None) -> LessonArchive:
        loaded = self._load(
            self._key("archive", identity_id), ArchiveRecord, self.archive_mapper.to_domain
        )
        return loaded if loaded is not None else LessonArchive()

    def load_subscription(self, identity_id: IdentityId | None) -> SubscriptionState:
        loaded = self._load(
            self._key("subscription", identity_id),
            SubscriptionRecord,
            self.subscription_mapper.to_domain,
        )
        return loaded or SubscriptionState.initial()

    def load_lesson(self, identity_id: IdentityId | None, date: LessonDate) -> DailyLesson | None:
        lesson = self._load(
            self._lesson_key(identity_id, date), LessonRecord, self.lesson_mapper.to_domain
        )
        if lesson is not None and not lesson.is_for(date):
            logger.warning("stored_lesson_date_mismatch", date=str(date), stored=str(lesson.date))
            return None
        return lesson

    # Saves

    def save_settings(self, identity_id: IdentityId | None, settings: UserSettings) -> None:
        self._save(self._key("settings", identity_id), self.settings_mapper.to_record(settings))

    def save_progress(self, identity_id: IdentityId | None, progress: UserProgress) -> None:
        self._save(self._key("progress", identity_id), self.progress_mapper.to_record(progress))

    def save_archive(self, identity_id: IdentityId | None, archive: LessonArchive) -> None:
        self._save(self._key("archive", identity_id), self.archive_mapper.to_record(archive))

    def save_subscription(
        self, identity_id: IdentityId | None, subscription: SubscriptionState
    ) -> None:
        self._save(
            self._key("subscription", identity_id),
            self.subscription_mapper.to_record(subscription),
        )

    def save_lesson(self, identity_id: IdentityId | None, lesson: DailyLesson) -> None:
        self._save(
            self._lesson_key(identity_id, lesson.date), self.lesson_mapper.to_record(lesson)
        )

    # Removals

    def remove_progress(self, identity_id: IdentityId | None) -> None:
        self.store.remove(self._key("progress", identity_id))

    def remove_archive(self, identity_id: IdentityId | None) -> None:
        self.store.remove(self._key("archive", identity_id))

    def remove_lesson(self, identity_id: IdentityId | None, date: LessonDate) -> None:
        self.store.remove(self._lesson_key(identity_id, date))
