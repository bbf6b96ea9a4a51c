"""Tests for KeyValueSessionRepository."""

from datetime import date

import pytest

from calearner.domain.billing.entities import Sku, SubscriptionState, apply_purchase
from calearner.domain.common.value_objects import IdentityId, LessonDate
from calearner.domain.learning.entities import (
    DailyLesson,
    LearningTrack,
    LessonArchive,
    UserProgress,
    UserSettings,
)
from calearner.exceptions import StorageError
from calearner.infrastructure.identity import LocalAuthService
from calearner.infrastructure.persistence import InMemoryKeyValueStore, KeyValueSessionRepository

DAY = LessonDate(date(2024, 1, 10))
READER = IdentityId("abc123")


class BrokenStore(InMemoryKeyValueStore):
    """Store whose backend is gone."""

    def get(self, key: str) -> str | None:
        raise StorageError(key, "disk I/O error")

    def set(self, key: str, value: str) -> None:
        raise StorageError(key, "disk I/O error")


def _lesson(completed: bool = False) -> DailyLesson:
    lesson = DailyLesson.create(
        date=DAY,
        track=LearningTrack.CUSTOM,
        title="Dichotomy of control",
        content="Some things are up to us.",
        practical_tip="List what you control today.",
        topic="Stoicism",
        example="Traffic is not up to you.",
    )
    return lesson.mark_completed() if completed else lesson


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def repo(store: InMemoryKeyValueStore) -> KeyValueSessionRepository:
    return KeyValueSessionRepository(store, LocalAuthService())


class TestRoundTrip:
    def test_settings(self, repo: KeyValueSessionRepository) -> None:
        settings = UserSettings(
            onboarded=True,
            selected_track=LearningTrack.CUSTOM,
            custom_topic="Stoicism",
            dark_mode=True,
        )
        repo.save_settings(None, settings)
        assert repo.load_settings(None) == settings

    def test_progress(self, repo: KeyValueSessionRepository) -> None:
        progress = UserProgress(
            current_streak=2,
            longest_streak=5,
            last_completed_date=DAY,
            history={LessonDate(date(2024, 1, 9)): True, DAY: True},
        )
        repo.save_progress(None, progress)
        assert repo.load_progress(None) == progress

    def test_archive(self, repo: KeyValueSessionRepository) -> None:
        lesson = _lesson(completed=True)
        archive = LessonArchive().record(lesson.date, lesson)
        repo.save_archive(None, archive)
        assert repo.load_archive(None) == archive

    def test_subscription(self, repo: KeyValueSessionRepository) -> None:
        subscription = apply_purchase(
            SubscriptionState.initial(), Sku.TRACK_SINGLE, track=LearningTrack.FINANCE
        )
        subscription = apply_purchase(subscription, Sku.TRACK_CUSTOM, custom_topic="Chess")
        repo.save_subscription(None, subscription)
        assert repo.load_subscription(None) == subscription

    def test_lesson(self, repo: KeyValueSessionRepository) -> None:
        repo.save_lesson(None, _lesson())
        assert repo.load_lesson(None, DAY) == _lesson()
        assert repo.load_lesson(None, LessonDate(date(2024, 1, 11))) is None


class TestKeys:
    def test_guest_keys(
        self, repo: KeyValueSessionRepository, store: InMemoryKeyValueStore
    ) -> None:
        repo.save_settings(None, UserSettings.initial())
        repo.save_lesson(None, _lesson())
        assert store.keys() == ["calearner_lesson_2024-01-10", "calearner_settings"]

    def test_identity_keys_are_suffixed(
        self, repo: KeyValueSessionRepository, store: InMemoryKeyValueStore
    ) -> None:
        repo.save_progress(READER, UserProgress.initial())
        assert store.keys() == ["calearner_progress_abc123"]
        assert repo.load_progress(None) == UserProgress.initial()

    def test_custom_prefix(self, store: InMemoryKeyValueStore) -> None:
        repo = KeyValueSessionRepository(store, LocalAuthService(), key_prefix="demo")
        repo.save_archive(None, LessonArchive())
        assert store.keys() == ["demo_archive"]


class TestMissingAndCorrupt:
    def test_missing_records_fall_back_to_defaults(self, repo: KeyValueSessionRepository) -> None:
        assert repo.load_settings(READER) == UserSettings.initial()
        assert repo.load_progress(READER) == UserProgress.initial()
        assert repo.load_archive(READER) == LessonArchive()
        assert repo.load_subscription(READER) == SubscriptionState.initial()
        assert repo.load_lesson(READER, DAY) is None

    @pytest.mark.parametrize(
        ("key", "raw"),
        [
            ("calearner_settings", "{not json"),
            ("calearner_settings", '{"selected_track": "astrology"}'),
            ("calearner_progress", '{"current_streak": -3}'),
            ("calearner_progress", '{"current_streak": 5, "longest_streak": 1}'),
            ("calearner_archive", '{"2024-13-45": {}}'),
            ("calearner_subscription", "[]"),
        ],
    )
    def test_corrupt_records_fall_back_to_defaults(
        self,
        repo: KeyValueSessionRepository,
        store: InMemoryKeyValueStore,
        key: str,
        raw: str,
    ) -> None:
        store.set(key, raw)
        assert repo.load_settings(None) == UserSettings.initial()
        assert repo.load_progress(None) == UserProgress.initial()
        assert repo.load_archive(None) == LessonArchive()
        assert repo.load_subscription(None) == SubscriptionState.initial()

    def test_corrupt_lesson_is_ignored(
        self, repo: KeyValueSessionRepository, store: InMemoryKeyValueStore
    ) -> None:
        store.set("calearner_lesson_2024-01-10", '{"id": "2024-01-10", "title": ""}')
        assert repo.load_lesson(None, DAY) is None

    def test_lesson_stored_under_wrong_day_is_ignored(
        self, repo: KeyValueSessionRepository, store: InMemoryKeyValueStore
    ) -> None:
        repo.save_lesson(None, _lesson())
        store.set("calearner_lesson_2024-01-11", store.get("calearner_lesson_2024-01-10") or "")
        assert repo.load_lesson(None, LessonDate(date(2024, 1, 11))) is None


class TestBackendFailure:
    def test_reads_fall_back_to_defaults(self) -> None:
        repo = KeyValueSessionRepository(BrokenStore(), LocalAuthService())
        assert repo.load_settings(None) == UserSettings.initial()
        assert repo.load_lesson(None, DAY) is None

    def test_writes_raise_storage_error(self) -> None:
        repo = KeyValueSessionRepository(BrokenStore(), LocalAuthService())
        with pytest.raises(StorageError):
            repo.save_settings(None, UserSettings.initial())
