"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import date
from typing import Any

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from calearner.application.billing.purchase_use_case import PurchaseUseCase
from calearner.application.lessons.daily_lesson_use_case import DailyLessonUseCase
from calearner.application.session.orchestrator import SessionOrchestrator
from calearner.config import Settings
from calearner.core import container
from calearner.domain.billing.entities import Sku
from calearner.domain.billing.services import EntitlementEvaluator
from calearner.domain.common.value_objects import LessonDate
from calearner.domain.learning.entities import DailyLesson, LearningTrack
from calearner.domain.learning.services import LessonResolver, StreakArchiveUpdater
from calearner.infrastructure.identity import LocalAuthService
from calearner.infrastructure.persistence import (
    InMemoryKeyValueStore,
    KeyValueSessionRepository,
)
from calearner.main import create_app

TODAY = LessonDate(date(2024, 1, 10))


class FixedClock:
    """Clock frozen on a settable day."""

    def __init__(self, today: LessonDate = TODAY) -> None:
        self.current = today

    def today(self) -> LessonDate:
        return self.current


class FakeLessonGenerator:
    """Records generation requests; fails while `error` is set."""

    def __init__(self) -> None:
        self.calls: list[tuple[LearningTrack, LessonDate, str | None]] = []
        self.error: Exception | None = None

    async def generate(
        self, track: LearningTrack, date: LessonDate, custom_topic: str | None = None
    ) -> DailyLesson:
        self.calls.append((track, date, custom_topic))
        if self.error is not None:
            raise self.error
        subject = custom_topic or track.value
        return DailyLesson.create(
            date=date,
            track=track,
            title=f"A {subject} idea",
            content=f"Today's short lesson about {subject}.",
            practical_tip="Spend five minutes applying it.",
            topic=custom_topic,
        )


class FakeStore:
    """Purchase service answering with `accept`, or raising `error`."""

    def __init__(self) -> None:
        self.accept = True
        self.error: Exception | None = None
        self.skus: list[Sku] = []

    async def purchase(self, sku: Sku) -> bool:
        self.skus.append(sku)
        if self.error is not None:
            raise self.error
        return self.accept


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def generator() -> FakeLessonGenerator:
    return FakeLessonGenerator()


@pytest.fixture
def store_service() -> FakeStore:
    return FakeStore()


@pytest.fixture
def key_value_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def auth_service() -> LocalAuthService:
    return LocalAuthService()


@pytest.fixture
def repository(
    key_value_store: InMemoryKeyValueStore, auth_service: LocalAuthService
) -> KeyValueSessionRepository:
    return KeyValueSessionRepository(key_value_store, auth_service)


@pytest.fixture
def orchestrator_factory(
    repository: KeyValueSessionRepository,
    auth_service: LocalAuthService,
    generator: FakeLessonGenerator,
    store_service: FakeStore,
    clock: FixedClock,
) -> Any:
    """Build orchestrators sharing one store, e.g. to simulate an app restart."""

    def build() -> SessionOrchestrator:
        lessons = DailyLessonUseCase(
            session_repository=repository,
            lesson_generation_service=generator,
            lesson_resolver=LessonResolver(),
            streak_archive_updater=StreakArchiveUpdater(),
            clock=clock,
        )
        purchases = PurchaseUseCase(session_repository=repository, purchase_service=store_service)
        return SessionOrchestrator(
            session_repository=repository,
            auth_service=auth_service,
            entitlement_evaluator=EntitlementEvaluator(),
            daily_lesson_use_case=lessons,
            purchase_use_case=purchases,
            clock=clock,
        )

    return build


@pytest.fixture
def orchestrator(orchestrator_factory: Any) -> SessionOrchestrator:
    return orchestrator_factory()


@pytest.fixture
def client(
    key_value_store: InMemoryKeyValueStore,
    generator: FakeLessonGenerator,
    store_service: FakeStore,
    clock: FixedClock,
) -> Generator[TestClient, Any, None]:
    """Create a test client whose container uses in-memory fakes."""
    overridden = [
        (container.key_value_store, key_value_store),
        (container.lesson_generation_service, generator),
        (container.purchase_service, store_service),
        (container.clock, clock),
    ]
    for provider, fake in overridden:
        provider.override(providers.Object(fake))
    container.reset_singletons()

    app = create_app(Settings(DATABASE_URL="sqlite:///:memory:", ENVIRONMENT="test"))
    with TestClient(app) as test_client:
        yield test_client

    for provider, _ in overridden:
        provider.reset_override()
    container.reset_singletons()
