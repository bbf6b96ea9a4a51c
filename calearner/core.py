from dependency_injector import containers, providers

from calearner.application.billing.purchase_use_case import PurchaseUseCase
from calearner.application.lessons.daily_lesson_use_case import DailyLessonUseCase
from calearner.application.protocols import LocalClock
from calearner.application.session.orchestrator import SessionOrchestrator
from calearner.config import get_settings
from calearner.database import get_session_factory
from calearner.domain.billing.services import EntitlementEvaluator
from calearner.domain.learning.services import LessonResolver, StreakArchiveUpdater
from calearner.infrastructure.ai import AILessonGenerationService
from calearner.infrastructure.billing import SimulatedStoreService
from calearner.infrastructure.identity import LocalAuthService
from calearner.infrastructure.persistence import KeyValueSessionRepository, SqlAlchemyKeyValueStore


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Callable(get_settings)

    # Adapters
    key_value_store = providers.Singleton(
        SqlAlchemyKeyValueStore,
        session_factory=providers.Callable(get_session_factory),
    )
    auth_service = providers.Singleton(LocalAuthService)
    lesson_generation_service = providers.Singleton(AILessonGenerationService)
    purchase_service = providers.Singleton(
        SimulatedStoreService,
        delay_seconds=settings.provided.PURCHASE_DELAY_SECONDS,
        always_decline=settings.provided.PURCHASE_ALWAYS_DECLINE,
    )
    clock = providers.Singleton(LocalClock)

    session_repository = providers.Singleton(
        KeyValueSessionRepository,
        store=key_value_store,
        auth_service=auth_service,
        key_prefix=settings.provided.STORAGE_KEY_PREFIX,
    )

    # Domain services (pure domain logic, no storage)
    entitlement_evaluator = providers.Factory(EntitlementEvaluator)
    lesson_resolver = providers.Factory(LessonResolver)
    streak_archive_updater = providers.Factory(StreakArchiveUpdater)

    # Application use cases
    daily_lesson_use_case = providers.Factory(
        DailyLessonUseCase,
        session_repository=session_repository,
        lesson_generation_service=lesson_generation_service,
        lesson_resolver=lesson_resolver,
        streak_archive_updater=streak_archive_updater,
        clock=clock,
    )
    purchase_use_case = providers.Factory(
        PurchaseUseCase,
        session_repository=session_repository,
        purchase_service=purchase_service,
    )

    # One active session per process
    session_orchestrator = providers.Singleton(
        SessionOrchestrator,
        session_repository=session_repository,
        auth_service=auth_service,
        entitlement_evaluator=entitlement_evaluator,
        daily_lesson_use_case=daily_lesson_use_case,
        purchase_use_case=purchase_use_case,
        clock=clock,
    )


# Initialize container
container = Container()
