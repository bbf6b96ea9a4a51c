"""Top-level coordinator of the daily lesson engine."""

from dataclasses import replace
from enum import StrEnum

import structlog

from calearner.application.billing.purchase_use_case import PurchaseResult, PurchaseUseCase
from calearner.application.lessons.daily_lesson_use_case import DailyLessonUseCase
from calearner.application.protocols import (
    AuthServiceProtocol,
    ClockProtocol,
    SessionRepositoryProtocol,
)
from calearner.application.session.persistence import persist
from calearner.application.session.session import LearnerSession, PurchasePrompt
from calearner.domain.billing.entities import PremiumType, register_free_track
from calearner.domain.billing.services import EntitlementEvaluator
from calearner.domain.identity import Identity
from calearner.domain.learning.entities import (
    DailyLesson,
    LearningTrack,
    LessonArchive,
    UserProgress,
)
from calearner.domain.learning.exceptions import AlreadyOnboardedError
from calearner.domain.learning.services import CompletionResult, LessonResolution

logger = structlog.get_logger(__name__)


class TrackSwitchOutcome(StrEnum):
    SWITCHED = "switched"
    PURCHASE_REQUIRED = "purchase_required"


class SessionOrchestrator:
    """
    Owns the active LearnerSession and routes UI actions to the use cases.

    Identity changes discard the current session and load a fresh one from the
    new identity's namespace; nothing is shared between namespaces.
    """

    def __init__(
        self,
        session_repository: SessionRepositoryProtocol,
        auth_service: AuthServiceProtocol,
        entitlement_evaluator: EntitlementEvaluator,
        daily_lesson_use_case: DailyLessonUseCase,
        purchase_use_case: PurchaseUseCase,
        clock: ClockProtocol,
    ) -> None:
        self.session_repository = session_repository
        self.auth_service = auth_service
        self.entitlement_evaluator = entitlement_evaluator
        self.lessons = daily_lesson_use_case
        self.purchases = purchase_use_case
        self.clock = clock
        self.session = self._load_session(None)

    # Identity

    async def login(self, email: str) -> LearnerSession:
        identity = await self.auth_service.login(email)
        logger.info("identity_signed_in", identity_id=str(identity.id))
        return self.change_identity(identity)

    async def logout(self) -> LearnerSession:
        await self.auth_service.logout()
        logger.info("identity_signed_out")
        return self.change_identity(None)

    def state(self) -> LearnerSession:
        """Snapshot of the active session; later actions do not mutate it."""
        return replace(self.session)

    def change_identity(self, identity: Identity | None) -> LearnerSession:
        """Replace the session with the one stored for `identity` (None = guest)."""
        self.session = self._load_session(identity)
        return self.session

    def _load_session(self, identity: Identity | None) -> LearnerSession:
        identity_id = identity.id if identity else None
        repo = self.session_repository
        return LearnerSession(
            identity=identity,
            settings=repo.load_settings(identity_id),
            progress=repo.load_progress(identity_id),
            archive=repo.load_archive(identity_id),
            subscription=repo.load_subscription(identity_id),
            today_lesson=repo.load_lesson(identity_id, self.clock.today()),
        )

    # Onboarding and tracks

    async def onboard(
        self, track: LearningTrack, custom_topic: str | None = None
    ) -> LessonResolution:
        """
        Pick the first track: it becomes the free trial entitlement.

        Raises:
            AlreadyOnboardedError: If this identity already onboarded
            ValidationError: If a CUSTOM track has no topic
        """
        session = self.session
        if session.settings.onboarded:
            raise AlreadyOnboardedError

        settings = session.settings.complete_onboarding(track, custom_topic)
        subscription = register_free_track(session.subscription, track, settings.custom_topic)
        session.settings = settings
        session.subscription = subscription
        self._save_settings(session)
        persist(
            "subscription",
            lambda: self.session_repository.save_subscription(session.identity_id, subscription),
        )

        logger.info("onboarding_completed", track=track.value)
        return await self.lessons.ensure_lesson_for_today(session, track, settings.custom_topic)

    async def switch_track(
        self, track: LearningTrack, custom_topic: str | None = None
    ) -> TrackSwitchOutcome:
        """
        Switch to `track` if owned, otherwise open the purchase flow for it.

        An unowned track leaves settings, subscription and lessons untouched.
        """
        session = self.session
        # A bare CUSTOM switch means the previously selected topic
        topic = custom_topic
        if track.is_custom and not (topic and topic.strip()):
            topic = session.settings.custom_topic
        if not self.entitlement_evaluator.is_owned(track, session.subscription, topic):
            session.purchase_prompt = PurchasePrompt(
                track=track, custom_topic=topic if track.is_custom else None
            )
            logger.info("track_switch_requires_purchase", track=track.value)
            return TrackSwitchOutcome.PURCHASE_REQUIRED

        session.settings = session.settings.select_track(track, custom_topic)
        session.today_lesson = None
        session.generation_failed = False
        self._save_settings(session)

        logger.info("track_switched", track=track.value)
        await self.lessons.ensure_lesson_for_today(session, track, session.settings.custom_topic)
        return TrackSwitchOutcome.SWITCHED

    # Lessons

    async def ensure_lesson_for_today(self) -> LessonResolution:
        return await self.lessons.ensure_lesson_for_today(self.session)

    async def retry_lesson(self) -> LessonResolution:
        return await self.lessons.retry(self.session)

    async def close_ad(self) -> DailyLesson | None:
        return await self.lessons.close_ad(self.session)

    def complete_lesson(self) -> CompletionResult:
        return self.lessons.complete(self.session)

    # Purchases

    def open_purchase_flow(
        self, track: LearningTrack | None = None, custom_topic: str | None = None
    ) -> PurchasePrompt:
        prompt = PurchasePrompt(
            track=track, custom_topic=custom_topic if track and track.is_custom else None
        )
        self.session.purchase_prompt = prompt
        return prompt

    def dismiss_purchase_flow(self) -> None:
        self.session.purchase_prompt = None

    async def purchase_subscription(self, plan: PremiumType) -> PurchaseResult:
        return await self.purchases.purchase_subscription(self.session, plan)

    async def purchase_track(
        self, track: LearningTrack, custom_topic: str | None = None
    ) -> PurchaseResult:
        """Buy a track and immediately switch to it."""
        result = await self.purchases.purchase_track(self.session, track, custom_topic)
        if result.success:
            await self.switch_track(track, result.custom_topic)
        return result

    # Preferences

    def toggle_theme(self) -> bool:
        session = self.session
        session.settings = session.settings.toggle_dark_mode()
        self._save_settings(session)
        return session.settings.dark_mode

    def reset_progress(self) -> None:
        """Clear streaks, history, archive and today's lesson. Subscription is kept."""
        session = self.session
        today = self.clock.today()
        session.progress = UserProgress.initial()
        session.archive = LessonArchive()
        session.today_lesson = None

        repo = self.session_repository
        identity_id = session.identity_id
        persist("progress", lambda: repo.remove_progress(identity_id))
        persist("archive", lambda: repo.remove_archive(identity_id))
        persist("lesson", lambda: repo.remove_lesson(identity_id, today))
        logger.info("progress_reset")

    def _save_settings(self, session: LearnerSession) -> None:
        settings = session.settings
        persist(
            "settings",
            lambda: self.session_repository.save_settings(session.identity_id, settings),
        )
