"""Use case for store purchases."""

from dataclasses import dataclass

import structlog

from calearner.application.protocols import PurchaseServiceProtocol, SessionRepositoryProtocol
from calearner.application.session.persistence import persist
from calearner.application.session.session import LearnerSession
from calearner.domain.billing.entities import PremiumType, Sku, apply_purchase, sku_for_plan
from calearner.domain.learning.entities import LearningTrack

logger = structlog.get_logger(__name__)

PURCHASE_FAILED_MESSAGE = "Purchase failed. Please try again."
PURCHASE_DECLINED_MESSAGE = "Purchase was not completed."


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of one purchase attempt."""

    success: bool
    sku: Sku
    track: LearningTrack | None = None
    custom_topic: str | None = None
    message: str | None = None


class PurchaseUseCase:
    """Runs purchases through the store and applies them to the subscription."""

    def __init__(
        self,
        session_repository: SessionRepositoryProtocol,
        purchase_service: PurchaseServiceProtocol,
    ) -> None:
        self.session_repository = session_repository
        self.purchase_service = purchase_service

    async def purchase_subscription(
        self, session: LearnerSession, plan: PremiumType
    ) -> PurchaseResult:
        """
        Buy a premium plan.

        Raises:
            ValidationError: If `plan` is not a purchasable plan
        """
        return await self._purchase(session, sku_for_plan(plan))

    async def purchase_track(
        self,
        session: LearnerSession,
        track: LearningTrack,
        custom_topic: str | None = None,
    ) -> PurchaseResult:
        """
        Buy a single track, or a single custom topic.

        Without an explicit topic, a CUSTOM purchase uses the topic of the
        open purchase prompt.
        """
        if track.is_custom and not custom_topic and session.purchase_prompt is not None:
            custom_topic = session.purchase_prompt.custom_topic

        is_custom = track.is_custom and bool(custom_topic)
        sku = Sku.TRACK_CUSTOM if is_custom else Sku.TRACK_SINGLE
        return await self._purchase(
            session, sku, track=track, custom_topic=custom_topic if is_custom else None
        )

    async def _purchase(
        self,
        session: LearnerSession,
        sku: Sku,
        track: LearningTrack | None = None,
        custom_topic: str | None = None,
    ) -> PurchaseResult:
        session.is_purchase_processing = True
        try:
            success = await self.purchase_service.purchase(sku)
        except Exception as e:
            logger.error("purchase_failed", sku=sku.value, error=str(e))
            return PurchaseResult(
                False, sku, track=track, custom_topic=custom_topic, message=PURCHASE_FAILED_MESSAGE
            )
        finally:
            session.is_purchase_processing = False

        if not success:
            logger.info("purchase_declined", sku=sku.value)
            return PurchaseResult(
                False,
                sku,
                track=track,
                custom_topic=custom_topic,
                message=PURCHASE_DECLINED_MESSAGE,
            )

        subscription = apply_purchase(session.subscription, sku, track, custom_topic)
        session.subscription = subscription
        session.purchase_prompt = None
        persist(
            "subscription",
            lambda: self.session_repository.save_subscription(session.identity_id, subscription),
        )

        logger.info("purchase_completed", sku=sku.value, track=track.value if track else None)
        return PurchaseResult(True, sku, track=track, custom_topic=custom_topic)
