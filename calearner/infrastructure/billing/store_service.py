"""Simulated in-app store."""

import asyncio

import structlog

from calearner.domain.billing.entities import Sku

logger = structlog.get_logger(__name__)


class SimulatedStoreService:
    """
    Resolves every purchase after a fixed delay.

    Args:
        delay_seconds: Time the fake store sheet stays open
        always_decline: Report every purchase as cancelled by the user
    """

    def __init__(self, delay_seconds: float = 1.5, always_decline: bool = False) -> None:
        self.delay_seconds = delay_seconds
        self.always_decline = always_decline

    async def purchase(self, sku: Sku) -> bool:
        logger.info("store_purchase_started", sku=sku.value)
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        accepted = not self.always_decline
        logger.info("store_purchase_finished", sku=sku.value, accepted=accepted)
        return accepted
