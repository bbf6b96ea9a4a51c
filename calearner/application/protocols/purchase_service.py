from typing import Protocol

from calearner.domain.billing.entities import Sku


class PurchaseServiceProtocol(Protocol):
    """Store SDK boundary. True means the purchase went through; failures raise."""

    async def purchase(self, sku: Sku) -> bool: ...
