from .subscription import (
    PremiumType,
    Sku,
    SubscriptionState,
    apply_purchase,
    register_free_track,
    sku_for_plan,
)

__all__ = [
    "PremiumType",
    "Sku",
    "SubscriptionState",
    "apply_purchase",
    "register_free_track",
    "sku_for_plan",
]
