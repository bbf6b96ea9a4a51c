"""Subscription state and its update functions."""

from dataclasses import dataclass, field, replace
from enum import StrEnum

from calearner.domain.common.exceptions import ValidationError
from calearner.domain.learning.entities import LearningTrack, normalize_topic


class PremiumType(StrEnum):
    NONE = "none"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    LIFETIME = "lifetime"


class Sku(StrEnum):
    """Store products."""

    SUB_MONTHLY = "calearner_premium_monthly"
    SUB_YEARLY = "calearner_premium_yearly"
    SUB_LIFETIME = "calearner_premium_lifetime"
    TRACK_SINGLE = "calearner_track_single"
    TRACK_CUSTOM = "calearner_track_custom"

    @property
    def is_subscription(self) -> bool:
        return self in _SUBSCRIPTION_PLANS


_SUBSCRIPTION_PLANS: dict[Sku, PremiumType] = {
    Sku.SUB_MONTHLY: PremiumType.MONTHLY,
    Sku.SUB_YEARLY: PremiumType.YEARLY,
    Sku.SUB_LIFETIME: PremiumType.LIFETIME,
}


def sku_for_plan(plan: PremiumType) -> Sku:
    """Store product for a premium plan."""
    for sku, premium_type in _SUBSCRIPTION_PLANS.items():
        if premium_type is plan:
            return sku
    raise ValidationError("Unknown subscription plan", field="plan", value=str(plan))


@dataclass(frozen=True)
class SubscriptionState:
    """
    Entitlement-relevant purchase state of one identity.

    Business Rules:
    - free_track_id is assigned at most once (at onboarding)
    - purchased_custom_topics holds lowercase topics only
    """

    is_premium: bool = False
    premium_type: PremiumType = PremiumType.NONE
    free_track_id: LearningTrack | None = None
    purchased_tracks: frozenset[LearningTrack] = field(default_factory=frozenset)
    purchased_custom_topics: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def initial(cls) -> "SubscriptionState":
        return cls()


def register_free_track(
    subscription: SubscriptionState,
    track: LearningTrack,
    custom_topic: str | None = None,
) -> SubscriptionState:
    """
    Grant the onboarding track as the free trial entitlement.

    A CUSTOM track is never free by its enum value alone: its topic is added
    to purchased_custom_topics instead. Once a free track is set, later calls
    leave the subscription unchanged.
    """
    if subscription.free_track_id is not None:
        return subscription

    topics = subscription.purchased_custom_topics
    topic = normalize_topic(custom_topic)
    if track.is_custom and topic:
        topics = topics | {topic}

    return replace(subscription, free_track_id=track, purchased_custom_topics=topics)


def apply_purchase(
    subscription: SubscriptionState,
    sku: Sku,
    track: LearningTrack | None = None,
    custom_topic: str | None = None,
) -> SubscriptionState:
    """
    Apply a completed purchase.

    - SUB_* products turn premium on with the matching plan
    - TRACK_SINGLE adds `track` to purchased_tracks
    - TRACK_CUSTOM adds the lowercase `custom_topic` to purchased_custom_topics

    Raises:
        ValidationError: If a track product is applied without its track/topic
    """
    if sku.is_subscription:
        return replace(subscription, is_premium=True, premium_type=_SUBSCRIPTION_PLANS[sku])

    if sku is Sku.TRACK_CUSTOM:
        topic = normalize_topic(custom_topic)
        if topic is None:
            raise ValidationError("Custom track purchase requires a topic", field="custom_topic")
        return replace(
            subscription,
            purchased_custom_topics=subscription.purchased_custom_topics | {topic},
        )

    if track is None:
        raise ValidationError("Track purchase requires a track", field="track")
    return replace(subscription, purchased_tracks=subscription.purchased_tracks | {track})
