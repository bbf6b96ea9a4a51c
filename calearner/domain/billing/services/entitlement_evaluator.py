"""Domain service deciding whether a track can be viewed without purchase."""

from calearner.domain.billing.entities.subscription import SubscriptionState
from calearner.domain.learning.entities import LearningTrack, normalize_topic


class EntitlementEvaluator:
    """Decides track ownership from subscription state.

    Rules, first match wins:
    1. Premium owns everything
    2. The free onboarding track, unless it is CUSTOM
    3. CUSTOM with a topic: the lowercase topic was purchased (or seeded at onboarding)
    4. The track was purchased individually
    """

    def is_owned(
        self,
        track: LearningTrack,
        subscription: SubscriptionState,
        specific_custom_topic: str | None = None,
    ) -> bool:
        if subscription.is_premium:
            return True

        if subscription.free_track_id == track and not track.is_custom:
            return True

        topic = normalize_topic(specific_custom_topic)
        if track.is_custom and topic:
            return topic in subscription.purchased_custom_topics

        return track in subscription.purchased_tracks
