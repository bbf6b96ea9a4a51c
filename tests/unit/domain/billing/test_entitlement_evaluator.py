"""Tests for the EntitlementEvaluator domain service."""

import pytest

from calearner.domain.billing.entities import (
    PremiumType,
    Sku,
    SubscriptionState,
    apply_purchase,
    register_free_track,
)
from calearner.domain.billing.services import EntitlementEvaluator
from calearner.domain.learning.entities import LearningTrack


@pytest.fixture
def evaluator() -> EntitlementEvaluator:
    return EntitlementEvaluator()


class TestPremium:
    @pytest.mark.parametrize("track", list(LearningTrack))
    def test_premium_owns_every_track(
        self, evaluator: EntitlementEvaluator, track: LearningTrack
    ) -> None:
        subscription = SubscriptionState(is_premium=True, premium_type=PremiumType.YEARLY)
        assert evaluator.is_owned(track, subscription)
        assert evaluator.is_owned(track, subscription, "Any topic at all")


class TestFreeTrack:
    def test_free_track_is_owned(self, evaluator: EntitlementEvaluator) -> None:
        subscription = register_free_track(SubscriptionState.initial(), LearningTrack.FINANCE)
        assert evaluator.is_owned(LearningTrack.FINANCE, subscription)

    def test_other_tracks_are_not_owned(self, evaluator: EntitlementEvaluator) -> None:
        subscription = register_free_track(SubscriptionState.initial(), LearningTrack.FINANCE)
        assert not evaluator.is_owned(LearningTrack.HISTORY, subscription)
        assert not evaluator.is_owned(LearningTrack.CUSTOM, subscription, "Finance")

    def test_custom_onboarding_owns_only_its_topic(
        self, evaluator: EntitlementEvaluator
    ) -> None:
        subscription = register_free_track(
            SubscriptionState.initial(), LearningTrack.CUSTOM, "Stoicism"
        )

        assert subscription.free_track_id == LearningTrack.CUSTOM
        assert subscription.purchased_custom_topics == frozenset({"stoicism"})
        assert evaluator.is_owned(LearningTrack.CUSTOM, subscription, "Stoicism")
        assert evaluator.is_owned(LearningTrack.CUSTOM, subscription, "  STOICISM ")
        assert not evaluator.is_owned(LearningTrack.CUSTOM, subscription, "Yoga")

    def test_custom_free_track_without_topic_is_not_owned(
        self, evaluator: EntitlementEvaluator
    ) -> None:
        subscription = register_free_track(
            SubscriptionState.initial(), LearningTrack.CUSTOM, "Stoicism"
        )
        assert not evaluator.is_owned(LearningTrack.CUSTOM, subscription)


class TestPurchases:
    def test_purchased_track_is_owned(self, evaluator: EntitlementEvaluator) -> None:
        subscription = apply_purchase(
            SubscriptionState.initial(), Sku.TRACK_SINGLE, track=LearningTrack.SCIENCE
        )
        assert evaluator.is_owned(LearningTrack.SCIENCE, subscription)
        assert not evaluator.is_owned(LearningTrack.HEALTH, subscription)

    def test_purchased_custom_topic_is_owned_case_insensitively(
        self, evaluator: EntitlementEvaluator
    ) -> None:
        subscription = apply_purchase(
            SubscriptionState.initial(),
            Sku.TRACK_CUSTOM,
            track=LearningTrack.CUSTOM,
            custom_topic="Jazz Theory",
        )
        assert evaluator.is_owned(LearningTrack.CUSTOM, subscription, "jazz theory")
        assert not evaluator.is_owned(LearningTrack.CUSTOM, subscription, "Blues")

    def test_nothing_owned_by_default(self, evaluator: EntitlementEvaluator) -> None:
        subscription = SubscriptionState.initial()
        for track in LearningTrack:
            assert not evaluator.is_owned(track, subscription, "topic")
