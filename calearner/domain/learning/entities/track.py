"""Learning tracks a user can follow."""

from enum import StrEnum


class LearningTrack(StrEnum):
    """
    Topic category for daily lessons.

    CUSTOM is parameterized by a free-text topic that travels next to the
    track value (settings, lessons, purchase targets). Two CUSTOM selections
    with different topics are different ownable units.
    """

    PRODUCTIVITY = "productivity"
    FINANCE = "finance"
    PSYCHOLOGY = "psychology"
    HEALTH = "health"
    HISTORY = "history"
    SCIENCE = "science"
    TECHNOLOGY = "technology"
    PHILOSOPHY = "philosophy"
    CUSTOM = "custom"

    @property
    def is_custom(self) -> bool:
        return self is LearningTrack.CUSTOM


def normalize_topic(topic: str | None) -> str | None:
    """Lowercase, stripped form of a custom topic used for comparisons."""
    if topic is None:
        return None
    stripped = topic.strip()
    return stripped.lower() if stripped else None


def same_selection(
    track_a: LearningTrack,
    topic_a: str | None,
    track_b: LearningTrack,
    topic_b: str | None,
) -> bool:
    """Whether two (track, topic) pairs point at the same lesson stream."""
    if track_a != track_b:
        return False
    if not track_a.is_custom:
        return True
    return normalize_topic(topic_a) == normalize_topic(topic_b)
