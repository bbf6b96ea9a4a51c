"""UserSettings entity."""

from dataclasses import dataclass, replace

from calearner.domain.common.exceptions import ValidationError
from calearner.domain.learning.entities.track import LearningTrack


@dataclass(frozen=True)
class UserSettings:
    """Per-identity preferences: onboarding state, selected track, theme."""

    onboarded: bool = False
    selected_track: LearningTrack | None = None
    custom_topic: str | None = None
    dark_mode: bool = False

    def complete_onboarding(
        self, track: LearningTrack, custom_topic: str | None
    ) -> "UserSettings":
        """Mark onboarding done and select the first track."""
        if track.is_custom and not (custom_topic and custom_topic.strip()):
            raise ValidationError(
                "A custom track requires a topic", field="custom_topic", value=custom_topic
            )
        return replace(
            self,
            onboarded=True,
            selected_track=track,
            custom_topic=custom_topic.strip() if custom_topic else None,
        )

    def select_track(self, track: LearningTrack, custom_topic: str | None) -> "UserSettings":
        """
        Switch to another track.

        A CUSTOM selection without a topic keeps the previously selected topic;
        any other track clears it.
        """
        topic = custom_topic.strip() if custom_topic and custom_topic.strip() else None
        if topic is None:
            topic = self.custom_topic if track.is_custom else None
        return replace(self, selected_track=track, custom_topic=topic)

    def toggle_dark_mode(self) -> "UserSettings":
        return replace(self, dark_mode=not self.dark_mode)

    @classmethod
    def initial(cls) -> "UserSettings":
        return cls()
