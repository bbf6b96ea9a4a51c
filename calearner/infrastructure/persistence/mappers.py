"""Mappers for stored record ↔ domain conversion."""

from calearner.domain.billing.entities import SubscriptionState
from calearner.domain.common.value_objects import LessonDate
from calearner.domain.learning.entities import (
    DailyLesson,
    LessonArchive,
    UserProgress,
    UserSettings,
)
from calearner.infrastructure.persistence.schemas import (
    ArchiveRecord,
    LessonRecord,
    ProgressRecord,
    SettingsRecord,
    SubscriptionRecord,
)


class SettingsMapper:
    def to_domain(self, record: SettingsRecord) -> UserSettings:
        return UserSettings(
            onboarded=record.onboarded,
            selected_track=record.selected_track,
            custom_topic=record.custom_topic,
            dark_mode=record.dark_mode,
        )

    def to_record(self, settings: UserSettings) -> SettingsRecord:
        return SettingsRecord(
            onboarded=settings.onboarded,
            selected_track=settings.selected_track,
            custom_topic=settings.custom_topic,
            dark_mode=settings.dark_mode,
        )


class LessonMapper:
    """Mapper for DailyLesson record ↔ domain conversion."""

    def to_domain(self, record: LessonRecord) -> DailyLesson:
        return DailyLesson(
            id=LessonDate(record.id),
            track=record.track,
            topic=record.topic,
            title=record.title,
            content=record.content,
            practical_tip=record.practical_tip,
            example=record.example,
            completed=record.completed,
        )

    def to_record(self, lesson: DailyLesson) -> LessonRecord:
        return LessonRecord(
            id=lesson.id.value,
            track=lesson.track,
            topic=lesson.topic,
            title=lesson.title,
            content=lesson.content,
            practical_tip=lesson.practical_tip,
            example=lesson.example,
            completed=lesson.completed,
        )


class ProgressMapper:
    def to_domain(self, record: ProgressRecord) -> UserProgress:
        return UserProgress(
            current_streak=record.current_streak,
            longest_streak=record.longest_streak,
            last_completed_date=(
                LessonDate(record.last_completed_date) if record.last_completed_date else None
            ),
            history={LessonDate(day): done for day, done in record.history.items()},
        )

    def to_record(self, progress: UserProgress) -> ProgressRecord:
        return ProgressRecord(
            current_streak=progress.current_streak,
            longest_streak=progress.longest_streak,
            last_completed_date=(
                progress.last_completed_date.value if progress.last_completed_date else None
            ),
            history={day.value: done for day, done in progress.history.items()},
        )


class ArchiveMapper:
    def __init__(self) -> None:
        self.lesson_mapper = LessonMapper()

    def to_domain(self, record: ArchiveRecord) -> LessonArchive:
        return LessonArchive(
            entries={
                LessonDate(day): self.lesson_mapper.to_domain(lesson)
                for day, lesson in record.root.items()
            }
        )

    def to_record(self, archive: LessonArchive) -> ArchiveRecord:
        return ArchiveRecord(
            {day.value: self.lesson_mapper.to_record(archive.entries[day]) for day in archive}
        )


class SubscriptionMapper:
    def to_domain(self, record: SubscriptionRecord) -> SubscriptionState:
        return SubscriptionState(
            is_premium=record.is_premium,
            premium_type=record.premium_type,
            free_track_id=record.free_track_id,
            purchased_tracks=frozenset(record.purchased_tracks),
            purchased_custom_topics=frozenset(t.lower() for t in record.purchased_custom_topics),
        )

    def to_record(self, subscription: SubscriptionState) -> SubscriptionRecord:
        # Sorted so identical states serialize identically
        return SubscriptionRecord(
            is_premium=subscription.is_premium,
            premium_type=subscription.premium_type,
            free_track_id=subscription.free_track_id,
            purchased_tracks=sorted(subscription.purchased_tracks),
            purchased_custom_topics=sorted(subscription.purchased_custom_topics),
        )
