"""Pydantic schemas for the learner session API."""

import datetime

from pydantic import BaseModel, Field

from calearner.application.session.session import LearnerSession, PurchasePrompt
from calearner.domain.billing.entities import PremiumType, SubscriptionState
from calearner.domain.learning.entities import (
    DailyLesson,
    LearningTrack,
    UserProgress,
    UserSettings,
)


class LessonSchema(BaseModel):
    """Schema for a daily lesson."""

    date: datetime.date
    track: LearningTrack
    topic: str | None = None
    title: str
    content: str
    practical_tip: str
    example: str | None = None
    completed: bool = False

    @classmethod
    def from_domain(cls, lesson: DailyLesson) -> "LessonSchema":
        return cls(
            date=lesson.date.value,
            track=lesson.track,
            topic=lesson.topic,
            title=lesson.title,
            content=lesson.content,
            practical_tip=lesson.practical_tip,
            example=lesson.example,
            completed=lesson.completed,
        )


class SettingsSchema(BaseModel):
    onboarded: bool
    selected_track: LearningTrack | None = None
    custom_topic: str | None = None
    dark_mode: bool

    @classmethod
    def from_domain(cls, settings: UserSettings) -> "SettingsSchema":
        return cls(
            onboarded=settings.onboarded,
            selected_track=settings.selected_track,
            custom_topic=settings.custom_topic,
            dark_mode=settings.dark_mode,
        )


class ProgressSchema(BaseModel):
    current_streak: int
    longest_streak: int
    last_completed_date: datetime.date | None = None
    total_completed: int
    completed_dates: list[datetime.date] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, progress: UserProgress) -> "ProgressSchema":
        return cls(
            current_streak=progress.current_streak,
            longest_streak=progress.longest_streak,
            last_completed_date=(
                progress.last_completed_date.value if progress.last_completed_date else None
            ),
            total_completed=progress.total_completed,
            completed_dates=sorted(d.value for d, done in progress.history.items() if done),
        )


class SubscriptionSchema(BaseModel):
    is_premium: bool
    premium_type: PremiumType
    free_track_id: LearningTrack | None = None
    purchased_tracks: list[LearningTrack] = Field(default_factory=list)
    purchased_custom_topics: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, subscription: SubscriptionState) -> "SubscriptionSchema":
        return cls(
            is_premium=subscription.is_premium,
            premium_type=subscription.premium_type,
            free_track_id=subscription.free_track_id,
            purchased_tracks=sorted(subscription.purchased_tracks),
            purchased_custom_topics=sorted(subscription.purchased_custom_topics),
        )


class PurchasePromptSchema(BaseModel):
    """An open purchase flow; no track means the generic premium offer."""

    track: LearningTrack | None = None
    custom_topic: str | None = None

    @classmethod
    def from_domain(cls, prompt: PurchasePrompt) -> "PurchasePromptSchema":
        return cls(track=prompt.track, custom_topic=prompt.custom_topic)


class SessionResponse(BaseModel):
    """Schema for the full learner session state."""

    identity_id: str | None = None
    email: str | None = None
    settings: SettingsSchema
    progress: ProgressSchema
    subscription: SubscriptionSchema
    today_lesson: LessonSchema | None = None
    archive_size: int = Field(..., ge=0, description="Number of archived lessons")
    is_loading: bool
    is_purchase_processing: bool
    ad_pending: bool
    generation_failed: bool
    purchase_prompt: PurchasePromptSchema | None = None

    @classmethod
    def from_domain(cls, session: LearnerSession) -> "SessionResponse":
        identity = session.identity
        return cls(
            identity_id=identity.id.value if identity else None,
            email=identity.email if identity else None,
            settings=SettingsSchema.from_domain(session.settings),
            progress=ProgressSchema.from_domain(session.progress),
            subscription=SubscriptionSchema.from_domain(session.subscription),
            today_lesson=(
                LessonSchema.from_domain(session.today_lesson) if session.today_lesson else None
            ),
            archive_size=len(session.archive),
            is_loading=session.is_loading,
            is_purchase_processing=session.is_purchase_processing,
            ad_pending=session.ad_pending,
            generation_failed=session.generation_failed,
            purchase_prompt=(
                PurchasePromptSchema.from_domain(session.purchase_prompt)
                if session.purchase_prompt
                else None
            ),
        )


class ArchiveResponse(BaseModel):
    """Archived lessons, newest first."""

    items: list[LessonSchema]
    total: int
