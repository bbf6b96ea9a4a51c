"""Pydantic schemas of the JSON records kept in the key-value store."""

from datetime import date

from pydantic import BaseModel, Field, RootModel

from calearner.domain.billing.entities import PremiumType
from calearner.domain.learning.entities import LearningTrack


class SettingsRecord(BaseModel):
    onboarded: bool = False
    selected_track: LearningTrack | None = None
    custom_topic: str | None = None
    dark_mode: bool = False


class ProgressRecord(BaseModel):
    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)
    last_completed_date: date | None = None
    history: dict[date, bool] = Field(default_factory=dict)


class LessonRecord(BaseModel):
    id: date = Field(..., description="Local calendar day the lesson belongs to")
    track: LearningTrack
    topic: str | None = None
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    practical_tip: str = ""
    example: str | None = None
    completed: bool = False


class ArchiveRecord(RootModel[dict[date, LessonRecord]]):
    root: dict[date, LessonRecord] = Field(default_factory=dict)


class SubscriptionRecord(BaseModel):
    is_premium: bool = False
    premium_type: PremiumType = PremiumType.NONE
    free_track_id: LearningTrack | None = None
    purchased_tracks: list[LearningTrack] = Field(default_factory=list)
    purchased_custom_topics: list[str] = Field(default_factory=list)
