"""Pydantic data models shared by the fetchers, the pipeline and the API."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

MAX_TOPICS = 8
MAX_HASHTAGS = 15

Source = Literal["cache", "api", "fallback"]


class RawSkill(BaseModel):
    """Skill record as returned by the skills lookup service."""

    name: str = Field("", description="Skill keyword, e.g. 'Cloud Computing'")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class Topic(BaseModel):
    """One suggested content theme.

    ``engagement`` and ``growth`` are randomised plausibility scores filled in
    at generation time. They are illustrative placeholders for the UI, not
    measured analytics, and must not be treated as real signals.
    """

    id: int = Field(..., ge=1, description="Position in the snapshot, starting at 1")
    topic: str = Field(..., min_length=1, description="Display label")
    description: str = Field("", description="Short explanation of the theme")
    engagement: int = Field(..., ge=75, le=94, description="Synthetic engagement score")
    growth: int = Field(..., ge=5, le=24, description="Synthetic growth percentage")
    hashtags: List[str] = Field(..., min_length=2, max_length=3)
    related_topics: List[str] = Field(default_factory=list, max_length=3, alias="relatedTopics")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }


class TrendSnapshot(BaseModel):
    """One cached result of the trend pipeline. Never updated, only superseded."""

    topics: List[Topic] = Field(default_factory=list, max_length=MAX_TOPICS)
    hashtags: List[str] = Field(default_factory=list, max_length=MAX_HASHTAGS)
    created_at: datetime

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class TrendResponse(BaseModel):
    """Wire shape of ``POST /linkedin-trends``."""

    trends: List[Topic]
    hashtags: List[str]
    source: Source = Field(..., description="'cache', 'api' or 'fallback'")
    updated_at: datetime

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_snapshot(cls, snapshot: TrendSnapshot, source: Source) -> "TrendResponse":
        return cls(
            trends=list(snapshot.topics),
            hashtags=list(snapshot.hashtags),
            source=source,
            updated_at=snapshot.created_at,
        )


class TopicSuggestion(BaseModel):
    """Topic idea returned by ``POST /suggest-linkedin-topics``."""

    id: int = Field(..., ge=1)
    label: str
    icon: str = "✨"
    trending: bool = False
    description: str = ""
