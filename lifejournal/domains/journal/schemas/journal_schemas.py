"""Journal request schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator

from lifejournal.core.utils.validation import CamelModel, check_vocabulary
from lifejournal.domains.journal.constants import (
    ACHIEVEMENTS,
    CHALLENGES,
    EMOTIONS,
    LIFE_AREAS,
    MAX_GRATITUDE_ITEMS,
    SCORE_MAX,
    SCORE_MIN,
)


class JournalEntryCreate(CamelModel):
    user_id: Optional[str] = None
    title: str = Field(default="", max_length=255)
    content: str = Field(min_length=1)
    mood: int = Field(default=7, ge=SCORE_MIN, le=SCORE_MAX)
    motivation: int = Field(default=7, ge=SCORE_MIN, le=SCORE_MAX)
    energy: int = Field(default=7, ge=SCORE_MIN, le=SCORE_MAX)
    life_areas: List[str] = Field(default_factory=list)
    emotions: List[str] = Field(default_factory=list)
    challenges: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)
    gratitude: List[str] = Field(default_factory=list)
    goal_achieved: bool = False
    insights: str = ""
    goals: str = ""
    is_public: bool = False

    @field_validator("title", "insights", "goals")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("content")
    @classmethod
    def require_content(cls, v: str) -> str:
        text = v.strip()
        if not text:
            raise ValueError("content must not be blank")
        return text

    @field_validator("life_areas")
    @classmethod
    def validate_life_areas(cls, v: List[str]) -> List[str]:
        return check_vocabulary(v, LIFE_AREAS, "life area")

    @field_validator("emotions")
    @classmethod
    def validate_emotions(cls, v: List[str]) -> List[str]:
        return check_vocabulary(v, EMOTIONS, "emotion")

    @field_validator("challenges")
    @classmethod
    def validate_challenges(cls, v: List[str]) -> List[str]:
        return check_vocabulary(v, CHALLENGES, "challenge")

    @field_validator("achievements")
    @classmethod
    def validate_achievements(cls, v: List[str]) -> List[str]:
        return check_vocabulary(v, ACHIEVEMENTS, "achievement")

    @field_validator("gratitude")
    @classmethod
    def drop_blank_gratitude(cls, v: List[str]) -> List[str]:
        items = [item.strip() for item in v if item and item.strip()]
        if len(items) > MAX_GRATITUDE_ITEMS:
            raise ValueError(f"at most {MAX_GRATITUDE_ITEMS} gratitude items")
        return items


class JournalListFilter(CamelModel):
    user_id: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=1)
