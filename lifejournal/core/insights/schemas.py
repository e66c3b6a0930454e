"""Insight request schema."""

from __future__ import annotations

from typing import List

from pydantic import Field, field_validator

from lifejournal.core.insights.engine import InsightRequest
from lifejournal.core.utils.validation import CamelModel, check_vocabulary
from lifejournal.domains.journal.constants import (
    ACHIEVEMENTS,
    CHALLENGES,
    EMOTIONS,
    LIFE_AREAS,
    SCORE_MAX,
    SCORE_MIN,
)


class InsightRequestSchema(CamelModel):
    content: str = ""
    mood: int = Field(default=7, ge=SCORE_MIN, le=SCORE_MAX)
    emotions: List[str] = Field(default_factory=list)
    life_areas: List[str] = Field(default_factory=list)
    challenges: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)

    @field_validator("emotions")
    @classmethod
    def validate_emotions(cls, v: List[str]) -> List[str]:
        return check_vocabulary(v, EMOTIONS, "emotion")

    @field_validator("life_areas")
    @classmethod
    def validate_life_areas(cls, v: List[str]) -> List[str]:
        return check_vocabulary(v, LIFE_AREAS, "life area")

    @field_validator("challenges")
    @classmethod
    def validate_challenges(cls, v: List[str]) -> List[str]:
        return check_vocabulary(v, CHALLENGES, "challenge")

    @field_validator("achievements")
    @classmethod
    def validate_achievements(cls, v: List[str]) -> List[str]:
        return check_vocabulary(v, ACHIEVEMENTS, "achievement")

    def to_request(self) -> InsightRequest:
        return InsightRequest(
            content=self.content,
            mood=self.mood,
            emotions=tuple(self.emotions),
            life_areas=tuple(self.life_areas),
            challenges=tuple(self.challenges),
            achievements=tuple(self.achievements),
        )
