"""Community feed request schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator

from lifejournal.core.utils.validation import CamelModel, check_vocabulary
from lifejournal.domains.journal.constants import LIFE_AREAS, SCORE_MAX, SCORE_MIN


class CommunityPostCreate(CamelModel):
    user_id: Optional[str] = None
    user_name: Optional[str] = Field(default=None, max_length=120)
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    life_areas: List[str] = Field(default_factory=list)
    mood: int = Field(default=7, ge=SCORE_MIN, le=SCORE_MAX)
    goal_achieved: bool = False

    @field_validator("title", "content")
    @classmethod
    def require_text(cls, v: str) -> str:
        text = v.strip()
        if not text:
            raise ValueError("must not be blank")
        return text

    @field_validator("life_areas")
    @classmethod
    def validate_life_areas(cls, v: List[str]) -> List[str]:
        return check_vocabulary(v, LIFE_AREAS, "life area")


class LikeToggleRequest(CamelModel):
    user_id: Optional[str] = None
    post_id: str = Field(min_length=1)
