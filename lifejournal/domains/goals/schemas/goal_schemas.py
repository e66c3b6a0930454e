"""Goal request schemas."""

from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import Field, field_validator

from lifejournal.core.utils.validation import CamelModel

GOAL_CATEGORIES = (
    "health",
    "career",
    "relationships",
    "personal-growth",
    "finance",
    "education",
    "creativity",
)

Priority = Literal["low", "medium", "high"]
Status = Literal["active", "completed"]


def _check_category(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    category = value.strip().lower()
    if category not in GOAL_CATEGORIES:
        raise ValueError(f"unknown category: {value}")
    return category


class GoalCreate(CamelModel):
    user_id: Optional[str] = None
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    category: str = "personal-growth"
    priority: Priority = "medium"
    progress: int = Field(default=0, ge=0, le=100)
    status: Status = "active"
    target_date: Optional[date] = None

    @field_validator("title")
    @classmethod
    def require_title(cls, v: str) -> str:
        text = v.strip()
        if not text:
            raise ValueError("title must not be blank")
        return text

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        return _check_category(v)


class GoalChanges(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = None
    priority: Optional[Priority] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)
    status: Optional[Status] = None
    target_date: Optional[date] = None

    @field_validator("title")
    @classmethod
    def require_title(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        text = v.strip()
        if not text:
            raise ValueError("title must not be blank")
        return text

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: Optional[str]) -> Optional[str]:
        return _check_category(v)


class GoalUpdateRequest(CamelModel):
    user_id: Optional[str] = None
    goal_id: str = Field(min_length=1)
    updates: GoalChanges


class GoalProgressUpdate(CamelModel):
    user_id: Optional[str] = None
    progress: int


class GoalDeleteRequest(CamelModel):
    user_id: Optional[str] = None
    goal_id: str = Field(min_length=1)
