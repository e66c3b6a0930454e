"""Typed schemas for user IO."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import EmailStr, Field, field_validator

from lifejournal.core.utils.validation import CamelModel

Plan = Literal["free", "pro", "premium"]

PRIVATE_FIELDS = ("passwordHash", "password")

DEFAULT_SETTINGS = {
    "notifications": True,
    "publicProfile": False,
    "emailUpdates": True,
}


class UserChanges(CamelModel):
    name: Optional[str] = Field(default=None, max_length=120)
    avatar: Optional[str] = Field(default=None, max_length=500)
    plan: Optional[Plan] = None
    settings: Optional[Dict[str, bool]] = None

    @field_validator("name")
    @classmethod
    def drop_blank_name(cls, v: Optional[str]) -> Optional[str]:
        # A blank name leaves the stored one untouched.
        text = (v or "").strip()
        return text or None


class UserUpdateRequest(CamelModel):
    email: Optional[EmailStr] = None
    updates: UserChanges

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().lower() if v else v


def serialize_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """User record without credential fields."""
    return {key: value for key, value in user.items() if key not in PRIVATE_FIELDS}
