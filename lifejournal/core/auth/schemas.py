"""Schemas for the sign-in/sign-up endpoint."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

AuthAction = Literal["signin", "signup"]


class AuthRequest(BaseModel):
    # Sign-in accepts any stored email, including reserved demo domains.
    action: AuthAction
    email: str = Field(min_length=3, max_length=254)
    password: str = Field(min_length=1, max_length=128)
    name: Optional[str] = Field(default=None, max_length=120)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class SignupRequest(BaseModel):
    action: Literal["signup"] = "signup"
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    name: Optional[str] = Field(default=None, max_length=120)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()
