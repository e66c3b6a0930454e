"""Key layout of the key-value store."""

from __future__ import annotations

COMMUNITY_POSTS_KEY = "community:posts"


def user_key(email: str) -> str:
    return f"user:{email}"


def entries_key(user_id: str) -> str:
    return f"journal-entries-{user_id}"


def goals_key(user_id: str) -> str:
    return f"goals:{user_id}"
