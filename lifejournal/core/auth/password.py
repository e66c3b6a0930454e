"""Password hashing helpers."""

from __future__ import annotations

import secrets
from typing import Any, Mapping

from lifejournal.extensions import bcrypt


def hash_password(plain_password: str) -> str:
    """Hash a plaintext password using bcrypt."""
    return bcrypt.generate_password_hash(plain_password).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Validate a plaintext password against a stored bcrypt hash."""
    if not hashed_password:
        return False
    try:
        return bcrypt.check_password_hash(hashed_password, plain_password)
    except ValueError:
        # Malformed hash (wrong salt/prefix)
        return False


def verify_user_password(user: Mapping[str, Any], plain_password: str) -> bool:
    """Check a password against a user record.

    Records written before hashing was introduced carry a plaintext
    ``password`` field instead of ``passwordHash``; those are compared in
    constant time and upgraded by the caller (see ``needs_upgrade``).
    """
    if user.get("passwordHash"):
        return verify_password(plain_password, user["passwordHash"])
    legacy = user.get("password")
    if isinstance(legacy, str) and legacy:
        return secrets.compare_digest(legacy.encode("utf-8"), plain_password.encode("utf-8"))
    return False


def needs_upgrade(user: Mapping[str, Any]) -> bool:
    return not user.get("passwordHash") and "password" in user
