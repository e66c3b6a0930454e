"""Authentication service layer."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask_jwt_extended import create_access_token

from lifejournal.core.auth.password import hash_password, needs_upgrade, verify_user_password
from lifejournal.core.auth.schemas import SignupRequest
from lifejournal.core.store.keys import user_key
from lifejournal.core.users.schemas import DEFAULT_SETTINGS
from lifejournal.core.users.services import get_user, normalize_email
from lifejournal.core.utils.ids import new_record_id, utc_now_iso
from lifejournal.extensions import kv_store

logger = logging.getLogger(__name__)

PLACEHOLDER_AVATAR = "/placeholder.svg?height=40&width=40"


def register_user(data: SignupRequest) -> Dict[str, Any]:
    """Create the user record; raises ValueError("user_exists") for a taken email."""
    email = normalize_email(data.email)
    record = {
        "id": new_record_id(),
        "email": email,
        "name": (data.name or "").strip() or email.split("@")[0],
        "avatar": PLACEHOLDER_AVATAR,
        "joinDate": utc_now_iso(),
        "plan": "free",
        "settings": dict(DEFAULT_SETTINGS),
        "passwordHash": hash_password(data.password),
    }

    def create(current: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        if current:
            raise ValueError("user_exists")
        return record

    kv_store.backend.update(user_key(email), create)
    logger.info("Registered user %s (%s)", record["id"], email)
    return record


def authenticate_user(email: str, password: str) -> Optional[Dict[str, Any]]:
    """Return the user if credentials are valid."""
    user = get_user(email)
    if not user or not verify_user_password(user, password):
        return None
    if needs_upgrade(user):
        user = _upgrade_legacy_password(user, password)
    return user


def _upgrade_legacy_password(user: Dict[str, Any], password: str) -> Dict[str, Any]:
    hashed = hash_password(password)

    def upgrade(current: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        if not current:
            raise ValueError("not_found")
        upgraded = {key: value for key, value in current.items() if key != "password"}
        upgraded["passwordHash"] = hashed
        return upgraded

    logger.info("Replacing plaintext password for %s with a bcrypt hash", user.get("email"))
    return kv_store.backend.update(user_key(user["email"]), upgrade)


def issue_access_token(user: Dict[str, Any]) -> str:
    return create_access_token(identity=str(user["id"]), additional_claims={"email": user["email"]})
