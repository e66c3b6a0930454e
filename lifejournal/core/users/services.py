"""User service layer; one record per email under ``user:<email>``."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from lifejournal.core.store.keys import user_key
from lifejournal.core.users.schemas import UserChanges
from lifejournal.extensions import kv_store

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_user(email: str) -> Optional[Dict[str, Any]]:
    return kv_store.backend.get(user_key(normalize_email(email)))


def update_user(email: str, changes: UserChanges) -> Dict[str, Any]:
    """Shallow-merge profile changes; the email key never changes.

    Raises ValueError("not_found") when there is no such user.
    """
    email = normalize_email(email)
    updates = changes.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)

    def merge(current: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        if not current:
            raise ValueError("not_found")
        return {**current, **updates, "email": email}

    user = kv_store.backend.update(user_key(email), merge)
    logger.info("Updated profile fields %s for %s", sorted(updates), email)
    return user
