"""Goal services: per-user goal list with in-place updates."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from lifejournal.core.store import ListResource
from lifejournal.core.store.keys import goals_key
from lifejournal.domains.goals.schemas.goal_schemas import GoalChanges, GoalCreate
from lifejournal.extensions import kv_store

logger = logging.getLogger(__name__)

PROGRESS_MIN = 0
PROGRESS_MAX = 100


def _goals(user_id: str) -> ListResource:
    return ListResource(kv_store.backend, goals_key(user_id), timestamps=True)


def list_goals(user_id: str) -> List[dict]:
    return _goals(user_id).fetch()


def create_goal(user_id: str, data: GoalCreate) -> dict:
    record = {
        "userId": user_id,
        **data.model_dump(mode="json", by_alias=True, exclude={"user_id"}),
    }
    goal = _goals(user_id).append(record)
    logger.info("Goal %s created for user %s", goal["id"], user_id)
    return goal


def update_goal(user_id: str, goal_id: str, changes: GoalChanges) -> dict:
    """Shallow-merge the supplied fields; raises ValueError("not_found")."""
    updates: Dict[str, Any] = {
        key: value
        for key, value in changes.model_dump(mode="json", by_alias=True, exclude_unset=True).items()
        # targetDate is the only field that may be cleared with null
        if value is not None or key == "targetDate"
    }
    return _goals(user_id).mutate_by_id(goal_id, updates)


def update_progress(user_id: str, goal_id: str, progress: int) -> dict:
    """Clamp progress to 0-100; the goal is completed exactly at 100."""
    clamped = max(PROGRESS_MIN, min(PROGRESS_MAX, int(progress)))
    status = "completed" if clamped >= PROGRESS_MAX else "active"
    return _goals(user_id).mutate_by_id(goal_id, {"progress": clamped, "status": status})


def delete_goal(user_id: str, goal_id: str) -> None:
    _goals(user_id).delete_by_id(goal_id)
    logger.info("Goal %s deleted for user %s", goal_id, user_id)
