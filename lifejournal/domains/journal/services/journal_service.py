"""Journal services: append and list a user's entries."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from lifejournal.core.store import ListResource
from lifejournal.core.store.keys import entries_key
from lifejournal.core.utils.ids import utc_now_iso
from lifejournal.domains.journal.schemas.journal_schemas import JournalEntryCreate
from lifejournal.domains.journal.services import stats_service
from lifejournal.extensions import kv_store

logger = logging.getLogger(__name__)


def _entries(user_id: str) -> ListResource:
    return ListResource(kv_store.backend, entries_key(user_id))


def create_entry(user_id: str, data: JournalEntryCreate, *, now: Optional[datetime] = None) -> dict:
    record = {
        "userId": user_id,
        "date": utc_now_iso(now),
        **data.model_dump(by_alias=True, exclude={"user_id"}),
    }
    entry = _entries(user_id).append(record)
    logger.info("Journal entry %s created for user %s", entry["id"], user_id)
    return entry


def list_entries(user_id: str, *, limit: Optional[int] = None) -> List[dict]:
    entries = _entries(user_id).fetch()
    return entries if limit is None else entries[:limit]


def entry_stats(user_id: str, *, now: Optional[datetime] = None) -> dict:
    return stats_service.summarize(list_entries(user_id), now)
