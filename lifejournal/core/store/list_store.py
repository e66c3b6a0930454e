"""Read-modify-write access to list-valued resources.

Every list resource (journal entries, goals, community posts) lives under a
single key and is always read and written in full. The transforms here are
the only ways callers change a list:

* ``append``: new record at the head, optionally truncated to ``max_length``
* ``mutate_by_id`` / ``apply_by_id``: replace one record in place
* ``delete_by_id``: drop a record; an unknown id is a no-op

A missing key reads as an empty list.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from lifejournal.core.store.backends import KeyValueStore
from lifejournal.core.utils.ids import new_record_id, utc_now_iso

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _as_list(value: Any) -> List[Record]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"Expected a list value, got {type(value).__name__}")
    return list(value)


class ListResource:
    """One list of records stored under ``key``."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        *,
        timestamps: bool = False,
        max_length: Optional[int] = None,
    ) -> None:
        self.store = store
        self.key = key
        self.timestamps = timestamps
        self.max_length = max_length

    def fetch(self) -> List[Record]:
        return _as_list(self.store.get(self.key))

    def append(self, record: Record) -> Record:
        record = dict(record)
        if self.timestamps:
            now = utc_now_iso()
            record.setdefault("createdAt", now)
            record["updatedAt"] = now

        def transform(current: Any) -> List[Record]:
            items = _as_list(current)
            existing_ids = {item.get("id") for item in items}
            record_id = record.get("id") or new_record_id()
            while record_id in existing_ids:
                logger.warning("Record id %s already present under %s; assigning a new one", record_id, self.key)
                record_id = new_record_id()
            record["id"] = record_id
            updated = [record, *items]
            if self.max_length is not None and len(updated) > self.max_length:
                logger.debug("Truncating %s to %d records", self.key, self.max_length)
                updated = updated[: self.max_length]
            return updated

        self.store.update(self.key, transform)
        return record

    def apply_by_id(self, record_id: str, fn: Callable[[Record], Record]) -> Record:
        """Replace the first record with ``record_id`` by ``fn(record)``."""
        result: Dict[str, Record] = {}

        def transform(current: Any) -> List[Record]:
            items = _as_list(current)
            for index, item in enumerate(items):
                if item.get("id") == record_id:
                    items[index] = fn(dict(item))
                    result["record"] = items[index]
                    return items
            raise ValueError("not_found")

        self.store.update(self.key, transform)
        return result["record"]

    def mutate_by_id(self, record_id: str, changes: Dict[str, Any]) -> Record:
        """Shallow-merge ``changes`` over the record; ``id`` is never overwritten."""

        def merge(record: Record) -> Record:
            merged = {**record, **changes, "id": record["id"]}
            if self.timestamps:
                merged["updatedAt"] = utc_now_iso()
            return merged

        return self.apply_by_id(record_id, merge)

    def delete_by_id(self, record_id: str) -> None:
        def transform(current: Any) -> List[Record]:
            return [item for item in _as_list(current) if item.get("id") != record_id]

        self.store.update(self.key, transform)
