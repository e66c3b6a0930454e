"""Key-value persistence for LifeJournal."""

from lifejournal.core.store.backends import (
    KeyValueStore,
    MemoryStore,
    RedisStore,
    StoreUnavailable,
    create_store,
)
from lifejournal.core.store.list_store import ListResource

__all__ = [
    "KeyValueStore",
    "ListResource",
    "MemoryStore",
    "RedisStore",
    "StoreUnavailable",
    "create_store",
]
