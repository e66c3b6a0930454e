"""Key-value store backends.

Values are JSON documents stored whole under a single key. Both backends
expose the same three calls:

* ``get(key)`` returns the decoded value or ``None`` when the key is absent.
* ``set(key, value)`` replaces the value unconditionally.
* ``update(key, transform)`` reads the current value, passes it to
  ``transform`` and writes the result back only if nobody else wrote the key
  in between. The Redis backend does this with WATCH/MULTI and retries on
  conflict; the memory backend holds a lock for the duration.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Callable, Dict, Optional

import redis

logger = logging.getLogger(__name__)

Transform = Callable[[Any], Any]


class StoreUnavailable(RuntimeError):
    """The backing store could not complete the request."""


def _encode(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def _decode(raw: Optional[str]) -> Any:
    if raw is None:
        return None
    return json.loads(raw)


class KeyValueStore:
    """Interface shared by all backends."""

    def get(self, key: str) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def update(self, key: str, transform: Transform) -> Any:
        raise NotImplementedError

    def ping(self) -> bool:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """In-process backend for development and tests.

    Values are kept JSON-encoded so callers never share mutable state with
    the store, the same as they would with Redis.
    """

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> Any:
        with self._lock:
            return _decode(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = _encode(value)

    def update(self, key: str, transform: Transform) -> Any:
        with self._lock:
            new_value = transform(_decode(self._data.get(key)))
            self._data[key] = _encode(new_value)
            return _decode(self._data[key])

    def ping(self) -> bool:
        return True


class RedisStore(KeyValueStore):
    """Redis backend storing each value as a JSON string."""

    def __init__(self, client: redis.Redis, *, max_retries: int = 5) -> None:
        self._client = client
        self._max_retries = max(max_retries, 0)

    @classmethod
    def from_url(cls, url: str, *, max_retries: int = 5, socket_timeout: float | None = None) -> "RedisStore":
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )
        return cls(client, max_retries=max_retries)

    def get(self, key: str) -> Any:
        try:
            raw = self._client.get(key)
        except redis.RedisError as exc:
            logger.error("Redis GET failed for %s: %s", key, exc)
            raise StoreUnavailable(str(exc)) from exc
        return _decode(raw)

    def set(self, key: str, value: Any) -> None:
        try:
            self._client.set(key, _encode(value))
        except redis.RedisError as exc:
            logger.error("Redis SET failed for %s: %s", key, exc)
            raise StoreUnavailable(str(exc)) from exc

    def update(self, key: str, transform: Transform) -> Any:
        conflicts = 0
        while True:
            try:
                with self._client.pipeline() as pipe:
                    pipe.watch(key)
                    new_value = transform(_decode(pipe.get(key)))
                    pipe.multi()
                    pipe.set(key, _encode(new_value))
                    pipe.execute()
                    return new_value
            except redis.WatchError:
                conflicts += 1
                if conflicts > self._max_retries:
                    logger.error("Giving up on %s after %d write conflicts", key, conflicts)
                    raise StoreUnavailable("write_conflict")
                logger.warning("Concurrent write on %s, retrying (%d/%d)", key, conflicts, self._max_retries)
            except redis.RedisError as exc:
                logger.error("Redis update failed for %s: %s", key, exc)
                raise StoreUnavailable(str(exc)) from exc

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False


def create_store(url: str, *, max_retries: int = 5, socket_timeout: float | None = None) -> KeyValueStore:
    """Build a backend from a URL such as ``redis://localhost:6379/0`` or ``memory://``."""
    scheme = (url or "memory://").split(":", 1)[0].lower()
    if scheme == "memory":
        return MemoryStore()
    if scheme in ("redis", "rediss", "unix"):
        return RedisStore.from_url(url, max_retries=max_retries, socket_timeout=socket_timeout)
    raise ValueError(f"Unsupported key-value store URL: {url}")
