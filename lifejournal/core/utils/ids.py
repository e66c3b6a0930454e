"""Record identifiers and timestamps."""

from __future__ import annotations

import secrets
import time
from datetime import datetime, timezone
from typing import Optional


def new_record_id() -> str:
    """Millisecond timestamp plus a random suffix; sorts in creation order."""
    return f"{time.time_ns() // 1_000_000}-{secrets.token_hex(3)}"


def utc_now_iso(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.astimezone()
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
