# mediarank/common/timeutil.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Make a datetime timezone-aware (UTC). Naive values are assumed to be UTC,
    which is what SQLite hands back for DateTime(timezone=True) columns.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def or_epoch(dt: Optional[datetime]) -> datetime:
    """Missing timestamps compare as the epoch."""
    return as_utc(dt) or EPOCH
