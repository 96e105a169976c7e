"""Timestamp helpers."""

from datetime import datetime, timezone
from typing import Optional


def ensure_utc(ts: Optional[datetime]) -> Optional[datetime]:
    """Treat a zone-less timestamp as UTC.

    GPX times may omit the zone; mixing naive and aware values would make
    subtraction fail.

    Args:
        ts: Timestamp or None

    Returns:
        Aware datetime (unchanged if it already has a zone), or None
    """
    if ts is None or ts.tzinfo is not None:
        return ts
    return ts.replace(tzinfo=timezone.utc)
