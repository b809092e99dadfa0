from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc)


def today_iso(now: datetime | None = None) -> str:
    """Calendar date (UTC) as YYYY-MM-DD, the format stored in ``attendance.date``."""
    now = now or now_utc()
    return now.astimezone(timezone.utc).date().isoformat()
