from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_iso(now: datetime | None = None) -> str:
    """Local calendar date as YYYY-MM-DD."""
    return (now or now_local()).date().isoformat()
