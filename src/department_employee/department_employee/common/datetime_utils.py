from __future__ import annotations

from datetime import datetime
from typing import Optional


def now_local() -> datetime:
    """Current local time, truncated to whole seconds (TIMESTAMP precision).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().replace(microsecond=0)


def format_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
