"""
BARRIER TRACKER Planner API - Clock

The single place request handlers get "now" from, so tests can freeze it.
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


async def get_clock() -> Clock:
    """Dependency returning the clock used by time-dependent endpoints."""
    return utcnow
