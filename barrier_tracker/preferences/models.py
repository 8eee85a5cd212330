"""
BARRIER TRACKER Planner API - Preference Models
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from barrier_tracker.config import settings


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Preferences:
    """Per-user planning settings. Times are 24-hour HH:MM strings in the user's timezone."""

    owner_id: str
    hard_stop_time: str
    work_start: str
    work_end: str
    timezone: str = "UTC"
    use_24_hour: bool = False
    updated_at: Optional[datetime] = None

    @classmethod
    def defaults(cls, owner_id: str) -> "Preferences":
        """Settings used until the user saves their own."""
        return cls(
            owner_id=owner_id,
            hard_stop_time=settings.DEFAULT_HARD_STOP_TIME,
            work_start=settings.DEFAULT_WORK_START,
            work_end=settings.DEFAULT_WORK_END,
            timezone=settings.DEFAULT_TIMEZONE,
        )

    def local_now(self, now: datetime) -> datetime:
        """Express an aware `now` in the user's timezone."""
        return now.astimezone(ZoneInfo(self.timezone))

    def to_dict(self) -> dict:
        """Convert preferences to dictionary for MongoDB storage."""
        return {
            "_id": self.owner_id,
            "hard_stop_time": self.hard_stop_time,
            "work_start": self.work_start,
            "work_end": self.work_end,
            "timezone": self.timezone,
            "use_24_hour": self.use_24_hour,
            "updated_at": self.updated_at or _utcnow(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Preferences":
        """Create preferences from MongoDB document."""
        return cls(
            owner_id=data["_id"],
            hard_stop_time=data.get("hard_stop_time") or settings.DEFAULT_HARD_STOP_TIME,
            work_start=data.get("work_start") or settings.DEFAULT_WORK_START,
            work_end=data.get("work_end") or settings.DEFAULT_WORK_END,
            timezone=data.get("timezone") or settings.DEFAULT_TIMEZONE,
            use_24_hour=bool(data.get("use_24_hour", False)),
            updated_at=data.get("updated_at"),
        )
