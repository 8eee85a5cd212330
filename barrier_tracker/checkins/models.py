"""
BARRIER TRACKER Planner API - Check-in Models

A check-in records the day's internal weather (energy level).
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional
import uuid

from barrier_tracker.capacity.enums import EnergyLevel


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class CheckIn:
    """One owner's energy for one calendar day."""

    id: str
    owner_id: str
    checkin_date: date
    internal_weather: EnergyLevel
    forecast_note: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        owner_id: str,
        checkin_date: date,
        internal_weather: EnergyLevel,
        forecast_note: Optional[str] = None,
    ) -> "CheckIn":
        now = _utcnow()
        return cls(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            checkin_date=checkin_date,
            internal_weather=internal_weather,
            forecast_note=forecast_note,
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> dict:
        """Convert check-in to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "owner_id": self.owner_id,
            "checkin_date": self.checkin_date.isoformat(),
            "internal_weather": self.internal_weather.value,
            "forecast_note": self.forecast_note,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CheckIn":
        """Create check-in from MongoDB document."""
        return cls(
            id=data["_id"],
            owner_id=data["owner_id"],
            checkin_date=date.fromisoformat(data["checkin_date"]),
            internal_weather=EnergyLevel(data["internal_weather"]),
            forecast_note=data.get("forecast_note"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
