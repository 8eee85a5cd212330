"""
BARRIER TRACKER Planner API - Energy Schedule Models

A schedule is a list of blocks; each block starts at a minute of the day
and lasts until the next block starts.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import uuid

from barrier_tracker.capacity.enums import EnergyLevel


class DayType(str, Enum):
    """Which days a block applies to. No weekday/weekend grouping."""
    ALL = "all"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


# Indexed by datetime.weekday()
WEEKDAYS = (
    DayType.MONDAY,
    DayType.TUESDAY,
    DayType.WEDNESDAY,
    DayType.THURSDAY,
    DayType.FRIDAY,
    DayType.SATURDAY,
    DayType.SUNDAY,
)


@dataclass
class EnergyScheduleBlock:
    id: str
    owner_id: str
    start_time_minutes: int
    energy: EnergyLevel
    label: Optional[str] = None
    day_type: DayType = DayType.ALL
    notify_on_transition: bool = False

    @classmethod
    def create(
        cls,
        owner_id: str,
        start_time_minutes: int,
        energy: EnergyLevel,
        label: Optional[str] = None,
        day_type: DayType = DayType.ALL,
        notify_on_transition: bool = False,
    ) -> "EnergyScheduleBlock":
        return cls(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            start_time_minutes=start_time_minutes,
            energy=energy,
            label=label,
            day_type=day_type,
            notify_on_transition=notify_on_transition,
        )

    def to_dict(self) -> dict:
        """Convert block to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "owner_id": self.owner_id,
            "start_time_minutes": self.start_time_minutes,
            "energy": self.energy.value,
            "label": self.label,
            "day_type": self.day_type.value,
            "notify_on_transition": self.notify_on_transition,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EnergyScheduleBlock":
        """Create block from MongoDB document."""
        return cls(
            id=data["_id"],
            owner_id=data["owner_id"],
            start_time_minutes=data["start_time_minutes"],
            energy=EnergyLevel(data["energy"]),
            label=data.get("label"),
            day_type=DayType(data.get("day_type") or DayType.ALL.value),
            notify_on_transition=bool(data.get("notify_on_transition", False)),
        )
