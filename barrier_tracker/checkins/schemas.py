"""
BARRIER TRACKER Planner API - Check-in Schemas
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from barrier_tracker.capacity.enums import EnergyLevel


class CheckInUpsertRequest(BaseModel):
    """Set (or change) the day's energy."""

    internal_weather: EnergyLevel = Field(description="Energy level for the day")
    forecast_note: Optional[str] = Field(default=None, max_length=1000, description="Free-form note")


class CheckInResponse(BaseModel):
    id: str
    owner_id: str
    checkin_date: date
    internal_weather: EnergyLevel
    forecast_note: Optional[str] = None
    capacity_label: str = Field(description="Short label for the energy level")
    capacity_range: str = Field(description="Typical number of meaningful tasks")
    created_at: datetime
    updated_at: datetime


class CheckInDeleteResponse(BaseModel):
    message: str
    checkin_date: date
    tasks_deleted: int = Field(description="Tasks removed along with the check-in")
