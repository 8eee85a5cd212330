"""
BARRIER TRACKER Planner API - Preference Schemas
"""

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from barrier_tracker.capacity.time_boundary import HHMM_PATTERN


class PreferencesUpdateRequest(BaseModel):
    """Partial update; omitted fields keep their current value."""

    hard_stop_time: Optional[str] = Field(default=None, pattern=HHMM_PATTERN, description="Hard stop (HH:MM)")
    work_start: Optional[str] = Field(default=None, pattern=HHMM_PATTERN, description="Work start (HH:MM)")
    work_end: Optional[str] = Field(default=None, pattern=HHMM_PATTERN, description="Work end (HH:MM)")
    timezone: Optional[str] = Field(default=None, max_length=64, description="IANA timezone, e.g. Europe/Berlin")
    use_24_hour: Optional[bool] = Field(default=None, description="Display times in 24-hour format")

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone '{value}'")
        return value


class PreferencesResponse(BaseModel):
    hard_stop_time: str
    work_start: str
    work_end: str
    timezone: str
    use_24_hour: bool
    hard_stop_display: str = Field(description="Hard stop in the user's display format")
    is_default: bool = Field(description="True until the user saves preferences")
    updated_at: Optional[datetime] = None
