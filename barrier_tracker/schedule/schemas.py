"""
BARRIER TRACKER Planner API - Energy Schedule Schemas
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from barrier_tracker.capacity.enums import EnergyLevel
from barrier_tracker.capacity.time_boundary import HHMM_PATTERN, format_minutes_to_time
from barrier_tracker.schedule.models import DayType, EnergyScheduleBlock
from barrier_tracker.schedule.presets import EnergySchedulePreset


class ScheduleBlockInput(BaseModel):
    time: str = Field(pattern=HHMM_PATTERN, description="Block start (HH:MM)")
    energy: EnergyLevel
    label: Optional[str] = Field(default=None, max_length=200)
    day_type: DayType = Field(default=DayType.ALL)
    notify_on_transition: bool = Field(default=False)


class ScheduleReplaceRequest(BaseModel):
    """Replace the whole schedule, either from a preset or from explicit blocks."""

    preset_id: Optional[str] = Field(default=None, description="Preset to copy")
    day_type: DayType = Field(default=DayType.ALL, description="Day the preset applies to")
    blocks: Optional[List[ScheduleBlockInput]] = Field(default=None, max_length=48)

    @model_validator(mode="after")
    def exactly_one_source(self) -> "ScheduleReplaceRequest":
        if (self.preset_id is None) == (self.blocks is None):
            raise ValueError("Provide exactly one of preset_id or blocks")
        return self


class ScheduleBlockResponse(BaseModel):
    id: str
    time: str = Field(description="Block start (HH:MM)")
    start_time_minutes: int
    energy: EnergyLevel
    label: Optional[str] = None
    day_type: DayType
    notify_on_transition: bool

    @classmethod
    def from_block(cls, block: EnergyScheduleBlock) -> "ScheduleBlockResponse":
        return cls(
            id=block.id,
            time=format_minutes_to_time(block.start_time_minutes, use_24_hour=True),
            start_time_minutes=block.start_time_minutes,
            energy=block.energy,
            label=block.label,
            day_type=block.day_type,
            notify_on_transition=block.notify_on_transition,
        )


class ScheduleResponse(BaseModel):
    blocks: List[ScheduleBlockResponse]
    total: int


class PresetEntryResponse(BaseModel):
    time: str
    energy: EnergyLevel
    label: Optional[str] = None


class PresetResponse(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    schedule: List[PresetEntryResponse]

    @classmethod
    def from_preset(cls, preset: EnergySchedulePreset) -> "PresetResponse":
        return cls(
            id=preset.id,
            name=preset.name,
            description=preset.description,
            icon=preset.icon,
            schedule=[
                PresetEntryResponse(time=e.time, energy=e.energy, label=e.label or None)
                for e in preset.schedule
            ],
        )


class PresetListResponse(BaseModel):
    presets: List[PresetResponse]
    total: int


class CurrentEnergyResponse(BaseModel):
    energy: EnergyLevel = Field(description="Energy the schedule predicts right now")
    from_schedule: bool = Field(description="False when no block applies and the default was used")
    active_block: Optional[ScheduleBlockResponse] = None
    next_transition: Optional[ScheduleBlockResponse] = None
    minutes_until_next_transition: Optional[int] = None
    evaluated_at: datetime
