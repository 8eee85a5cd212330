"""
BARRIER TRACKER Planner API - Command Center Schemas

Response models for the recomputed day status.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from barrier_tracker.capacity.enums import (
    ContextualAction,
    ContextualMessageType,
    EnergyLevel,
    TaskComplexity,
    TimeWarningTone,
)
from barrier_tracker.capacity.models import (
    CapacityInfo,
    ContextualMessage,
    FlowGreeting,
    TimeAdjustedCapacity,
    TimeInfo,
    TimeWarning,
)


class CapacityResponse(BaseModel):
    total_capacity: float
    used_capacity: float = Field(
        description="Weight of every focus task planned for the day, completed ones included"
    )
    remaining_capacity: float
    percent_used: float
    can_add_task: bool = Field(
        description=(
            "Whether the energy budget has room left. Advisory only: POST /tasks is "
            "limited by the number of open focus items, not by this budget"
        )
    )
    recommended_complexity: Optional[TaskComplexity] = None

    @classmethod
    def from_info(cls, info: CapacityInfo) -> "CapacityResponse":
        return cls(
            total_capacity=info.total_capacity,
            used_capacity=info.used_capacity,
            remaining_capacity=info.remaining_capacity,
            percent_used=info.percent_used,
            can_add_task=info.can_add_task,
            recommended_complexity=info.recommended_complexity,
        )


class TimeInfoResponse(BaseModel):
    total_minutes: int = Field(description="Minutes until the hard stop, negative once past it")
    is_past_stop: bool
    message: str
    hours: int
    minutes: int

    @classmethod
    def from_info(cls, info: TimeInfo) -> "TimeInfoResponse":
        return cls(
            total_minutes=info.total_minutes,
            is_past_stop=info.is_past_stop,
            message=info.message,
            hours=info.hours,
            minutes=info.minutes,
        )


class TimeAdjustedCapacityResponse(BaseModel):
    adjusted_capacity: float
    should_add_tasks: bool
    time_message: str

    @classmethod
    def from_adjusted(cls, adjusted: TimeAdjustedCapacity) -> "TimeAdjustedCapacityResponse":
        return cls(
            adjusted_capacity=adjusted.adjusted_capacity,
            should_add_tasks=adjusted.should_add_tasks,
            time_message=adjusted.time_message,
        )


class TimeWarningResponse(BaseModel):
    tone: TimeWarningTone
    message: str

    @classmethod
    def from_warning(cls, warning: TimeWarning) -> "TimeWarningResponse":
        return cls(tone=warning.tone, message=warning.message)


class ContextualMessageResponse(BaseModel):
    type: ContextualMessageType
    message: str
    action: Optional[ContextualAction] = None

    @classmethod
    def from_message(cls, message: ContextualMessage) -> "ContextualMessageResponse":
        return cls(type=message.type, message=message.message, action=message.action)


class FlowGreetingResponse(BaseModel):
    flow: str
    emoji: str

    @classmethod
    def from_greeting(cls, greeting: FlowGreeting) -> "FlowGreetingResponse":
        return cls(flow=greeting.flow, emoji=greeting.emoji)


class TaskCounts(BaseModel):
    focus_total: int
    focus_completed: int
    life_total: int
    life_completed: int


class CommandCenterStatus(BaseModel):
    """Everything the planner screen derives for one day, recomputed per request."""

    day: date
    evaluated_at: datetime = Field(description="Moment the status was computed, in the user's timezone")
    energy: Optional[EnergyLevel] = Field(default=None, description="Energy from the day's check-in")
    scheduled_energy: Optional[EnergyLevel] = Field(
        default=None,
        description="Energy the user's schedule predicts right now, when one is set",
    )
    capacity: CapacityResponse
    capacity_label: Optional[str] = None
    capacity_range: Optional[str] = None
    support_message: str
    time_info: Optional[TimeInfoResponse] = Field(
        default=None,
        description="Only present when the day is the user's current day",
    )
    time_warning: Optional[TimeWarningResponse] = None
    time_adjusted_capacity: Optional[TimeAdjustedCapacityResponse] = None
    contextual_message: ContextualMessageResponse
    flow_greeting: FlowGreetingResponse
    counts: TaskCounts
    hard_stop_time: str
    hard_stop_display: str
    refresh_after_seconds: int = Field(description="Seconds until the status should be recomputed")
