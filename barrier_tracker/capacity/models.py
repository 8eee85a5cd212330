"""
BARRIER TRACKER Planner API - Capacity Models

Value objects consumed and produced by the capacity engine.
All of them are transient: recomputed from inputs, never stored.
"""

from dataclasses import dataclass
from typing import Optional

from barrier_tracker.capacity.enums import (
    ContextualAction,
    ContextualMessageType,
    TaskComplexity,
    TaskType,
    TimeWarningTone,
)


@dataclass(frozen=True)
class TaskSnapshot:
    """The slice of a task the engine needs."""

    id: str
    description: str
    completed: bool
    complexity: TaskComplexity
    type: TaskType


@dataclass(frozen=True)
class CapacityInfo:
    total_capacity: float
    used_capacity: float
    remaining_capacity: float
    percent_used: float
    can_add_task: bool
    recommended_complexity: Optional[TaskComplexity]


@dataclass(frozen=True)
class TimeInfo:
    """Distance to the hard stop. total_minutes is negative once past it."""

    total_minutes: int
    is_past_stop: bool
    message: str
    hours: int
    minutes: int


@dataclass(frozen=True)
class TimeAdjustedCapacity:
    adjusted_capacity: float
    should_add_tasks: bool
    time_message: str


@dataclass(frozen=True)
class TimeWarning:
    tone: TimeWarningTone
    message: str


@dataclass(frozen=True)
class ContextualMessage:
    type: ContextualMessageType
    message: str
    action: Optional[ContextualAction] = None


@dataclass(frozen=True)
class FlowGreeting:
    flow: str
    emoji: str
