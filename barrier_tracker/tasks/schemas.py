"""
BARRIER TRACKER Planner API - Task Schemas

Pydantic models for task API requests and responses.
"""

from datetime import date, datetime
from typing import Optional, List

from pydantic import BaseModel, Field

from barrier_tracker.barriers.catalog import BarrierType
from barrier_tracker.capacity.enums import TaskComplexity, TaskType
from barrier_tracker.capacity.time_boundary import HHMM_PATTERN


class TaskCreateRequest(BaseModel):
    """Request model for creating a task."""

    checkin_date: date = Field(description="Day the task is planned for (YYYY-MM-DD)")
    description: str = Field(min_length=1, max_length=500, description="What needs doing")
    type: TaskType = Field(default=TaskType.FOCUS, description="focus or life")
    complexity: TaskComplexity = Field(default=TaskComplexity.MEDIUM, description="Capacity weight")
    sort_order: int = Field(default=0, ge=0, description="Position within the day")
    anchor_time: Optional[str] = Field(default=None, pattern=HHMM_PATTERN, description="Anchor time (HH:MM)")
    barrier: Optional[BarrierType] = Field(default=None, description="Barrier standing in the way")
    custom_barrier: Optional[str] = Field(default=None, max_length=500, description="Barrier in the user's words")


class TaskUpdateRequest(BaseModel):
    """Request model for updating a task."""

    description: Optional[str] = Field(default=None, min_length=1, max_length=500)
    type: Optional[TaskType] = Field(default=None)
    complexity: Optional[TaskComplexity] = Field(default=None)
    completed: Optional[bool] = Field(default=None)
    sort_order: Optional[int] = Field(default=None, ge=0)
    anchor_time: Optional[str] = Field(default=None, pattern=HHMM_PATTERN)
    barrier: Optional[BarrierType] = Field(default=None)
    custom_barrier: Optional[str] = Field(default=None, max_length=500)


class TaskResponse(BaseModel):
    """Response model for a single task."""

    id: str = Field(description="Task ID")
    owner_id: str = Field(description="Owner user ID")
    checkin_date: date
    description: str
    type: TaskType
    complexity: TaskComplexity
    completed: bool
    completed_at: Optional[datetime] = None
    sort_order: int
    anchor_time: Optional[str] = None
    barrier: Optional[BarrierType] = None
    custom_barrier: Optional[str] = None
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")


class TaskListResponse(BaseModel):
    """Response model for a list of tasks."""

    tasks: List[TaskResponse] = Field(description="List of tasks")
    total: int = Field(description="Total number of tasks in the list")


class TaskDeleteResponse(BaseModel):
    """Response model for task deletion."""

    message: str = Field(description="Success message")
    id: str = Field(description="Deleted task ID")
