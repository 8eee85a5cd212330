"""
BARRIER TRACKER Planner API - Task Models

Internal task model for database operations.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional
import uuid

from barrier_tracker.barriers.catalog import BarrierType
from barrier_tracker.capacity.enums import TaskComplexity, TaskType
from barrier_tracker.capacity.models import TaskSnapshot


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class PlannedTask:
    """A focus or life task planned for one day."""

    id: str
    owner_id: str
    checkin_date: date
    description: str
    type: TaskType
    complexity: TaskComplexity
    completed: bool = False
    completed_at: Optional[datetime] = None
    sort_order: int = 0
    anchor_time: Optional[str] = None
    barrier: Optional[BarrierType] = None
    custom_barrier: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        owner_id: str,
        checkin_date: date,
        description: str,
        type: TaskType,
        complexity: TaskComplexity,
        sort_order: int = 0,
        anchor_time: Optional[str] = None,
        barrier: Optional[BarrierType] = None,
        custom_barrier: Optional[str] = None,
    ) -> "PlannedTask":
        """Create a new task with generated ID."""
        now = _utcnow()
        return cls(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            checkin_date=checkin_date,
            description=description,
            type=type,
            complexity=complexity,
            sort_order=sort_order,
            anchor_time=anchor_time,
            barrier=barrier,
            custom_barrier=custom_barrier,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_open_focus(self) -> bool:
        return self.type == TaskType.FOCUS and not self.completed

    def to_snapshot(self) -> TaskSnapshot:
        """The view of this task handed to the capacity engine."""
        return TaskSnapshot(
            id=self.id,
            description=self.description,
            completed=self.completed,
            complexity=self.complexity,
            type=self.type,
        )

    def to_dict(self) -> dict:
        """Convert task to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "owner_id": self.owner_id,
            "checkin_date": self.checkin_date.isoformat(),
            "description": self.description,
            "type": self.type.value,
            "complexity": self.complexity.value,
            "completed": self.completed,
            "completed_at": self.completed_at,
            "sort_order": self.sort_order,
            "anchor_time": self.anchor_time,
            "barrier": self.barrier.value if self.barrier else None,
            "custom_barrier": self.custom_barrier,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlannedTask":
        """
        Create task from MongoDB document.

        Unknown type/complexity/barrier values raise ValueError here, so the
        rest of the code only ever sees valid enums.
        """
        return cls(
            id=data["_id"],
            owner_id=data["owner_id"],
            checkin_date=date.fromisoformat(data["checkin_date"]),
            description=data["description"],
            type=TaskType(data["type"]),
            complexity=TaskComplexity(data.get("complexity") or TaskComplexity.MEDIUM.value),
            completed=bool(data.get("completed", False)),
            completed_at=data.get("completed_at"),
            sort_order=data.get("sort_order", 0),
            anchor_time=data.get("anchor_time"),
            barrier=BarrierType(data["barrier"]) if data.get("barrier") else None,
            custom_barrier=data.get("custom_barrier"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
