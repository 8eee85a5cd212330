"""
BARRIER TRACKER Planner API - Task Service

Business logic for task operations including the daily focus limit.
"""

import logging
from datetime import date, datetime
from typing import Optional, List

from barrier_tracker.capacity.energy import MAX_FOCUS_ITEMS
from barrier_tracker.clock import Clock, utcnow
from barrier_tracker.capacity.enums import TaskType
from barrier_tracker.tasks.models import PlannedTask
from barrier_tracker.tasks.repository import TaskRepositoryInterface
from barrier_tracker.tasks.schemas import TaskCreateRequest, TaskUpdateRequest, TaskResponse

logger = logging.getLogger(__name__)

# Optional fields a PATCH may clear with an explicit null
_CLEARABLE_FIELDS = ("anchor_time", "barrier", "custom_barrier")


class FocusLimitReachedError(Exception):
    """Raised when a day already holds MAX_FOCUS_ITEMS open focus tasks."""

    def __init__(self, checkin_date: date):
        self.checkin_date = checkin_date
        super().__init__(
            f"Already {MAX_FOCUS_ITEMS} open focus items on {checkin_date.isoformat()}"
        )


class TaskService:
    """Service layer for task business logic."""

    def __init__(
        self,
        repository: TaskRepositoryInterface,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the task service.

        Args:
            repository: Task repository implementation
            clock: Optional clock function for testing (returns current datetime)
        """
        self.repository = repository
        self._clock = clock or utcnow

    def _now(self) -> datetime:
        """Get current time using the configured clock."""
        return self._clock()

    @staticmethod
    def _task_to_response(task: PlannedTask) -> TaskResponse:
        return TaskResponse(
            id=task.id,
            owner_id=task.owner_id,
            checkin_date=task.checkin_date,
            description=task.description,
            type=task.type,
            complexity=task.complexity,
            completed=task.completed,
            completed_at=task.completed_at,
            sort_order=task.sort_order,
            anchor_time=task.anchor_time,
            barrier=task.barrier,
            custom_barrier=task.custom_barrier,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    async def _ensure_focus_room(
        self,
        owner_id: str,
        checkin_date: date,
        exclude_task_id: Optional[str] = None,
    ) -> None:
        open_focus = await self.repository.count_open_focus(
            owner_id, checkin_date, exclude_task_id=exclude_task_id
        )
        if open_focus >= MAX_FOCUS_ITEMS:
            logger.warning(f"Focus limit reached for owner={owner_id} on {checkin_date}")
            raise FocusLimitReachedError(checkin_date)

    async def create_task(
        self,
        owner_id: str,
        request: TaskCreateRequest,
    ) -> TaskResponse:
        """Create a new task for the owner."""
        if request.type == TaskType.FOCUS:
            await self._ensure_focus_room(owner_id, request.checkin_date)

        task = PlannedTask.create(
            owner_id=owner_id,
            checkin_date=request.checkin_date,
            description=request.description,
            type=request.type,
            complexity=request.complexity,
            sort_order=request.sort_order,
            anchor_time=request.anchor_time,
            barrier=request.barrier,
            custom_barrier=request.custom_barrier,
        )
        await self.repository.create(task)
        logger.info(f"Created {task.type.value} task {task.id} for {task.checkin_date}")
        return self._task_to_response(task)

    async def get_task(self, task_id: str, owner_id: str) -> Optional[TaskResponse]:
        """Get a task by ID, scoped to owner."""
        task = await self.repository.get_by_id(task_id, owner_id)
        if task is None:
            return None
        return self._task_to_response(task)

    async def list_tasks(
        self,
        owner_id: str,
        checkin_date: Optional[date] = None,
        task_type: Optional[TaskType] = None,
        completed: Optional[bool] = None,
    ) -> List[TaskResponse]:
        """List tasks for owner with optional filters."""
        tasks = await self.repository.list_by_owner(
            owner_id=owner_id,
            checkin_date=checkin_date,
            task_type=task_type,
            completed=completed,
        )
        return [self._task_to_response(task) for task in tasks]

    async def update_task(
        self,
        task_id: str,
        owner_id: str,
        request: TaskUpdateRequest,
    ) -> Optional[TaskResponse]:
        """Update a task, scoped to owner."""
        current = await self.repository.get_by_id(task_id, owner_id)
        if current is None:
            return None

        updates = request.model_dump(exclude_none=True)

        # Handle explicit null for optional fields (allow clearing)
        request_data = request.model_dump(exclude_unset=True)
        for name in _CLEARABLE_FIELDS:
            if name in request_data and request_data[name] is None:
                updates[name] = None

        if not updates:
            return self._task_to_response(current)

        next_type = updates.get("type", current.type)
        next_completed = updates.get("completed", current.completed)

        # Reopening or retyping a task can push the day past the focus limit
        if next_type == TaskType.FOCUS and not next_completed and not current.is_open_focus:
            await self._ensure_focus_room(owner_id, current.checkin_date, exclude_task_id=task_id)

        if "completed" in updates:
            if next_completed and not current.completed:
                updates["completed_at"] = self._now()
            elif not next_completed and current.completed:
                updates["completed_at"] = None

        task = await self.repository.update(task_id, owner_id, updates)
        if task is None:
            return None
        return self._task_to_response(task)

    async def delete_task(self, task_id: str, owner_id: str) -> bool:
        """Delete a task, scoped to owner."""
        return await self.repository.delete(task_id, owner_id)
