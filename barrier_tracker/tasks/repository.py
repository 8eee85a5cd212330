"""
BARRIER TRACKER Planner API - Task Repository

Repository pattern for task data access.
Includes MongoDB implementation for runtime and an in-memory one for tests.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from barrier_tracker.capacity.enums import TaskType
from barrier_tracker.tasks.models import PlannedTask


def _to_document_value(value):
    """Convert a domain value into its stored form."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date) and not isinstance(value, datetime):
        return value.isoformat()
    return value


class TaskRepositoryInterface(ABC):
    """
    Abstract interface for task repository.

    All operations are scoped by owner_id to enforce ownership isolation.
    """

    @abstractmethod
    async def create(self, task: PlannedTask) -> PlannedTask:
        pass

    @abstractmethod
    async def get_by_id(self, task_id: str, owner_id: str) -> Optional[PlannedTask]:
        pass

    @abstractmethod
    async def list_by_owner(
        self,
        owner_id: str,
        checkin_date: Optional[date] = None,
        task_type: Optional[TaskType] = None,
        completed: Optional[bool] = None,
    ) -> List[PlannedTask]:
        """List tasks for owner in planning order, with optional filters."""
        pass

    @abstractmethod
    async def update(self, task_id: str, owner_id: str, updates: dict) -> Optional[PlannedTask]:
        pass

    @abstractmethod
    async def delete(self, task_id: str, owner_id: str) -> bool:
        pass

    @abstractmethod
    async def delete_for_day(self, owner_id: str, checkin_date: date) -> int:
        pass

    @abstractmethod
    async def count_open_focus(
        self,
        owner_id: str,
        checkin_date: date,
        exclude_task_id: Optional[str] = None,
    ) -> int:
        pass


class TaskRepository(TaskRepositoryInterface):
    """
    MongoDB implementation of the task repository.

    All queries are scoped by owner_id to enforce ownership isolation.
    """

    COLLECTION_NAME = "tasks"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def create(self, task: PlannedTask) -> PlannedTask:
        await self.collection.insert_one(task.to_dict())
        return task

    async def get_by_id(self, task_id: str, owner_id: str) -> Optional[PlannedTask]:
        doc = await self.collection.find_one({"_id": task_id, "owner_id": owner_id})
        if doc is None:
            return None
        return PlannedTask.from_dict(doc)

    async def list_by_owner(
        self,
        owner_id: str,
        checkin_date: Optional[date] = None,
        task_type: Optional[TaskType] = None,
        completed: Optional[bool] = None,
    ) -> List[PlannedTask]:
        query: dict = {"owner_id": owner_id}
        if checkin_date is not None:
            query["checkin_date"] = checkin_date.isoformat()
        if task_type is not None:
            query["type"] = task_type.value
        if completed is not None:
            query["completed"] = completed

        cursor = self.collection.find(query).sort([("sort_order", 1), ("created_at", 1)])
        tasks: List[PlannedTask] = []
        async for doc in cursor:
            tasks.append(PlannedTask.from_dict(doc))
        return tasks

    async def update(self, task_id: str, owner_id: str, updates: dict) -> Optional[PlannedTask]:
        document_updates = {key: _to_document_value(value) for key, value in updates.items()}
        document_updates["updated_at"] = datetime.now(timezone.utc)

        result = await self.collection.find_one_and_update(
            {"_id": task_id, "owner_id": owner_id},
            {"$set": document_updates},
            return_document=True,
        )
        if result is None:
            return None
        return PlannedTask.from_dict(result)

    async def delete(self, task_id: str, owner_id: str) -> bool:
        result = await self.collection.delete_one({"_id": task_id, "owner_id": owner_id})
        return result.deleted_count > 0

    async def delete_for_day(self, owner_id: str, checkin_date: date) -> int:
        result = await self.collection.delete_many(
            {"owner_id": owner_id, "checkin_date": checkin_date.isoformat()}
        )
        return result.deleted_count

    async def count_open_focus(
        self,
        owner_id: str,
        checkin_date: date,
        exclude_task_id: Optional[str] = None,
    ) -> int:
        query: dict = {
            "owner_id": owner_id,
            "checkin_date": checkin_date.isoformat(),
            "type": TaskType.FOCUS.value,
            "completed": False,
        }
        if exclude_task_id is not None:
            query["_id"] = {"$ne": exclude_task_id}
        return await self.collection.count_documents(query)


class InMemoryTaskRepository(TaskRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._tasks: dict[str, PlannedTask] = {}

    def clear(self) -> None:
        self._tasks.clear()

    async def create(self, task: PlannedTask) -> PlannedTask:
        self._tasks[task.id] = task
        return task

    async def get_by_id(self, task_id: str, owner_id: str) -> Optional[PlannedTask]:
        task = self._tasks.get(task_id)
        if task is None or task.owner_id != owner_id:
            return None
        return task

    async def list_by_owner(
        self,
        owner_id: str,
        checkin_date: Optional[date] = None,
        task_type: Optional[TaskType] = None,
        completed: Optional[bool] = None,
    ) -> List[PlannedTask]:
        results = [
            task
            for task in self._tasks.values()
            if task.owner_id == owner_id
            and (checkin_date is None or task.checkin_date == checkin_date)
            and (task_type is None or task.type == task_type)
            and (completed is None or task.completed == completed)
        ]
        results.sort(key=lambda t: (t.sort_order, t.created_at))
        return results

    async def update(self, task_id: str, owner_id: str, updates: dict) -> Optional[PlannedTask]:
        task = self._tasks.get(task_id)
        if task is None or task.owner_id != owner_id:
            return None

        for key, value in updates.items():
            if hasattr(task, key):
                setattr(task, key, value)

        task.updated_at = datetime.now(timezone.utc)
        return task

    async def delete(self, task_id: str, owner_id: str) -> bool:
        task = self._tasks.get(task_id)
        if task is None or task.owner_id != owner_id:
            return False
        del self._tasks[task_id]
        return True

    async def delete_for_day(self, owner_id: str, checkin_date: date) -> int:
        doomed = [
            task_id
            for task_id, task in self._tasks.items()
            if task.owner_id == owner_id and task.checkin_date == checkin_date
        ]
        for task_id in doomed:
            del self._tasks[task_id]
        return len(doomed)

    async def count_open_focus(
        self,
        owner_id: str,
        checkin_date: date,
        exclude_task_id: Optional[str] = None,
    ) -> int:
        return sum(
            1
            for task in self._tasks.values()
            if task.owner_id == owner_id
            and task.checkin_date == checkin_date
            and task.is_open_focus
            and task.id != exclude_task_id
        )
