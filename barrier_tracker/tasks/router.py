"""
BARRIER TRACKER Planner API - Task Router

CRUD endpoints for focus and life tasks.
All endpoints are JWT-protected and user-scoped.
"""

from datetime import date
from typing import Optional, Annotated

from fastapi import APIRouter, HTTPException, status, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from barrier_tracker.database import get_database
from barrier_tracker.auth.dependencies import CurrentUser
from barrier_tracker.clock import Clock, get_clock
from barrier_tracker.capacity.enums import TaskType
from barrier_tracker.tasks.service import TaskService, FocusLimitReachedError
from barrier_tracker.tasks.repository import TaskRepository, TaskRepositoryInterface
from barrier_tracker.tasks.schemas import (
    TaskCreateRequest,
    TaskUpdateRequest,
    TaskResponse,
    TaskListResponse,
    TaskDeleteResponse,
)


router = APIRouter(prefix="/tasks", tags=["Tasks"])


async def get_task_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> TaskRepositoryInterface:
    """Dependency to get task repository instance."""
    return TaskRepository(db)


async def get_task_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(repository, clock=clock)


def _focus_limit_exception(error: FocusLimitReachedError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=str(error),
    )


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    request: TaskCreateRequest,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Create a new task for the authenticated user.

    Returns 409 when the day already holds the maximum number of open focus items.
    The energy budget reported by /command-center is advisory and not checked here.
    """
    try:
        return await service.create_task(owner_id=current_user.id, request=request)
    except FocusLimitReachedError as e:
        raise _focus_limit_exception(e)


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List tasks",
)
async def list_tasks(
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
    day: Optional[date] = Query(default=None, description="Only tasks planned for this day"),
    task_type: Optional[TaskType] = Query(default=None, alias="type", description="focus or life"),
    completed: Optional[bool] = Query(default=None, description="Filter by completion"),
) -> TaskListResponse:
    tasks = await service.list_tasks(
        owner_id=current_user.id,
        checkin_date=day,
        task_type=task_type,
        completed=completed,
    )
    return TaskListResponse(tasks=tasks, total=len(tasks))


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task by ID",
)
async def get_task(
    task_id: str,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Get a specific task by ID.

    Returns 404 if the task doesn't exist or belongs to another user.
    """
    task = await service.get_task(task_id, current_user.id)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return task


@router.patch(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update a task",
)
async def update_task(
    task_id: str,
    request: TaskUpdateRequest,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Update a task by ID.

    Only provided fields will be updated. Toggling `completed` stamps or
    clears `completed_at`.
    """
    try:
        task = await service.update_task(task_id, current_user.id, request)
    except FocusLimitReachedError as e:
        raise _focus_limit_exception(e)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return task


@router.delete(
    "/{task_id}",
    response_model=TaskDeleteResponse,
    summary="Delete a task",
)
async def delete_task(
    task_id: str,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskDeleteResponse:
    deleted = await service.delete_task(task_id, current_user.id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return TaskDeleteResponse(message="Task deleted successfully", id=task_id)
