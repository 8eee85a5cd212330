"""
BARRIER TRACKER Planner API - Command Center Router
"""

from datetime import date
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from barrier_tracker.auth.dependencies import CurrentUser
from barrier_tracker.checkins.repository import CheckInRepositoryInterface
from barrier_tracker.checkins.router import get_checkin_repository
from barrier_tracker.clock import Clock, get_clock
from barrier_tracker.command_center.schemas import CommandCenterStatus
from barrier_tracker.command_center.service import CommandCenterService
from barrier_tracker.preferences.repository import PreferencesRepositoryInterface
from barrier_tracker.preferences.router import get_preferences_repository
from barrier_tracker.schedule.repository import ScheduleRepositoryInterface
from barrier_tracker.schedule.router import get_schedule_repository
from barrier_tracker.tasks.repository import TaskRepositoryInterface
from barrier_tracker.tasks.router import get_task_repository


router = APIRouter(prefix="/command-center", tags=["Command Center"])


async def get_command_center_service(
    checkin_repository: Annotated[CheckInRepositoryInterface, Depends(get_checkin_repository)],
    task_repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    preferences_repository: Annotated[PreferencesRepositoryInterface, Depends(get_preferences_repository)],
    schedule_repository: Annotated[ScheduleRepositoryInterface, Depends(get_schedule_repository)],
) -> CommandCenterService:
    return CommandCenterService(
        checkin_repository,
        task_repository,
        preferences_repository,
        schedule_repository,
    )


@router.get("", response_model=CommandCenterStatus, summary="Recompute the day's planning status")
async def get_status(
    current_user: CurrentUser,
    service: Annotated[CommandCenterService, Depends(get_command_center_service)],
    clock: Annotated[Clock, Depends(get_clock)],
    day: Optional[date] = Query(default=None, description="Planning day, defaults to today in the user's timezone"),
) -> CommandCenterStatus:
    """
    Capacity, hard-stop countdown and guidance for a day.

    Clients poll again after `refresh_after_seconds` and after every task or
    check-in change.
    """
    return await service.recompute(current_user.id, day, clock())
