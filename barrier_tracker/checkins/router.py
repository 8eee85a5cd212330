"""
BARRIER TRACKER Planner API - Check-in Router

The day's energy is keyed by calendar date (YYYY-MM-DD).
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from barrier_tracker.database import get_database
from barrier_tracker.auth.dependencies import CurrentUser
from barrier_tracker.checkins.repository import CheckInRepository, CheckInRepositoryInterface
from barrier_tracker.checkins.schemas import (
    CheckInDeleteResponse,
    CheckInResponse,
    CheckInUpsertRequest,
)
from barrier_tracker.checkins.service import CheckInService
from barrier_tracker.tasks.repository import TaskRepositoryInterface
from barrier_tracker.tasks.router import get_task_repository


router = APIRouter(prefix="/checkins", tags=["Check-ins"])


async def get_checkin_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> CheckInRepositoryInterface:
    """Dependency to get check-in repository instance."""
    return CheckInRepository(db)


async def get_checkin_service(
    repository: Annotated[CheckInRepositoryInterface, Depends(get_checkin_repository)],
    task_repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
) -> CheckInService:
    return CheckInService(repository, task_repository)


@router.put("/{day}", response_model=CheckInResponse, summary="Set the day's energy")
async def set_energy(
    day: date,
    request: CheckInUpsertRequest,
    current_user: CurrentUser,
    service: Annotated[CheckInService, Depends(get_checkin_service)],
) -> CheckInResponse:
    return await service.set_energy(current_user.id, day, request)


@router.get("/{day}", response_model=CheckInResponse, summary="Get the day's check-in")
async def get_checkin(
    day: date,
    current_user: CurrentUser,
    service: Annotated[CheckInService, Depends(get_checkin_service)],
) -> CheckInResponse:
    checkin = await service.get_checkin(current_user.id, day)
    if checkin is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Check-in not found",
        )
    return checkin


@router.delete("/{day}", response_model=CheckInDeleteResponse, summary="Delete the day's check-in")
async def delete_checkin(
    day: date,
    current_user: CurrentUser,
    service: Annotated[CheckInService, Depends(get_checkin_service)],
) -> CheckInDeleteResponse:
    removed = await service.delete_checkin(current_user.id, day)
    if removed is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Check-in not found",
        )
    return CheckInDeleteResponse(
        message="Check-in deleted successfully",
        checkin_date=day,
        tasks_deleted=removed,
    )
