"""
BARRIER TRACKER Planner API - Energy Schedule Router
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from barrier_tracker.database import get_database
from barrier_tracker.auth.dependencies import CurrentUser
from barrier_tracker.clock import Clock, get_clock
from barrier_tracker.preferences.router import get_preferences_service
from barrier_tracker.preferences.service import PreferencesService
from barrier_tracker.schedule.presets import ENERGY_PRESETS
from barrier_tracker.schedule.repository import ScheduleRepository, ScheduleRepositoryInterface
from barrier_tracker.schedule.schemas import (
    CurrentEnergyResponse,
    PresetListResponse,
    PresetResponse,
    ScheduleReplaceRequest,
    ScheduleResponse,
)
from barrier_tracker.schedule.service import ScheduleService, UnknownPresetError


router = APIRouter(prefix="/schedule", tags=["Energy Schedule"])


async def get_schedule_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> ScheduleRepositoryInterface:
    """Dependency to get schedule repository instance."""
    return ScheduleRepository(db)


async def get_schedule_service(
    repository: Annotated[ScheduleRepositoryInterface, Depends(get_schedule_repository)]
) -> ScheduleService:
    return ScheduleService(repository)


@router.get("/presets", response_model=PresetListResponse, summary="List schedule presets")
async def list_presets(current_user: CurrentUser) -> PresetListResponse:
    presets = [PresetResponse.from_preset(p) for p in ENERGY_PRESETS]
    return PresetListResponse(presets=presets, total=len(presets))


@router.get("", response_model=ScheduleResponse, summary="Get the energy schedule")
async def get_schedule(
    current_user: CurrentUser,
    service: Annotated[ScheduleService, Depends(get_schedule_service)],
) -> ScheduleResponse:
    return await service.get_schedule(current_user.id)


@router.put("", response_model=ScheduleResponse, summary="Replace the energy schedule")
async def replace_schedule(
    request: ScheduleReplaceRequest,
    current_user: CurrentUser,
    service: Annotated[ScheduleService, Depends(get_schedule_service)],
) -> ScheduleResponse:
    try:
        return await service.replace_schedule(current_user.id, request)
    except UnknownPresetError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.get("/current", response_model=CurrentEnergyResponse, summary="Scheduled energy right now")
async def get_current_energy(
    current_user: CurrentUser,
    service: Annotated[ScheduleService, Depends(get_schedule_service)],
    preferences_service: Annotated[PreferencesService, Depends(get_preferences_service)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> CurrentEnergyResponse:
    preferences = await preferences_service.get_preferences(current_user.id)
    return await service.get_current_energy(current_user.id, preferences.local_now(clock()))
