"""
BARRIER TRACKER Planner API - Preferences Router
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from barrier_tracker.database import get_database
from barrier_tracker.auth.dependencies import CurrentUser
from barrier_tracker.preferences.repository import (
    PreferencesRepository,
    PreferencesRepositoryInterface,
)
from barrier_tracker.preferences.schemas import PreferencesResponse, PreferencesUpdateRequest
from barrier_tracker.preferences.service import PreferencesService


router = APIRouter(prefix="/preferences", tags=["Preferences"])


async def get_preferences_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> PreferencesRepositoryInterface:
    """Dependency to get preferences repository instance."""
    return PreferencesRepository(db)


async def get_preferences_service(
    repository: Annotated[PreferencesRepositoryInterface, Depends(get_preferences_repository)]
) -> PreferencesService:
    return PreferencesService(repository)


@router.get("", response_model=PreferencesResponse, summary="Get planning preferences")
async def get_preferences(
    current_user: CurrentUser,
    service: Annotated[PreferencesService, Depends(get_preferences_service)],
) -> PreferencesResponse:
    preferences = await service.get_preferences(current_user.id)
    return service.to_response(preferences)


@router.put("", response_model=PreferencesResponse, summary="Update planning preferences")
async def update_preferences(
    request: PreferencesUpdateRequest,
    current_user: CurrentUser,
    service: Annotated[PreferencesService, Depends(get_preferences_service)],
) -> PreferencesResponse:
    return await service.update_preferences(current_user.id, request)
