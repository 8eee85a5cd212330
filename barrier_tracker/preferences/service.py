"""
BARRIER TRACKER Planner API - Preferences Service
"""

import logging

from barrier_tracker.capacity.time_boundary import format_time
from barrier_tracker.preferences.models import Preferences
from barrier_tracker.preferences.repository import PreferencesRepositoryInterface
from barrier_tracker.preferences.schemas import PreferencesResponse, PreferencesUpdateRequest

logger = logging.getLogger(__name__)


class PreferencesService:

    def __init__(self, repository: PreferencesRepositoryInterface):
        self.repository = repository

    async def get_preferences(self, owner_id: str) -> Preferences:
        """Stored preferences, or the configured defaults."""
        preferences = await self.repository.get(owner_id)
        if preferences is None:
            return Preferences.defaults(owner_id)
        return preferences

    @staticmethod
    def to_response(preferences: Preferences) -> PreferencesResponse:
        return PreferencesResponse(
            hard_stop_time=preferences.hard_stop_time,
            work_start=preferences.work_start,
            work_end=preferences.work_end,
            timezone=preferences.timezone,
            use_24_hour=preferences.use_24_hour,
            hard_stop_display=format_time(preferences.hard_stop_time, preferences.use_24_hour),
            is_default=preferences.updated_at is None,
            updated_at=preferences.updated_at,
        )

    async def update_preferences(
        self,
        owner_id: str,
        request: PreferencesUpdateRequest,
    ) -> PreferencesResponse:
        preferences = await self.get_preferences(owner_id)
        for name, value in request.model_dump(exclude_none=True).items():
            setattr(preferences, name, value)

        saved = await self.repository.save(preferences)
        logger.info(f"Saved preferences for owner={owner_id}")
        return self.to_response(saved)
