"""
BARRIER TRACKER Planner API - Check-in Service
"""

import logging
from datetime import date
from typing import Optional

from barrier_tracker.capacity.energy import get_capacity_message, get_capacity_range_text
from barrier_tracker.checkins.models import CheckIn
from barrier_tracker.checkins.repository import CheckInRepositoryInterface
from barrier_tracker.checkins.schemas import CheckInResponse, CheckInUpsertRequest
from barrier_tracker.tasks.repository import TaskRepositoryInterface

logger = logging.getLogger(__name__)


class CheckInService:
    """Service layer for daily check-ins."""

    def __init__(
        self,
        repository: CheckInRepositoryInterface,
        task_repository: TaskRepositoryInterface,
    ):
        self.repository = repository
        self.task_repository = task_repository

    @staticmethod
    def _checkin_to_response(checkin: CheckIn) -> CheckInResponse:
        return CheckInResponse(
            id=checkin.id,
            owner_id=checkin.owner_id,
            checkin_date=checkin.checkin_date,
            internal_weather=checkin.internal_weather,
            forecast_note=checkin.forecast_note,
            capacity_label=get_capacity_message(checkin.internal_weather),
            capacity_range=get_capacity_range_text(checkin.internal_weather),
            created_at=checkin.created_at,
            updated_at=checkin.updated_at,
        )

    async def set_energy(
        self,
        owner_id: str,
        checkin_date: date,
        request: CheckInUpsertRequest,
    ) -> CheckInResponse:
        checkin = await self.repository.upsert(
            owner_id=owner_id,
            checkin_date=checkin_date,
            internal_weather=request.internal_weather,
            forecast_note=request.forecast_note,
        )
        logger.info(
            f"Energy for owner={owner_id} on {checkin_date} set to {checkin.internal_weather.value}"
        )
        return self._checkin_to_response(checkin)

    async def get_checkin(self, owner_id: str, checkin_date: date) -> Optional[CheckInResponse]:
        checkin = await self.repository.get_for_day(owner_id, checkin_date)
        if checkin is None:
            return None
        return self._checkin_to_response(checkin)

    async def delete_checkin(self, owner_id: str, checkin_date: date) -> Optional[int]:
        """Delete the day's check-in and its tasks. Returns tasks removed, or None if absent."""
        deleted = await self.repository.delete_for_day(owner_id, checkin_date)
        if not deleted:
            return None
        removed = await self.task_repository.delete_for_day(owner_id, checkin_date)
        logger.info(f"Deleted check-in for owner={owner_id} on {checkin_date} ({removed} tasks)")
        return removed
