"""
BARRIER TRACKER Planner API - Energy Schedule Service
"""

import logging
from datetime import datetime
from typing import List

from barrier_tracker.capacity.time_boundary import require_time_minutes
from barrier_tracker.schedule.models import EnergyScheduleBlock
from barrier_tracker.schedule.presets import get_preset_by_id, preset_to_blocks
from barrier_tracker.schedule.repository import ScheduleRepositoryInterface
from barrier_tracker.schedule.resolver import (
    DEFAULT_ENERGY,
    get_active_block,
    get_next_transition,
    minutes_until,
)
from barrier_tracker.schedule.schemas import (
    CurrentEnergyResponse,
    ScheduleBlockResponse,
    ScheduleReplaceRequest,
    ScheduleResponse,
)

logger = logging.getLogger(__name__)


class UnknownPresetError(Exception):
    """Raised when a schedule is requested from a preset that does not exist."""

    def __init__(self, preset_id: str):
        self.preset_id = preset_id
        super().__init__(f"Unknown energy schedule preset '{preset_id}'")


class ScheduleService:

    def __init__(self, repository: ScheduleRepositoryInterface):
        self.repository = repository

    @staticmethod
    def _to_response(blocks: List[EnergyScheduleBlock]) -> ScheduleResponse:
        items = [ScheduleBlockResponse.from_block(b) for b in blocks]
        return ScheduleResponse(blocks=items, total=len(items))

    async def get_blocks(self, owner_id: str) -> List[EnergyScheduleBlock]:
        return await self.repository.list_for_owner(owner_id)

    async def get_schedule(self, owner_id: str) -> ScheduleResponse:
        return self._to_response(await self.get_blocks(owner_id))

    async def replace_schedule(
        self,
        owner_id: str,
        request: ScheduleReplaceRequest,
    ) -> ScheduleResponse:
        if request.preset_id is not None:
            preset = get_preset_by_id(request.preset_id)
            if preset is None:
                raise UnknownPresetError(request.preset_id)
            blocks = preset_to_blocks(preset, owner_id, request.day_type)
        else:
            blocks = [
                EnergyScheduleBlock.create(
                    owner_id=owner_id,
                    start_time_minutes=require_time_minutes(item.time),
                    energy=item.energy,
                    label=item.label,
                    day_type=item.day_type,
                    notify_on_transition=item.notify_on_transition,
                )
                for item in request.blocks or []
            ]

        saved = await self.repository.replace_for_owner(owner_id, blocks)
        logger.info(f"Replaced energy schedule for owner={owner_id} ({len(saved)} blocks)")
        return self._to_response(saved)

    async def get_current_energy(self, owner_id: str, now: datetime) -> CurrentEnergyResponse:
        """Scheduled energy at `now`, which must already be in the user's local time."""
        blocks = await self.get_blocks(owner_id)
        active = get_active_block(blocks, now)
        upcoming = get_next_transition(blocks, now)

        return CurrentEnergyResponse(
            energy=active.energy if active else DEFAULT_ENERGY,
            from_schedule=active is not None,
            active_block=ScheduleBlockResponse.from_block(active) if active else None,
            next_transition=ScheduleBlockResponse.from_block(upcoming) if upcoming else None,
            minutes_until_next_transition=minutes_until(upcoming, now) if upcoming else None,
            evaluated_at=now,
        )
