"""
BARRIER TRACKER Planner API - Command Center Service

Assembles the day's derived planning state from stored check-ins, tasks,
preferences and energy schedule. Nothing is cached: callers invoke
recompute() again after a mutation or when refresh_after_seconds elapses.
"""

import logging
from datetime import date, datetime
from typing import Optional

from barrier_tracker.config import settings
from barrier_tracker.capacity.energy import (
    get_capacity_info,
    get_capacity_message,
    get_capacity_range_text,
    get_support_message,
)
from barrier_tracker.capacity.enums import TaskType
from barrier_tracker.capacity.flow import get_flow_greeting
from barrier_tracker.capacity.guidance import get_contextual_message
from barrier_tracker.capacity.time_boundary import (
    format_time,
    get_time_adjusted_capacity,
    get_time_until_stop,
    get_time_warning,
)
from barrier_tracker.checkins.repository import CheckInRepositoryInterface
from barrier_tracker.command_center.schemas import (
    CapacityResponse,
    CommandCenterStatus,
    ContextualMessageResponse,
    FlowGreetingResponse,
    TaskCounts,
    TimeAdjustedCapacityResponse,
    TimeInfoResponse,
    TimeWarningResponse,
)
from barrier_tracker.preferences.models import Preferences
from barrier_tracker.preferences.repository import PreferencesRepositoryInterface
from barrier_tracker.schedule.repository import ScheduleRepositoryInterface
from barrier_tracker.schedule.resolver import get_active_block
from barrier_tracker.tasks.repository import TaskRepositoryInterface

logger = logging.getLogger(__name__)


def seconds_until_refresh(now: datetime) -> int:
    """Seconds to the next minute boundary, capped by STATUS_REFRESH_SECONDS."""
    until_next_minute = 60 - now.second
    return max(1, min(until_next_minute, settings.STATUS_REFRESH_SECONDS))


class CommandCenterService:
    """Read-only service computing the planner status for one user and day."""

    def __init__(
        self,
        checkin_repository: CheckInRepositoryInterface,
        task_repository: TaskRepositoryInterface,
        preferences_repository: PreferencesRepositoryInterface,
        schedule_repository: Optional[ScheduleRepositoryInterface] = None,
    ):
        self.checkin_repository = checkin_repository
        self.task_repository = task_repository
        self.preferences_repository = preferences_repository
        self.schedule_repository = schedule_repository

    async def _load_preferences(self, owner_id: str) -> Preferences:
        preferences = await self.preferences_repository.get(owner_id)
        return preferences or Preferences.defaults(owner_id)

    async def recompute(
        self,
        owner_id: str,
        day: Optional[date],
        now: datetime,
    ) -> CommandCenterStatus:
        """
        Compute the status for `day` as of `now`.

        Args:
            owner_id: User whose day is computed
            day: Planning day; defaults to the user's local date
            now: Timezone-aware current moment

        The hard-stop countdown only applies when `day` is the user's
        current local day. Other days report no time info and are never
        treated as past the stop.
        """
        preferences = await self._load_preferences(owner_id)
        local_now = preferences.local_now(now)
        day = day or local_now.date()
        is_today = day == local_now.date()

        checkin = await self.checkin_repository.get_for_day(owner_id, day)
        energy = checkin.internal_weather if checkin else None

        tasks = await self.task_repository.list_by_owner(owner_id=owner_id, checkin_date=day)
        snapshots = [task.to_snapshot() for task in tasks]

        capacity = get_capacity_info(energy, snapshots)

        time_info = get_time_until_stop(preferences.hard_stop_time, local_now) if is_today else None
        time_warning = get_time_warning(time_info)
        adjusted = (
            get_time_adjusted_capacity(capacity.total_capacity, time_info.total_minutes)
            if time_info
            else None
        )

        contextual = get_contextual_message(
            snapshots,
            is_past_stop=time_info.is_past_stop if time_info else False,
            has_energy_set=energy is not None,
            can_add_task=capacity.can_add_task,
        )

        scheduled_energy = None
        if self.schedule_repository is not None:
            blocks = await self.schedule_repository.list_for_owner(owner_id)
            active = get_active_block(blocks, local_now)
            if active is not None:
                scheduled_energy = active.energy

        focus = [s for s in snapshots if s.type == TaskType.FOCUS]
        life = [s for s in snapshots if s.type == TaskType.LIFE]

        logger.debug(
            f"Recomputed status for owner={owner_id} day={day}: "
            f"energy={energy.value if energy else None} used={capacity.used_capacity}"
        )

        return CommandCenterStatus(
            day=day,
            evaluated_at=local_now,
            energy=energy,
            scheduled_energy=scheduled_energy,
            capacity=CapacityResponse.from_info(capacity),
            capacity_label=get_capacity_message(energy) if energy else None,
            capacity_range=get_capacity_range_text(energy) if energy else None,
            support_message=get_support_message(energy),
            time_info=TimeInfoResponse.from_info(time_info) if time_info else None,
            time_warning=TimeWarningResponse.from_warning(time_warning) if time_warning else None,
            time_adjusted_capacity=(
                TimeAdjustedCapacityResponse.from_adjusted(adjusted) if adjusted else None
            ),
            contextual_message=ContextualMessageResponse.from_message(contextual),
            flow_greeting=FlowGreetingResponse.from_greeting(
                get_flow_greeting(local_now, preferences.work_start, preferences.work_end)
            ),
            counts=TaskCounts(
                focus_total=len(focus),
                focus_completed=sum(1 for s in focus if s.completed),
                life_total=len(life),
                life_completed=sum(1 for s in life if s.completed),
            ),
            hard_stop_time=preferences.hard_stop_time,
            hard_stop_display=format_time(preferences.hard_stop_time, preferences.use_24_hour),
            refresh_after_seconds=seconds_until_refresh(local_now),
        )
