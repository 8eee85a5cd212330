"""
BARRIER TRACKER Planner API - Scheduled Energy Resolver

Works out which schedule block is active at a given moment.
A block is active from its start until the next block's start.
"""

from datetime import datetime
from typing import Iterable, Optional

from barrier_tracker.capacity.enums import EnergyLevel
from barrier_tracker.capacity.time_boundary import MINUTES_IN_DAY, minutes_of_day
from barrier_tracker.schedule.models import WEEKDAYS, DayType, EnergyScheduleBlock

# Energy assumed when no block applies to the day
DEFAULT_ENERGY = EnergyLevel.STEADY


def blocks_for_day(
    blocks: Iterable[EnergyScheduleBlock],
    moment: datetime,
) -> list[EnergyScheduleBlock]:
    """Blocks for moment's weekday or for every day, sorted by start."""
    day_name = WEEKDAYS[moment.weekday()]
    todays = [b for b in blocks if b.day_type in (day_name, DayType.ALL)]
    return sorted(todays, key=lambda b: b.start_time_minutes)


def get_active_block(
    blocks: Iterable[EnergyScheduleBlock],
    now: datetime,
) -> Optional[EnergyScheduleBlock]:
    todays = blocks_for_day(blocks, now)
    if not todays:
        return None

    now_minutes = minutes_of_day(now)
    active = todays[0]  # before the first block, the first block still applies
    for block in todays:
        if block.start_time_minutes > now_minutes:
            break
        active = block
    return active


def get_current_energy_level(
    blocks: Iterable[EnergyScheduleBlock],
    now: datetime,
) -> EnergyLevel:
    active = get_active_block(blocks, now)
    if active is None:
        return DEFAULT_ENERGY
    return active.energy


def get_next_transition(
    blocks: Iterable[EnergyScheduleBlock],
    now: datetime,
) -> Optional[EnergyScheduleBlock]:
    """The next block to start, wrapping to tomorrow's first block."""
    todays = blocks_for_day(blocks, now)
    if not todays:
        return None

    now_minutes = minutes_of_day(now)
    for block in todays:
        if block.start_time_minutes > now_minutes:
            return block
    return todays[0]


def minutes_until(block: EnergyScheduleBlock, now: datetime) -> int:
    now_minutes = minutes_of_day(now)
    if block.start_time_minutes > now_minutes:
        return block.start_time_minutes - now_minutes
    return MINUTES_IN_DAY - now_minutes + block.start_time_minutes
