"""
BARRIER TRACKER Planner API - Flow Greeting

Names the phase of the working day ("Morning flow", "Focus flow", ...)
relative to the user's work hours.
"""

from datetime import datetime
from typing import Optional

from barrier_tracker.capacity.models import FlowGreeting
from barrier_tracker.capacity.time_boundary import (
    MINUTES_IN_DAY,
    minutes_of_day,
    parse_time_to_minutes,
)

MORNING = FlowGreeting(flow="Morning flow", emoji="🌅")
AFTERNOON = FlowGreeting(flow="Afternoon flow", emoji="☀️")
FOCUS = FlowGreeting(flow="Focus flow", emoji="🎯")
EVENING = FlowGreeting(flow="Evening flow", emoji="🌙")
WINDDOWN = FlowGreeting(flow="Wind-down flow", emoji="✨")

DEFAULT_WORK_START = "08:00"
DEFAULT_WORK_END = "18:00"

# Used when the configured work hours cannot be parsed
_FALLBACK_WINDOWS = (
    (5 * 60, 11 * 60, MORNING),
    (11 * 60, 14 * 60, FOCUS),
    (14 * 60, 16 * 60, AFTERNOON),
    (16 * 60, 20 * 60, EVENING),
)

# Work windows shorter than this are split into thirds
_SHORT_WINDOW_MINUTES = 240


def _fallback_flow(current_minutes: int) -> FlowGreeting:
    for start, end, flow in _FALLBACK_WINDOWS:
        if start <= current_minutes < end:
            return flow
    return WINDDOWN


def get_flow_greeting(
    now: datetime,
    work_start: Optional[str] = None,
    work_end: Optional[str] = None,
) -> FlowGreeting:
    start_minutes = parse_time_to_minutes(work_start or DEFAULT_WORK_START)
    end_minutes = parse_time_to_minutes(work_end or DEFAULT_WORK_END)
    current_minutes = minutes_of_day(now)

    if start_minutes is None or end_minutes is None:
        return _fallback_flow(current_minutes)

    # Overnight shifts end on the next day
    adjusted_end = end_minutes
    if end_minutes <= start_minutes:
        adjusted_end += MINUTES_IN_DAY

    adjusted_now = current_minutes
    if adjusted_end > MINUTES_IN_DAY and current_minutes < start_minutes:
        adjusted_now += MINUTES_IN_DAY

    if adjusted_now >= adjusted_end or adjusted_now < start_minutes:
        return WINDDOWN

    work_window = adjusted_end - start_minutes
    relative = adjusted_now - start_minutes

    if work_window < _SHORT_WINDOW_MINUTES:
        third = work_window / 3
        if relative < third:
            return MORNING
        if relative < third * 2:
            return FOCUS
        return EVENING

    focus_start = start_minutes + work_window * 0.35
    focus_end = start_minutes + work_window * 0.65
    if focus_start <= adjusted_now < focus_end:
        return FOCUS

    midpoint = start_minutes + work_window / 2
    evening_start = max(start_minutes, adjusted_end - 120)

    if adjusted_now < midpoint:
        return MORNING
    if adjusted_now < evening_start:
        return AFTERNOON
    return EVENING
