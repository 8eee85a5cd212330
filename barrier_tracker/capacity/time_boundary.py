"""
BARRIER TRACKER Planner API - Time Boundary Calculator

Distance from "now" to the user's hard stop, plus the time-of-day helpers
built on the same HH:MM parsing.

The current time is always passed in; nothing here reads the wall clock.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from barrier_tracker.capacity.enums import TimeWarningTone
from barrier_tracker.capacity.models import TimeAdjustedCapacity, TimeInfo, TimeWarning

MINUTES_IN_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")

# Strict zero-padded form accepted at the API boundary
HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def parse_time_to_minutes(value: Optional[str]) -> Optional[int]:
    """Parse 24-hour "HH:MM" into minutes since midnight, or None if malformed."""
    if not value:
        return None
    match = _TIME_PATTERN.match(value.strip())
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def require_time_minutes(value: str) -> int:
    """Like parse_time_to_minutes, but a malformed value is a caller error."""
    minutes = parse_time_to_minutes(value)
    if minutes is None:
        raise ValueError(f"Expected time in HH:MM 24-hour format, got {value!r}")
    return minutes


def minutes_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


def get_time_until_stop(hard_stop_time: str, now: datetime) -> TimeInfo:
    """
    Compute the time remaining until the hard stop on now's calendar day.

    Once the stop has passed, is_past_stop is True and total_minutes holds
    the negative overage. The stop never rolls over to tomorrow.
    """
    stop_minutes = require_time_minutes(hard_stop_time)
    stop = now.replace(
        hour=stop_minutes // 60,
        minute=stop_minutes % 60,
        second=0,
        microsecond=0,
    )

    # Aware datetimes sharing a ZoneInfo subtract as wall-clock times; go
    # through UTC so DST transition days count real elapsed minutes
    if now.tzinfo is not None:
        stop, now = stop.astimezone(timezone.utc), now.astimezone(timezone.utc)
    total_minutes = (stop - now) // timedelta(minutes=1)
    is_past_stop = total_minutes < 0
    hours, minutes = divmod(abs(total_minutes), 60)

    if is_past_stop:
        message = "Past your hard stop"
    elif total_minutes < 60:
        message = f"{max(minutes, 1)}m remaining"
    elif total_minutes < 120:
        message = f"{hours}h {minutes}m remaining"
    else:
        message = f"{hours}h {minutes}m until hard stop"

    return TimeInfo(
        total_minutes=total_minutes,
        is_past_stop=is_past_stop,
        message=message,
        hours=hours,
        minutes=minutes,
    )


def get_time_adjusted_capacity(
    base_capacity: float,
    minutes_until_stop: int,
) -> TimeAdjustedCapacity:
    """Shrink the effective capacity as the hard stop approaches."""
    if minutes_until_stop <= 0:
        return TimeAdjustedCapacity(
            adjusted_capacity=0.0,
            should_add_tasks=False,
            time_message="Past your hard stop - no more tasks",
        )

    if minutes_until_stop < 60:
        return TimeAdjustedCapacity(
            adjusted_capacity=base_capacity * 0.3,
            should_add_tasks=False,
            time_message="Less than 1 hour left - focus on finishing",
        )

    if minutes_until_stop < 120:
        return TimeAdjustedCapacity(
            adjusted_capacity=base_capacity * 0.6,
            should_add_tasks=False,
            time_message="Less than 2 hours left - minimal new tasks",
        )

    if minutes_until_stop < 180:
        return TimeAdjustedCapacity(
            adjusted_capacity=base_capacity * 0.8,
            should_add_tasks=True,
            time_message="A few hours left - plan carefully",
        )

    return TimeAdjustedCapacity(
        adjusted_capacity=base_capacity,
        should_add_tasks=True,
        time_message="Plenty of time - plan your day",
    )


def get_time_warning(time_info: Optional[TimeInfo]) -> Optional[TimeWarning]:
    """Banner shown in the last two hours before the hard stop and after it."""
    if time_info is None:
        return None

    if time_info.is_past_stop:
        return TimeWarning(
            tone=TimeWarningTone.AFTER,
            message="You are past your hard stop. Start winding down when you can.",
        )

    total = time_info.total_minutes
    if total <= 30:
        return TimeWarning(
            tone=TimeWarningTone.URGENT,
            message=f"{max(total, 1)} min until your hard stop. Time to wrap up for the day.",
        )

    if total <= 120:
        hours, minutes = divmod(total, 60)
        parts = []
        if hours > 0:
            parts.append(f"{hours} {'hour' if hours == 1 else 'hours'}")
        if minutes > 0:
            parts.append(f"{minutes} min")
        return TimeWarning(
            tone=TimeWarningTone.SOON,
            message=f"{' '.join(parts)} until your hard stop. Choose one last focus.",
        )

    return None


def format_time(time_24: str, use_24_hour: bool = False) -> str:
    """Render "14:30" as "2:30 PM" (or unchanged in 24-hour mode)."""
    if use_24_hour:
        return time_24

    total = parse_time_to_minutes(time_24)
    if total is None:
        return time_24

    hours, minutes = divmod(total, 60)
    period = "PM" if hours >= 12 else "AM"
    hours_12 = hours % 12 or 12
    return f"{hours_12}:{minutes:02d} {period}"


def format_minutes_to_time(minutes: int, use_24_hour: bool = False) -> str:
    hours = (minutes // 60) % 24
    mins = minutes % 60
    return format_time(f"{hours:02d}:{mins:02d}", use_24_hour)
