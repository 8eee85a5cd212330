"""
BARRIER TRACKER Planner API - Capacity Engine

Pure functions turning energy, tasks and the clock into planning guidance.
Nothing in this package performs I/O.
"""

from barrier_tracker.capacity.energy import (
    COMPLEXITY_WEIGHT,
    ENERGY_CAPACITY,
    MAX_FOCUS_ITEMS,
    get_capacity_info,
    get_capacity_message,
    get_capacity_range_text,
    get_support_message,
)
from barrier_tracker.capacity.flow import get_flow_greeting
from barrier_tracker.capacity.guidance import get_contextual_message
from barrier_tracker.capacity.time_boundary import (
    get_time_adjusted_capacity,
    get_time_until_stop,
    get_time_warning,
)

__all__ = [
    "COMPLEXITY_WEIGHT",
    "ENERGY_CAPACITY",
    "MAX_FOCUS_ITEMS",
    "get_capacity_info",
    "get_capacity_message",
    "get_capacity_range_text",
    "get_support_message",
    "get_flow_greeting",
    "get_contextual_message",
    "get_time_adjusted_capacity",
    "get_time_until_stop",
    "get_time_warning",
]
