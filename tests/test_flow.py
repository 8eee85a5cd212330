"""
BARRIER TRACKER Planner API - Flow Greeting Tests
"""

import pytest
from datetime import datetime, timezone

from barrier_tracker.capacity.flow import (
    AFTERNOON,
    EVENING,
    FOCUS,
    MORNING,
    WINDDOWN,
    get_flow_greeting,
)


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 1, 15, hour, minute, tzinfo=timezone.utc)


class TestFlowGreeting:

    @pytest.mark.parametrize(
        "hour, minute, expected",
        [
            (7, 0, WINDDOWN),
            (9, 0, MORNING),
            (12, 0, FOCUS),
            (15, 0, AFTERNOON),
            (17, 0, EVENING),
            (18, 0, WINDDOWN),
        ],
    )
    def test_standard_day(self, hour, minute, expected):
        assert get_flow_greeting(at(hour, minute), "08:00", "18:00") == expected

    def test_defaults_to_eight_to_six(self):
        assert get_flow_greeting(at(12)) == FOCUS

    @pytest.mark.parametrize(
        "hour, expected",
        [(23, MORNING), (1, FOCUS), (5, EVENING), (7, WINDDOWN)],
    )
    def test_overnight_shift(self, hour, expected):
        assert get_flow_greeting(at(hour), "22:00", "06:00") == expected

    @pytest.mark.parametrize(
        "hour, minute, expected",
        [(9, 30, MORNING), (10, 30, FOCUS), (11, 30, EVENING)],
    )
    def test_short_window_split_in_thirds(self, hour, minute, expected):
        assert get_flow_greeting(at(hour, minute), "09:00", "12:00") == expected

    @pytest.mark.parametrize(
        "hour, expected",
        [(6, MORNING), (12, FOCUS), (15, AFTERNOON), (17, EVENING), (21, WINDDOWN)],
    )
    def test_unparseable_hours_use_fixed_windows(self, hour, expected):
        assert get_flow_greeting(at(hour), "whenever", "18:00") == expected
