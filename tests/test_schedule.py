"""
BARRIER TRACKER Planner API - Energy Schedule Tests

Resolver and preset unit tests, plus the /schedule endpoints.
"""

import pytest
from datetime import datetime, timezone

from barrier_tracker.capacity.enums import EnergyLevel
from barrier_tracker.schedule.models import DayType, EnergyScheduleBlock
from barrier_tracker.schedule.presets import ENERGY_PRESETS, get_preset_by_id, preset_to_blocks
from barrier_tracker.schedule.resolver import (
    DEFAULT_ENERGY,
    get_active_block,
    get_current_energy_level,
    get_next_transition,
    minutes_until,
)


# 2025-01-15 is a Wednesday
def at(hour: int, minute: int = 0, day: int = 15) -> datetime:
    return datetime(2025, 1, day, hour, minute, tzinfo=timezone.utc)


def block(time_minutes: int, energy: EnergyLevel, day_type: DayType = DayType.ALL) -> EnergyScheduleBlock:
    return EnergyScheduleBlock.create(
        owner_id="user-1",
        start_time_minutes=time_minutes,
        energy=energy,
        day_type=day_type,
    )


@pytest.fixture
def day_blocks():
    return [
        block(9 * 60, EnergyLevel.SPARKY),
        block(13 * 60, EnergyLevel.STEADY),
        block(17 * 60, EnergyLevel.RESTING),
    ]


class TestResolver:

    def test_no_blocks_uses_default(self):
        assert get_active_block([], at(10)) is None
        assert get_current_energy_level([], at(10)) == DEFAULT_ENERGY

    def test_block_active_until_next_starts(self, day_blocks):
        assert get_current_energy_level(day_blocks, at(9)) == EnergyLevel.SPARKY
        assert get_current_energy_level(day_blocks, at(12, 59)) == EnergyLevel.SPARKY
        assert get_current_energy_level(day_blocks, at(13)) == EnergyLevel.STEADY
        assert get_current_energy_level(day_blocks, at(23)) == EnergyLevel.RESTING

    def test_before_first_block_uses_first_block(self, day_blocks):
        assert get_current_energy_level(day_blocks, at(6)) == EnergyLevel.SPARKY

    def test_weekday_blocks_only_apply_on_their_day(self):
        blocks = [
            block(8 * 60, EnergyLevel.FOGGY),
            block(10 * 60, EnergyLevel.SPARKY, DayType.WEDNESDAY),
        ]
        assert get_current_energy_level(blocks, at(11)) == EnergyLevel.SPARKY
        assert get_current_energy_level(blocks, at(11, day=16)) == EnergyLevel.FOGGY

    def test_next_transition(self, day_blocks):
        upcoming = get_next_transition(day_blocks, at(10))
        assert upcoming.energy == EnergyLevel.STEADY
        assert minutes_until(upcoming, at(10)) == 180

    def test_next_transition_wraps_to_tomorrow(self, day_blocks):
        upcoming = get_next_transition(day_blocks, at(20))
        assert upcoming.energy == EnergyLevel.SPARKY
        assert minutes_until(upcoming, at(20)) == 13 * 60


class TestPresets:

    def test_preset_ids_unique(self):
        ids = [p.id for p in ENERGY_PRESETS]
        assert len(ids) == len(set(ids))

    def test_every_preset_time_parses(self):
        for preset in ENERGY_PRESETS:
            blocks = preset_to_blocks(preset, "user-1")
            assert len(blocks) == len(preset.schedule)

    def test_unknown_preset(self):
        assert get_preset_by_id("not-a-preset") is None

    def test_preset_to_blocks_keeps_labels_and_day(self):
        blocks = preset_to_blocks(get_preset_by_id("xr-classic"), "user-1", DayType.MONDAY)
        assert blocks[0].start_time_minutes == 7 * 60
        assert blocks[0].energy == EnergyLevel.FOGGY
        assert blocks[0].label == "Wake up"
        assert all(b.day_type == DayType.MONDAY for b in blocks)


class TestScheduleAPI:
    """Tests for /schedule endpoints."""

    def test_list_presets(self, client, auth_headers):
        response = client.get("/schedule/presets", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == len(ENERGY_PRESETS)
        assert data["presets"][0]["id"] == "xr-classic"

    def test_empty_schedule(self, client, auth_headers):
        response = client.get("/schedule", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"blocks": [], "total": 0}

    def test_replace_from_preset(self, client, auth_headers):
        response = client.put(
            "/schedule",
            json={"preset_id": "xr-classic"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 7
        assert data["blocks"][0]["time"] == "07:00"

    def test_replace_unknown_preset(self, client, auth_headers):
        response = client.put("/schedule", json={"preset_id": "nope"}, headers=auth_headers)
        assert response.status_code == 404

    def test_replace_needs_exactly_one_source(self, client, auth_headers):
        response = client.put("/schedule", json={}, headers=auth_headers)
        assert response.status_code == 422

        response = client.put(
            "/schedule",
            json={"preset_id": "custom", "blocks": []},
            headers=auth_headers,
        )
        assert response.status_code == 422

    def test_replace_rejects_bad_time(self, client, auth_headers):
        response = client.put(
            "/schedule",
            json={"blocks": [{"time": "9am", "energy": "steady"}]},
            headers=auth_headers,
        )
        assert response.status_code == 422

    def test_current_energy_follows_frozen_clock(self, client, auth_headers, frozen_clock):
        client.put(
            "/schedule",
            json={
                "blocks": [
                    {"time": "09:00", "energy": "sparky", "label": "Peak"},
                    {"time": "14:00", "energy": "foggy"},
                ]
            },
            headers=auth_headers,
        )

        response = client.get("/schedule/current", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["energy"] == "sparky"
        assert data["from_schedule"] is True
        assert data["active_block"]["label"] == "Peak"
        assert data["next_transition"]["time"] == "14:00"
        assert data["minutes_until_next_transition"] == 120

        frozen_clock.set(datetime(2025, 1, 15, 15, 0, tzinfo=timezone.utc))
        assert client.get("/schedule/current", headers=auth_headers).json()["energy"] == "foggy"

    def test_current_energy_without_schedule(self, client, auth_headers):
        data = client.get("/schedule/current", headers=auth_headers).json()
        assert data["energy"] == DEFAULT_ENERGY.value
        assert data["from_schedule"] is False
        assert data["next_transition"] is None

    def test_current_energy_uses_user_timezone(self, client, auth_headers):
        client.put("/preferences", json={"timezone": "America/New_York"}, headers=auth_headers)
        client.put(
            "/schedule",
            json={
                "blocks": [
                    {"time": "06:00", "energy": "foggy"},
                    {"time": "10:00", "energy": "sparky"},
                ]
            },
            headers=auth_headers,
        )
        # 12:00 UTC is 07:00 in New York in January
        data = client.get("/schedule/current", headers=auth_headers).json()
        assert data["energy"] == "foggy"

    def test_schedules_are_per_user(self, client, auth_headers, second_auth_headers):
        client.put("/schedule", json={"preset_id": "custom"}, headers=auth_headers)
        response = client.get("/schedule", headers=second_auth_headers)
        assert response.json()["total"] == 0

    def test_requires_auth(self, client):
        assert client.get("/schedule").status_code == 401
