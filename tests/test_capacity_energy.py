"""
BARRIER TRACKER Planner API - Energy Capacity Tests

Pure tests for the capacity budget; no HTTP involved.
"""

import pytest

from barrier_tracker.capacity.energy import (
    COMPLEXITY_WEIGHT,
    ENERGY_CAPACITY,
    NO_ENERGY_SUPPORT_MESSAGE,
    calculate_used_capacity,
    get_capacity_info,
    get_capacity_message,
    get_capacity_range_text,
    get_support_message,
    recommend_complexity,
)
from barrier_tracker.capacity.enums import EnergyLevel, TaskComplexity, TaskType
from tests.conftest import make_task


class TestCapacityTables:
    """The energy and complexity tables are ordered."""

    def test_energy_capacity_strictly_decreasing(self):
        order = [
            EnergyLevel.SPARKY,
            EnergyLevel.STEADY,
            EnergyLevel.FLOWING,
            EnergyLevel.FOGGY,
            EnergyLevel.RESTING,
        ]
        values = [ENERGY_CAPACITY[level] for level in order]
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == len(values)

    def test_complexity_weight_strictly_increasing(self):
        order = [TaskComplexity.QUICK, TaskComplexity.MEDIUM, TaskComplexity.DEEP]
        values = [COMPLEXITY_WEIGHT[c] for c in order]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_resting_has_no_capacity(self):
        assert ENERGY_CAPACITY[EnergyLevel.RESTING] == 0


class TestUsedCapacity:

    def test_life_tasks_never_count(self):
        tasks = [
            make_task(type=TaskType.LIFE, complexity=TaskComplexity.DEEP),
            make_task(type=TaskType.LIFE, complexity=TaskComplexity.QUICK),
        ]
        assert calculate_used_capacity(tasks) == 0

    def test_sums_focus_weights(self):
        tasks = [
            make_task(complexity=TaskComplexity.QUICK),
            make_task(complexity=TaskComplexity.DEEP),
        ]
        expected = COMPLEXITY_WEIGHT[TaskComplexity.QUICK] + COMPLEXITY_WEIGHT[TaskComplexity.DEEP]
        assert calculate_used_capacity(tasks) == expected

    def test_completed_focus_tasks_still_count(self):
        """Finished work was still spent from the day's budget."""
        tasks = [make_task(completed=True, complexity=TaskComplexity.DEEP)]
        assert calculate_used_capacity(tasks) == COMPLEXITY_WEIGHT[TaskComplexity.DEEP]


class TestRecommendComplexity:

    @pytest.mark.parametrize(
        "remaining, expected",
        [
            (0.0, None),
            (0.4, None),
            (0.5, TaskComplexity.QUICK),
            (1.0, TaskComplexity.QUICK),
            (1.5, TaskComplexity.MEDIUM),
            (2.0, TaskComplexity.DEEP),
            (4.0, TaskComplexity.DEEP),
        ],
    )
    def test_largest_tier_that_fits(self, remaining, expected):
        assert recommend_complexity(remaining) == expected


class TestGetCapacityInfo:

    def test_empty_day(self):
        info = get_capacity_info(EnergyLevel.STEADY, [])
        assert info.total_capacity == 3
        assert info.used_capacity == 0
        assert info.remaining_capacity == 3
        assert info.percent_used == 0
        assert info.can_add_task is True
        assert info.recommended_complexity == TaskComplexity.DEEP

    def test_steady_with_one_deep_task_recommends_quick(self):
        info = get_capacity_info(EnergyLevel.STEADY, [make_task(complexity=TaskComplexity.DEEP)])
        assert info.used_capacity == 2
        assert info.remaining_capacity == 1
        assert info.can_add_task is True
        assert info.recommended_complexity == TaskComplexity.QUICK

    def test_over_budget_clamps_remaining_but_not_percent(self):
        tasks = [make_task(complexity=TaskComplexity.DEEP) for _ in range(2)]
        info = get_capacity_info(EnergyLevel.FOGGY, tasks)
        assert info.used_capacity == 4
        assert info.remaining_capacity == 0
        assert info.percent_used == 400
        assert info.can_add_task is False
        assert info.recommended_complexity is None

    def test_resting_day(self):
        info = get_capacity_info(EnergyLevel.RESTING, [make_task(complexity=TaskComplexity.QUICK)])
        assert info.total_capacity == 0
        assert info.percent_used == 0
        assert info.can_add_task is False
        assert info.recommended_complexity is None

    def test_no_energy_is_an_empty_budget(self):
        info = get_capacity_info(None, [make_task(complexity=TaskComplexity.QUICK)])
        assert info.total_capacity == 0
        assert info.used_capacity == 0.5
        assert info.remaining_capacity == 0
        assert info.percent_used == 0
        assert info.can_add_task is False
        assert info.recommended_complexity is None

    def test_can_add_iff_remaining_positive(self):
        for energy in EnergyLevel:
            for count in range(4):
                tasks = [make_task(complexity=TaskComplexity.QUICK) for _ in range(count)]
                info = get_capacity_info(energy, tasks)
                assert info.can_add_task == (info.remaining_capacity > 0)
                assert info.remaining_capacity == max(info.total_capacity - info.used_capacity, 0)

    def test_adding_a_task_never_raises_remaining(self):
        for energy in EnergyLevel:
            for task_type in TaskType:
                for complexity in TaskComplexity:
                    tasks = []
                    previous = get_capacity_info(energy, tasks).remaining_capacity
                    for _ in range(4):
                        tasks.append(make_task(complexity=complexity, type=task_type))
                        remaining = get_capacity_info(energy, tasks).remaining_capacity
                        assert remaining <= previous
                        previous = remaining

    def test_mixed_additions_never_raise_remaining(self):
        additions = [
            make_task(type=TaskType.LIFE, complexity=TaskComplexity.DEEP),
            make_task(complexity=TaskComplexity.QUICK),
            make_task(completed=True, complexity=TaskComplexity.MEDIUM),
            make_task(type=TaskType.LIFE, complexity=TaskComplexity.QUICK),
            make_task(complexity=TaskComplexity.DEEP),
        ]
        for energy in EnergyLevel:
            previous = get_capacity_info(energy, []).remaining_capacity
            for count in range(1, len(additions) + 1):
                remaining = get_capacity_info(energy, additions[:count]).remaining_capacity
                assert remaining <= previous
                previous = remaining

    def test_same_input_same_output(self):
        tasks = [make_task(complexity=TaskComplexity.MEDIUM)]
        assert get_capacity_info(EnergyLevel.SPARKY, tasks) == get_capacity_info(
            EnergyLevel.SPARKY, tasks
        )


class TestCapacityText:

    def test_every_level_has_label_and_range(self):
        for energy in EnergyLevel:
            assert get_capacity_message(energy)
            assert get_capacity_range_text(energy).endswith("tasks")

    def test_support_message_without_energy(self):
        assert get_support_message(None) == NO_ENERGY_SUPPORT_MESSAGE

    def test_support_message_foggy(self):
        assert "small win" in get_support_message(EnergyLevel.FOGGY)
