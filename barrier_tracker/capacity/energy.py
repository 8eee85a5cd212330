"""
BARRIER TRACKER Planner API - Energy Capacity Model

Maps a self-reported energy level to a capacity budget and weighs focus
tasks against it.

Core philosophy:
- Energy level determines base capacity
- Task complexity determines how much of it a task uses
- Life maintenance tasks never consume capacity
- Prevent over-scheduling and burnout
"""

from typing import Iterable, Optional

from barrier_tracker.capacity.enums import EnergyLevel, TaskComplexity, TaskType
from barrier_tracker.capacity.models import CapacityInfo, TaskSnapshot


# Capacity points per energy level, strictly decreasing
ENERGY_CAPACITY: dict[EnergyLevel, float] = {
    EnergyLevel.SPARKY: 4.0,   # Peak focus: 3-4 meaningful tasks
    EnergyLevel.STEADY: 3.0,   # Good day: 2-3 meaningful tasks
    EnergyLevel.FLOWING: 2.0,  # Lower energy: 1-2 meaningful tasks
    EnergyLevel.FOGGY: 1.0,    # Very low: 0-1 meaningful tasks
    EnergyLevel.RESTING: 0.0,  # No deep work expected
}

# Capacity points each focus task uses, strictly increasing
COMPLEXITY_WEIGHT: dict[TaskComplexity, float] = {
    TaskComplexity.QUICK: 0.5,
    TaskComplexity.MEDIUM: 1.5,
    TaskComplexity.DEEP: 2.0,
}

# Hard limit on open focus items per day, enforced when tasks are created
MAX_FOCUS_ITEMS = 5

_CAPACITY_MESSAGES: dict[EnergyLevel, str] = {
    EnergyLevel.SPARKY: "Peak focus",
    EnergyLevel.STEADY: "Good energy",
    EnergyLevel.FLOWING: "Gentle energy",
    EnergyLevel.FOGGY: "Low energy",
    EnergyLevel.RESTING: "Rest mode",
}

_CAPACITY_RANGES: dict[EnergyLevel, str] = {
    EnergyLevel.SPARKY: "3-4 tasks",
    EnergyLevel.STEADY: "2-3 tasks",
    EnergyLevel.FLOWING: "1-2 tasks",
    EnergyLevel.FOGGY: "0-1 tasks",
    EnergyLevel.RESTING: "0 tasks",
}

_SUPPORT_MESSAGES: dict[EnergyLevel, str] = {
    EnergyLevel.SPARKY: "Plenty of spark. Pick one meaningful win to protect.",
    EnergyLevel.STEADY: "Steady energy. Take one focused step forward.",
    EnergyLevel.FLOWING: "Gentle flow. Keep things light and breathable.",
    EnergyLevel.FOGGY: "Low energy. Aim for one small win tonight.",
    EnergyLevel.RESTING: "Rest up. Light maintenance only if it feels good.",
}

NO_ENERGY_SUPPORT_MESSAGE = "Check your energy to set expectations for today."


def calculate_used_capacity(tasks: Iterable[TaskSnapshot]) -> float:
    """Sum of complexity weights over all focus tasks."""
    return float(sum(
        COMPLEXITY_WEIGHT[task.complexity]
        for task in tasks
        if task.type == TaskType.FOCUS
    ))


def recommend_complexity(remaining_capacity: float) -> Optional[TaskComplexity]:
    """Largest complexity tier whose weight fits in the remaining budget."""
    fitting = [
        complexity
        for complexity, weight in COMPLEXITY_WEIGHT.items()
        if weight <= remaining_capacity
    ]
    if not fitting:
        return None
    return max(fitting, key=COMPLEXITY_WEIGHT.__getitem__)


def get_capacity_info(
    energy: Optional[EnergyLevel],
    tasks: Iterable[TaskSnapshot],
) -> CapacityInfo:
    """
    Compute the capacity budget for an energy level and a task snapshot.

    An unset energy level is the uninitialized state, not an error: it
    yields a zero budget that cannot take new tasks.

    Completed focus tasks stay in used_capacity, so finishing work does not
    free budget. The per-day MAX_FOCUS_ITEMS limit counts open tasks only and
    is a separate rule; can_add_task is guidance, not an enforced limit.
    """
    used_capacity = calculate_used_capacity(tasks)

    if energy is None:
        return CapacityInfo(
            total_capacity=0.0,
            used_capacity=used_capacity,
            remaining_capacity=0.0,
            percent_used=0.0,
            can_add_task=False,
            recommended_complexity=None,
        )

    total_capacity = ENERGY_CAPACITY[energy]
    remaining_capacity = max(total_capacity - used_capacity, 0.0)
    percent_used = (used_capacity / total_capacity) * 100 if total_capacity > 0 else 0.0

    return CapacityInfo(
        total_capacity=total_capacity,
        used_capacity=used_capacity,
        remaining_capacity=remaining_capacity,
        percent_used=percent_used,
        can_add_task=remaining_capacity > 0,
        recommended_complexity=recommend_complexity(remaining_capacity),
    )


def get_capacity_message(energy: EnergyLevel) -> str:
    """Short label for an energy level."""
    return _CAPACITY_MESSAGES[energy]


def get_capacity_range_text(energy: EnergyLevel) -> str:
    """How many meaningful tasks an energy level usually supports."""
    return _CAPACITY_RANGES[energy]


def get_support_message(energy: Optional[EnergyLevel]) -> str:
    if energy is None:
        return NO_ENERGY_SUPPORT_MESSAGE
    return _SUPPORT_MESSAGES[energy]
