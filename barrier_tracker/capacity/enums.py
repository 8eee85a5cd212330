"""
BARRIER TRACKER Planner API - Capacity Enums

Fixed vocabularies shared by the capacity engine and the stored models.
"""

from enum import Enum


class EnergyLevel(str, Enum):
    """Self-reported daily capacity ("internal weather")."""
    SPARKY = "sparky"
    STEADY = "steady"
    FLOWING = "flowing"
    FOGGY = "foggy"
    RESTING = "resting"


class TaskComplexity(str, Enum):
    """How much of the capacity budget a task consumes."""
    QUICK = "quick"
    MEDIUM = "medium"
    DEEP = "deep"


class TaskType(str, Enum):
    """
    Focus tasks count against the daily capacity budget.
    Life (maintenance) tasks are tracked but cost nothing.
    """
    FOCUS = "focus"
    LIFE = "life"


class ContextualMessageType(str, Enum):
    """Tone of a coaching message."""
    MORNING = "morning"
    EVENING = "evening"
    EMPTY = "empty"
    NONE = "none"


class ContextualAction(str, Enum):
    """Action a coaching message asks the user to take."""
    SET_ENERGY = "set_energy"
    ADD_TASK = "add_task"


class TimeWarningTone(str, Enum):
    """Urgency of a hard-stop warning."""
    SOON = "soon"
    URGENT = "urgent"
    AFTER = "after"
