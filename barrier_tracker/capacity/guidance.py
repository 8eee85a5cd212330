"""
BARRIER TRACKER Planner API - Contextual Guidance

Picks one coaching message from an ordered rule table.
The first matching rule wins.
"""

from typing import Iterable

from barrier_tracker.capacity.enums import ContextualAction, ContextualMessageType, TaskType
from barrier_tracker.capacity.models import ContextualMessage, TaskSnapshot


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def get_contextual_message(
    tasks: Iterable[TaskSnapshot],
    is_past_stop: bool,
    has_energy_set: bool,
    can_add_task: bool = True,
) -> ContextualMessage:
    """
    Select the coaching message for the current day state.

    Rules, in order:
    1. No energy set: ask for it.
    2. Past the hard stop with focus work left: encourage rest, no action.
    3. Every focus task done: celebrate, no action.
    4. No focus tasks and room in the budget: ask for the first one.
    5. Otherwise: nothing to say.
    """
    focus_tasks = [t for t in tasks if t.type == TaskType.FOCUS]
    total_focus = len(focus_tasks)
    completed_focus = sum(1 for t in focus_tasks if t.completed)

    if not has_energy_set:
        return ContextualMessage(
            type=ContextualMessageType.MORNING,
            message="Good morning! Let's plan your day together.",
            action=ContextualAction.SET_ENERGY,
        )

    if is_past_stop and completed_focus < total_focus:
        message = "Your brain is done with deep work."
        if completed_focus > 0:
            noun = _plural(completed_focus, "item", "items")
            message += f" You completed {completed_focus} focus {noun} today!"
        message += " That's a solid day. Rest up!"
        return ContextualMessage(type=ContextualMessageType.EVENING, message=message)

    if total_focus > 0 and completed_focus == total_focus:
        noun = _plural(completed_focus, "task", "tasks")
        return ContextualMessage(
            type=ContextualMessageType.EVENING,
            message=f"All focus items complete! You did {completed_focus} meaningful {noun} today.",
        )

    if total_focus == 0 and can_add_task:
        return ContextualMessage(
            type=ContextualMessageType.EMPTY,
            message="What matters most today?",
            action=ContextualAction.ADD_TASK,
        )

    return ContextualMessage(type=ContextualMessageType.NONE, message="")
