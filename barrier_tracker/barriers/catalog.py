"""
BARRIER TRACKER Planner API - Barrier Catalog

The fixed set of barriers a user can attach to a task, each with two
micro-strategies. Storms are big challenges; drifts are sneaky distractions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BarrierType(str, Enum):
    DREAD = "dread"
    FOG = "fog"
    BORING = "boring"
    PERFECTIONISM = "perfectionism"
    OVERWHELM = "overwhelm"
    DISTRACTION = "distraction"
    IMPULSIVITY = "impulsivity"


class BarrierKind(str, Enum):
    STORM = "storm"
    DRIFT = "drift"


@dataclass(frozen=True)
class MicroStrategy:
    id: str
    title: str
    description: str
    action: str


@dataclass(frozen=True)
class Barrier:
    id: BarrierType
    label: str
    kind: BarrierKind
    description: str
    strategies: tuple[MicroStrategy, ...]


BARRIERS: dict[BarrierType, Barrier] = {
    BarrierType.DREAD: Barrier(
        id=BarrierType.DREAD,
        label="Storm: Dread",
        kind=BarrierKind.STORM,
        description="It feels painful or scary to even think about starting.",
        strategies=(
            MicroStrategy(
                id="dread-1",
                title="The 2-Minute Rule",
                description="Dread usually lies about how hard it will be.",
                action="Commit to doing it for just 2 minutes. You can stop after that.",
            ),
            MicroStrategy(
                id="dread-2",
                title="Micro-Step",
                description="The task is too big for your current energy.",
                action='Identify the absolute smallest first step (e.g., "open the document").',
            ),
        ),
    ),
    BarrierType.FOG: Barrier(
        id=BarrierType.FOG,
        label="Storm: Brain Fog",
        kind=BarrierKind.STORM,
        description="Can't think clearly, feeling fuzzy or slow.",
        strategies=(
            MicroStrategy(
                id="fog-1",
                title="Externalize It",
                description="Your working memory is offline.",
                action="Write down every single step, no matter how obvious.",
            ),
            MicroStrategy(
                id="fog-2",
                title="Body Double",
                description="You need an anchor to the present moment.",
                action="Work in the presence of someone else (or a pet/video).",
            ),
        ),
    ),
    BarrierType.BORING: Barrier(
        id=BarrierType.BORING,
        label="Drift: Boring",
        kind=BarrierKind.DRIFT,
        description="Under-stimulated. It physically hurts to be this bored.",
        strategies=(
            MicroStrategy(
                id="boring-1",
                title="Add Friction",
                description="Make it a game or challenge.",
                action="Set a timer for 10 minutes. How much can you get done?",
            ),
            MicroStrategy(
                id="boring-2",
                title="Pair It",
                description="Add dopamine to the situation.",
                action="Listen to a podcast or music while doing it.",
            ),
        ),
    ),
    BarrierType.PERFECTIONISM: Barrier(
        id=BarrierType.PERFECTIONISM,
        label="Storm: Perfectionism",
        kind=BarrierKind.STORM,
        description="Afraid of doing it wrong or not doing it 'enough'.",
        strategies=(
            MicroStrategy(
                id="perf-1",
                title="B- Work",
                description="Perfect is the enemy of done.",
                action='Aim for "B-" quality work. It is good enough.',
            ),
            MicroStrategy(
                id="perf-2",
                title="Rough Draft",
                description="You can edit a bad page, but not a blank one.",
                action='Create a "trash" version first. Make it intentionally bad.',
            ),
        ),
    ),
    BarrierType.OVERWHELM: Barrier(
        id=BarrierType.OVERWHELM,
        label="Storm: Overwhelm",
        kind=BarrierKind.STORM,
        description="Too many moving parts, don't know where to start.",
        strategies=(
            MicroStrategy(
                id="over-1",
                title="Brain Dump",
                description="Get it all out of your head.",
                action="Write everything down. Then pick just ONE thing.",
            ),
            MicroStrategy(
                id="over-2",
                title="Hide the Rest",
                description="Visual clutter creates mental clutter.",
                action="Cover up everything except the one thing you are doing.",
            ),
        ),
    ),
    BarrierType.DISTRACTION: Barrier(
        id=BarrierType.DISTRACTION,
        label="Drift: Distraction",
        kind=BarrierKind.DRIFT,
        description="Everything else seems more interesting right now.",
        strategies=(
            MicroStrategy(
                id="dist-1",
                title="Parking Lot",
                description="Don't lose the idea, but don't chase it.",
                action="Write the distraction down on a sticky note. Save it for later.",
            ),
            MicroStrategy(
                id="dist-2",
                title="Environment Reset",
                description="Your environment is triggering you.",
                action="Clear your immediate workspace of anything not related to the task.",
            ),
        ),
    ),
    BarrierType.IMPULSIVITY: Barrier(
        id=BarrierType.IMPULSIVITY,
        label="Drift: Impulsivity",
        kind=BarrierKind.DRIFT,
        description="Acting without thinking, jumping between tasks.",
        strategies=(
            MicroStrategy(
                id="imp-1",
                title="The Pause",
                description="Create a gap between impulse and action.",
                action="Take 3 deep breaths before switching tasks.",
            ),
            MicroStrategy(
                id="imp-2",
                title="Check the Plan",
                description="Re-orient to your original intention.",
                action='Look at your "Today" list. Is this new thing on it?',
            ),
        ),
    ),
}


def list_barriers(kind: Optional[BarrierKind] = None) -> list[Barrier]:
    """All barriers in catalog order, optionally filtered by kind."""
    return [b for b in BARRIERS.values() if kind is None or b.kind == kind]


def get_barrier(slug: str) -> Optional[Barrier]:
    try:
        return BARRIERS[BarrierType(slug)]
    except ValueError:
        return None
