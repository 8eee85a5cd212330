"""
BARRIER TRACKER Planner API - Energy Schedule Presets

Smart defaults based on common ADHD medication patterns and natural
energy rhythms. Users start from one and customize it.
"""

from dataclasses import dataclass
from typing import Optional

from barrier_tracker.capacity.enums import EnergyLevel
from barrier_tracker.capacity.time_boundary import require_time_minutes
from barrier_tracker.schedule.models import DayType, EnergyScheduleBlock

SPARKY = EnergyLevel.SPARKY
STEADY = EnergyLevel.STEADY
FLOWING = EnergyLevel.FLOWING
FOGGY = EnergyLevel.FOGGY
RESTING = EnergyLevel.RESTING


@dataclass(frozen=True)
class PresetEntry:
    time: str
    energy: EnergyLevel
    label: str = ""


@dataclass(frozen=True)
class EnergySchedulePreset:
    id: str
    name: str
    description: str
    icon: str
    schedule: tuple[PresetEntry, ...]


ENERGY_PRESETS: tuple[EnergySchedulePreset, ...] = (
    EnergySchedulePreset(
        id="xr-classic",
        name="XR Meds: Classic 2-Phase",
        description="Extended release stimulant with typical 9am-1pm peak",
        icon="💊",
        schedule=(
            PresetEntry("07:00", FOGGY, "Wake up"),
            PresetEntry("08:00", FLOWING, "Meds kicking in"),
            PresetEntry("09:00", SPARKY, "Peak - best deep work"),
            PresetEntry("13:00", STEADY, "Still functional"),
            PresetEntry("15:00", FLOWING, "Slow fade begins"),
            PresetEntry("17:00", FOGGY, "Crash - task paralysis"),
            PresetEntry("19:00", RESTING, "Evening shutdown"),
        ),
    ),
    EnergySchedulePreset(
        id="xr-late",
        name="XR Meds: Late Onset",
        description="Slower meds response, 10am-2pm peak window",
        icon="💊",
        schedule=(
            PresetEntry("08:00", FOGGY, "Long warm-up"),
            PresetEntry("10:00", SPARKY, "Peak (shorter window)"),
            PresetEntry("14:00", STEADY, "Fading"),
            PresetEntry("16:00", FOGGY, "Crash zone"),
            PresetEntry("19:00", RESTING, "Evening mode"),
        ),
    ),
    EnergySchedulePreset(
        id="ir-twice",
        name="IR Meds: Twice Daily",
        description="Two IR doses with spikes (not smooth curves)",
        icon="⚡",
        schedule=(
            PresetEntry("08:00", FOGGY, "Wake up"),
            PresetEntry("09:00", SPARKY, "1st dose peak"),
            PresetEntry("11:30", FLOWING, "Fading"),
            PresetEntry("12:00", FOGGY, "Crash - need food"),
            PresetEntry("13:00", FLOWING, "2nd dose kicking in"),
            PresetEntry("14:00", SPARKY, "2nd peak window"),
            PresetEntry("17:00", STEADY, "Tapering off"),
            PresetEntry("19:00", FOGGY, "Crash - irritability"),
            PresetEntry("21:00", RESTING, "Evening shutdown"),
        ),
    ),
    EnergySchedulePreset(
        id="ir-single",
        name="IR Meds: Single Dose",
        description="Short but strong morning peak, then crash",
        icon="⚡",
        schedule=(
            PresetEntry("08:00", FOGGY, "Wake up"),
            PresetEntry("09:00", SPARKY, "Short peak"),
            PresetEntry("11:00", FLOWING, "Fading fast"),
            PresetEntry("14:00", FOGGY, "Crash"),
            PresetEntry("18:00", RESTING, "Evening mode"),
        ),
    ),
    EnergySchedulePreset(
        id="unmed-afternoon",
        name="Unmedicated: Afternoon Peak",
        description="Natural ADHD - slow start, 1-4pm hyperfocus window",
        icon="🧠",
        schedule=(
            PresetEntry("09:00", FOGGY, "Slow start"),
            PresetEntry("11:00", FLOWING, "Warming up"),
            PresetEntry("13:00", SPARKY, "Natural hyperfocus"),
            PresetEntry("16:00", STEADY, "Tapering"),
            PresetEntry("18:00", FOGGY, "Decision fatigue"),
            PresetEntry("21:00", RESTING, "Comfort zone"),
        ),
    ),
    EnergySchedulePreset(
        id="unmed-night",
        name="Unmedicated: Night Burst",
        description="All-day fog + surprise 8-10pm hyperfocus",
        icon="🧠",
        schedule=(
            PresetEntry("10:00", FOGGY, "Brain refuses to boot"),
            PresetEntry("14:00", FLOWING, "First functional window"),
            PresetEntry("17:00", STEADY, "Random competence spike"),
            PresetEntry("20:00", SPARKY, "Night hyperfocus!"),
            PresetEntry("22:00", FLOWING, "Hard to wind down"),
            PresetEntry("01:00", RESTING, "Finally tired"),
        ),
    ),
    EnergySchedulePreset(
        id="night-owl",
        name="Night Owl: Extreme Evening",
        description="4-8pm primary productivity window",
        icon="🦉",
        schedule=(
            PresetEntry("11:00", FOGGY, "Barely human"),
            PresetEntry("13:00", FLOWING, "Warm-up period"),
            PresetEntry("16:00", SPARKY, "Primary work window"),
            PresetEntry("20:00", STEADY, "Still going"),
            PresetEntry("22:00", FLOWING, "Fading"),
            PresetEntry("01:00", RESTING, "Screen time trap"),
        ),
    ),
    EnergySchedulePreset(
        id="night-owl-intense",
        name="Night Owl: Delayed Hyperfocus",
        description="6-10pm intense creative peak",
        icon="🦉",
        schedule=(
            PresetEntry("12:00", FOGGY, "Like anesthesia"),
            PresetEntry("15:00", FLOWING, "Slowly waking"),
            PresetEntry("18:00", SPARKY, "Best creative work"),
            PresetEntry("22:00", STEADY, "Still functional"),
            PresetEntry("01:00", RESTING, "Brain won't shut off"),
        ),
    ),
    EnergySchedulePreset(
        id="early-bird",
        name="Early Bird: Morning Peak",
        description="Rare unicorn - 6-11am best hours",
        icon="🐦",
        schedule=(
            PresetEntry("05:30", STEADY, "Quiet house magic"),
            PresetEntry("07:00", SPARKY, "Best deep work"),
            PresetEntry("11:00", STEADY, "Still good"),
            PresetEntry("14:00", FLOWING, "Fading"),
            PresetEntry("17:00", FOGGY, "Slump hits HARD"),
            PresetEntry("19:00", RESTING, "Shutdown"),
        ),
    ),
    EnergySchedulePreset(
        id="early-bird-split",
        name="Early Bird: Split Peak",
        description="Morning peak + weird afternoon second wind",
        icon="🐦",
        schedule=(
            PresetEntry("06:00", SPARKY, "Morning peak"),
            PresetEntry("09:00", STEADY, "Cruising"),
            PresetEntry("13:00", FOGGY, "Crash"),
            PresetEntry("15:00", FLOWING, "Weird second wind"),
            PresetEntry("17:00", RESTING, "Evening shutdown"),
        ),
    ),
    EnergySchedulePreset(
        id="custom",
        name="Custom Schedule",
        description="Start from scratch and build your own",
        icon="✨",
        schedule=(
            PresetEntry("09:00", STEADY),
            PresetEntry("17:00", RESTING),
        ),
    ),
)


def get_preset_by_id(preset_id: str) -> Optional[EnergySchedulePreset]:
    for preset in ENERGY_PRESETS:
        if preset.id == preset_id:
            return preset
    return None


def preset_to_blocks(
    preset: EnergySchedulePreset,
    owner_id: str,
    day_type: DayType = DayType.ALL,
) -> list[EnergyScheduleBlock]:
    """Expand a preset into storable schedule blocks."""
    return [
        EnergyScheduleBlock.create(
            owner_id=owner_id,
            start_time_minutes=require_time_minutes(entry.time),
            energy=entry.energy,
            label=entry.label or None,
            day_type=day_type,
        )
        for entry in preset.schedule
    ]
