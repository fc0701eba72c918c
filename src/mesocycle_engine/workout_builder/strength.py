"""Strength session construction: day-type rotation, exercise selection, prescriptions."""

from __future__ import annotations

from mesocycle_engine.math.periodization import is_deload_objective
from mesocycle_engine.models.enums import (
    ACCESSORY_SLOTS,
    DAY_TYPE_ROTATION,
    MAIN_SLOTS,
    TRUNK_SLOT,
    DayType,
    StrengthProfile,
    WeekObjective,
    WorkoutKind,
)
from mesocycle_engine.models.program import WorkoutBlock, WorkoutItem, WorkoutSession
from mesocycle_engine.workout_builder.prescription import format_prescription
from mesocycle_engine.workout_builder.template_library import (
    ACCESSORY_PRESCRIPTIONS,
    DAY_TYPE_LABELS,
    MAIN_PRESCRIPTIONS,
    STRENGTH_PROFILE_LABELS,
    STRENGTH_WARMUP_NAME,
    STRENGTH_WARMUP_PRESCRIPTION,
    TRUNK_PRESCRIPTIONS,
    get_slot_catalog,
)

WARMUP_BLOCK = "Warm-up"
MAIN_BLOCK = "Main Lifts"
ACCESSORY_BLOCK = "Accessories"
TRUNK_BLOCK = "Trunk & Power"


def get_day_type(strength_order: int) -> DayType:
    """Day type for the ``strength_order``-th (1-based) strength session of a week."""
    return DAY_TYPE_ROTATION[(strength_order - 1) % len(DAY_TYPE_ROTATION)]


def select_exercise(
    profile: StrengthProfile, day_type: DayType, slot: str, week_index: int
) -> str:
    """Pick the slot's exercise, rotating one catalog entry per week.

    Variant day types (A2/B2/C2) start one entry further along the same
    catalog so that they differ from the base day in the same week.
    """
    options = get_slot_catalog(profile, day_type)[slot]
    index = (week_index - 1 + day_type.variant_offset) % len(options)
    return options[index]


def get_slot_prescription(objective: WeekObjective, slot: str) -> str:
    if slot == TRUNK_SLOT:
        return TRUNK_PRESCRIPTIONS[objective]
    table = MAIN_PRESCRIPTIONS if slot in MAIN_SLOTS else ACCESSORY_PRESCRIPTIONS
    return format_prescription(*table[objective])


def includes_trunk_slot(objective: WeekObjective, profile: StrengthProfile) -> bool:
    """Endurance-support athletes skip trunk/power work in reduced-load weeks."""
    return not (
        is_deload_objective(objective)
        and profile == StrengthProfile.ENDURANCE_SUPPORT
    )


def _slot_items(
    slots: tuple[str, ...],
    profile: StrengthProfile,
    day_type: DayType,
    objective: WeekObjective,
    week_index: int,
) -> tuple[WorkoutItem, ...]:
    return tuple(
        WorkoutItem(
            slot=slot,
            name=select_exercise(profile, day_type, slot, week_index),
            prescription=get_slot_prescription(objective, slot),
        )
        for slot in slots
    )


def build_strength_session(
    profile: StrengthProfile,
    day_type: DayType,
    objective: WeekObjective,
    week_index: int,
) -> WorkoutSession:
    """Build an unadjusted strength session.

    Blocks: Warm-up, Main Lifts (S1-S3), Accessories (S4-S5) and, unless
    skipped for the profile/objective, Trunk & Power (S6).
    """
    blocks = [
        WorkoutBlock(
            title=WARMUP_BLOCK,
            items=(WorkoutItem(
                slot="W1",
                name=STRENGTH_WARMUP_NAME,
                prescription=STRENGTH_WARMUP_PRESCRIPTION,
            ),),
        ),
        WorkoutBlock(
            title=MAIN_BLOCK,
            items=_slot_items(MAIN_SLOTS, profile, day_type, objective, week_index),
        ),
        WorkoutBlock(
            title=ACCESSORY_BLOCK,
            items=_slot_items(ACCESSORY_SLOTS, profile, day_type, objective, week_index),
        ),
    ]
    if includes_trunk_slot(objective, profile):
        blocks.append(WorkoutBlock(
            title=TRUNK_BLOCK,
            items=_slot_items((TRUNK_SLOT,), profile, day_type, objective, week_index),
        ))

    return WorkoutSession(
        kind=WorkoutKind.STRENGTH,
        type=WorkoutKind.STRENGTH.value,
        title=f"Strength {day_type.value}: {DAY_TYPE_LABELS[day_type]}",
        objective=objective,
        blocks=tuple(blocks),
        day_type=day_type,
        strength_profile=profile,
    )


def profile_label(profile: StrengthProfile) -> str:
    return STRENGTH_PROFILE_LABELS[profile]
