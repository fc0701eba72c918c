"""Endurance session construction: subtype selection and fixed three-block layout."""

from __future__ import annotations

from mesocycle_engine.math.periodization import is_deload_objective
from mesocycle_engine.models.enums import (
    EnduranceWorkoutType,
    WeekObjective,
    WorkoutKind,
)
from mesocycle_engine.models.program import WorkoutBlock, WorkoutItem, WorkoutSession
from mesocycle_engine.workout_builder.template_library import get_endurance_template

WARMUP_BLOCK = "Warm-up"
MAIN_BLOCK = "Main Set"
COOLDOWN_BLOCK = "Cool-down"


def get_endurance_workout_type(
    objective: WeekObjective, order: int, total: int
) -> EnduranceWorkoutType:
    """Select the subtype of the ``order``-th of ``total`` endurance sessions.

    - Deload/taper weeks: everything easy
    - Push weeks: tempo and intervals alternate
    - Build weeks: easy and tempo alternate, and the last session becomes
      the long easy session once there are at least three in the week
    """
    if is_deload_objective(objective):
        return EnduranceWorkoutType.EASY

    if objective == WeekObjective.PUSH:
        return EnduranceWorkoutType.TEMPO if order % 2 == 1 else EnduranceWorkoutType.INTERVAL

    if total >= 3 and order == total:
        return EnduranceWorkoutType.LONG_EASY

    return EnduranceWorkoutType.EASY if order % 2 == 1 else EnduranceWorkoutType.TEMPO


def build_endurance_session(
    workout_type: EnduranceWorkoutType, objective: WeekObjective
) -> WorkoutSession:
    template = get_endurance_template(workout_type)
    blocks = (
        WorkoutBlock(
            title=WARMUP_BLOCK,
            items=(WorkoutItem(slot="E1", name="Warm-up", prescription=template.warmup),),
        ),
        WorkoutBlock(
            title=MAIN_BLOCK,
            items=(WorkoutItem(slot="E2", name=template.main_name, prescription=template.main),),
        ),
        WorkoutBlock(
            title=COOLDOWN_BLOCK,
            items=(WorkoutItem(slot="E3", name="Cool-down", prescription=template.cooldown),),
        ),
    )
    return WorkoutSession(
        kind=WorkoutKind.ENDURANCE,
        type=workout_type.value,
        title=template.title,
        objective=objective,
        blocks=blocks,
        target_mode=template.target_mode,
        target_value=template.target_value,
    )
