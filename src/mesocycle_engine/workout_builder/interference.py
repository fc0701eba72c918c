"""Cross-discipline interference: lighten leg work around hard cardio.

A strength session is adjusted when a tempo or interval session is
scheduled on the same day or on either neighbouring day. Only the
lower-body slots are touched; upper-body and trunk work is left as
prescribed.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Collection, Mapping

from mesocycle_engine.models.enums import (
    ACCESSORY_SET_FLOOR,
    CARDIO_COLLISION_FLAG,
    HARD_ENDURANCE_TYPES,
    LOWER_BODY_SLOTS,
    MAIN_SET_FLOOR,
    MAIN_SLOTS,
    EnduranceWorkoutType,
    WorkoutKind,
)
from mesocycle_engine.models.program import WorkoutItem, WorkoutSession
from mesocycle_engine.workout_builder.prescription import reduce_prescription


def is_hard_endurance(session: WorkoutSession) -> bool:
    return (
        session.kind == WorkoutKind.ENDURANCE
        and EnduranceWorkoutType(session.type) in HARD_ENDURANCE_TYPES
    )


def get_hard_endurance_days(sessions: Mapping[int, WorkoutSession]) -> frozenset[int]:
    """Day indexes holding a tempo or interval session."""
    return frozenset(
        day_index for day_index, session in sessions.items()
        if is_hard_endurance(session)
    )


def collides_with_hard_cardio(day_index: int, hard_days: Collection[int]) -> bool:
    return any(day in hard_days for day in (day_index - 1, day_index, day_index + 1))


def _adjust_item(item: WorkoutItem) -> WorkoutItem:
    if item.slot not in LOWER_BODY_SLOTS:
        return item
    floor = MAIN_SET_FLOOR if item.slot in MAIN_SLOTS else ACCESSORY_SET_FLOOR
    return dataclasses.replace(
        item,
        prescription=reduce_prescription(item.prescription, floor),
        flags=(*item.flags, CARDIO_COLLISION_FLAG),
    )


def apply_cardio_collision_adjustment(session: WorkoutSession) -> WorkoutSession:
    """Return a copy of a strength session with lower-body slots reduced and flagged."""
    blocks = tuple(
        dataclasses.replace(block, items=tuple(_adjust_item(item) for item in block.items))
        for block in session.blocks
    )
    return dataclasses.replace(session, blocks=blocks)
