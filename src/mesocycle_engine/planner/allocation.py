"""Discipline allocation for a week's training slots."""

from __future__ import annotations

from mesocycle_engine.math.periodization import round_half_up
from mesocycle_engine.models.enums import DEFAULT_MIXED_BIAS, Focus, WorkoutKind


def allocate_mixed_sessions(session_count: int, mixed_bias: int) -> list[WorkoutKind]:
    """Split ``session_count`` slots between strength and endurance.

    ``mixed_bias`` is the endurance share in percent. The sequence alternates
    starting with the more frequent discipline (strength on ties) and runs
    out the remaining discipline once the other is exhausted.
    """
    endurance_left = round_half_up(mixed_bias / 100 * session_count)
    strength_left = session_count - endurance_left
    next_kind = (
        WorkoutKind.STRENGTH if strength_left >= endurance_left else WorkoutKind.ENDURANCE
    )

    sequence: list[WorkoutKind] = []
    while strength_left > 0 or endurance_left > 0:
        if next_kind == WorkoutKind.STRENGTH and strength_left > 0:
            sequence.append(WorkoutKind.STRENGTH)
            strength_left -= 1
            next_kind = WorkoutKind.ENDURANCE
        elif next_kind == WorkoutKind.ENDURANCE and endurance_left > 0:
            sequence.append(WorkoutKind.ENDURANCE)
            endurance_left -= 1
            next_kind = WorkoutKind.STRENGTH
        elif strength_left > 0:
            sequence.append(WorkoutKind.STRENGTH)
            strength_left -= 1
        else:
            sequence.append(WorkoutKind.ENDURANCE)
            endurance_left -= 1

    return sequence


def allocate_disciplines(
    focus: Focus, session_count: int, mixed_bias: int | None
) -> list[WorkoutKind]:
    """Discipline per training slot, in calendar order."""
    if focus == Focus.STRENGTH:
        return [WorkoutKind.STRENGTH] * session_count
    if focus == Focus.ENDURANCE:
        return [WorkoutKind.ENDURANCE] * session_count
    if mixed_bias is None:
        mixed_bias = DEFAULT_MIXED_BIAS
    return allocate_mixed_sessions(session_count, mixed_bias)
