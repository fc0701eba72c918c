"""WorkoutBuilder: attaches workouts to a week's training slots.

Works on one week at a time. Endurance sessions are built first so that
strength sessions can be checked against the week's hard cardio days.
"""

from __future__ import annotations

from collections.abc import Sequence

from mesocycle_engine.models.enums import StrengthProfile, WeekObjective, WorkoutKind
from mesocycle_engine.models.program import WorkoutSession
from mesocycle_engine.workout_builder.endurance import (
    build_endurance_session,
    get_endurance_workout_type,
)
from mesocycle_engine.workout_builder.interference import (
    apply_cardio_collision_adjustment,
    collides_with_hard_cardio,
    get_hard_endurance_days,
)
from mesocycle_engine.workout_builder.strength import build_strength_session, get_day_type


class WorkoutBuilder:
    """Builds the workouts for one week of a mesocycle.

    Usage::

        builder = WorkoutBuilder(StrengthProfile.BALANCED)
        sessions = builder.build_week(1, WeekObjective.BUILD, [(1, WorkoutKind.STRENGTH)])
    """

    def __init__(self, strength_profile: StrengthProfile) -> None:
        self.strength_profile = strength_profile

    def build_week(
        self,
        week_index: int,
        objective: WeekObjective,
        slots: Sequence[tuple[int, WorkoutKind]],
    ) -> dict[int, WorkoutSession]:
        """Build workouts for the week's training slots.

        Algorithm:
        1. Number endurance slots and pick each subtype by order
        2. Collect the days holding tempo/interval sessions
        3. Rotate strength day types by strength order (A, B, C, A2, B2, C2)
        4. Reduce lower-body work on strength days colliding with hard cardio

        Args:
            week_index: 1-indexed week number (drives exercise rotation).
            objective: The week's objective.
            slots: (day_index, discipline) pairs in calendar order.

        Returns:
            Mapping of day_index to its WorkoutSession.
        """
        endurance_days = [day for day, kind in slots if kind == WorkoutKind.ENDURANCE]
        strength_days = [day for day, kind in slots if kind == WorkoutKind.STRENGTH]

        endurance_sessions = {
            day: build_endurance_session(
                get_endurance_workout_type(objective, order, len(endurance_days)),
                objective,
            )
            for order, day in enumerate(endurance_days, start=1)
        }
        hard_days = get_hard_endurance_days(endurance_sessions)

        sessions: dict[int, WorkoutSession] = dict(endurance_sessions)
        for order, day in enumerate(strength_days, start=1):
            session = build_strength_session(
                self.strength_profile, get_day_type(order), objective, week_index,
            )
            if collides_with_hard_cardio(day, hard_days):
                session = apply_cardio_collision_adjustment(session)
            sessions[day] = session

        return dict(sorted(sessions.items()))
