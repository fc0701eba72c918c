"""Tests for WorkoutBuilder.build_week."""

from mesocycle_engine.models.enums import (
    CARDIO_COLLISION_FLAG,
    DayType,
    EnduranceWorkoutType,
    StrengthProfile,
    WeekObjective,
    WorkoutKind,
)
from mesocycle_engine.workout_builder import WorkoutBuilder

S = WorkoutKind.STRENGTH
E = WorkoutKind.ENDURANCE


class TestBuildWeek:
    def test_returns_sessions_sorted_by_day(self) -> None:
        builder = WorkoutBuilder(StrengthProfile.BALANCED)
        sessions = builder.build_week(1, WeekObjective.BUILD, [(5, S), (1, E), (3, S)])
        assert list(sessions) == [1, 3, 5]

    def test_strength_day_types_rotate_over_strength_slots_only(self) -> None:
        builder = WorkoutBuilder(StrengthProfile.BALANCED)
        sessions = builder.build_week(
            1, WeekObjective.BUILD, [(1, S), (2, E), (3, S), (5, S), (6, S)],
        )
        assert [sessions[d].day_type for d in (1, 3, 5, 6)] == [
            DayType.A, DayType.B, DayType.C, DayType.A2,
        ]

    def test_endurance_order_counts_only_endurance_slots(self) -> None:
        builder = WorkoutBuilder(StrengthProfile.BALANCED)
        sessions = builder.build_week(
            1, WeekObjective.BUILD, [(1, E), (2, S), (3, E), (5, S), (6, E)],
        )
        assert [sessions[d].type for d in (1, 3, 6)] == [
            EnduranceWorkoutType.EASY.value,
            EnduranceWorkoutType.TEMPO.value,
            EnduranceWorkoutType.LONG_EASY.value,
        ]
        # Tempo on Wednesday lightens Tuesday's strength work only
        assert sessions[2].flagged_items(CARDIO_COLLISION_FLAG)
        assert not sessions[5].flagged_items(CARDIO_COLLISION_FLAG)

    def test_all_strength_week_is_never_adjusted(self) -> None:
        builder = WorkoutBuilder(StrengthProfile.POWERLIFTING)
        sessions = builder.build_week(3, WeekObjective.PUSH, [(1, S), (3, S), (5, S)])
        assert all(not s.flagged_items(CARDIO_COLLISION_FLAG) for s in sessions.values())
        assert all(s.strength_profile == StrengthProfile.POWERLIFTING for s in sessions.values())
