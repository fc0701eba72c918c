"""Tests for endurance subtype selection and session layout."""

import pytest

from mesocycle_engine.models.enums import (
    EnduranceWorkoutType,
    TargetMode,
    WeekObjective,
    WorkoutKind,
)
from mesocycle_engine.workout_builder.endurance import (
    build_endurance_session,
    get_endurance_workout_type,
)

EASY = EnduranceWorkoutType.EASY
LONG = EnduranceWorkoutType.LONG_EASY
TEMPO = EnduranceWorkoutType.TEMPO
INTERVAL = EnduranceWorkoutType.INTERVAL


def _week(objective: WeekObjective, total: int) -> list[EnduranceWorkoutType]:
    return [get_endurance_workout_type(objective, o, total) for o in range(1, total + 1)]


class TestGetEnduranceWorkoutType:
    @pytest.mark.parametrize("objective", [WeekObjective.DELOAD, WeekObjective.TAPER])
    def test_deload_class_is_easy(self, objective: WeekObjective) -> None:
        assert _week(objective, 5) == [EASY] * 5

    def test_push_alternates_tempo_and_intervals(self) -> None:
        assert _week(WeekObjective.PUSH, 4) == [TEMPO, INTERVAL, TEMPO, INTERVAL]

    def test_build_short_week(self) -> None:
        assert _week(WeekObjective.BUILD, 2) == [EASY, TEMPO]

    def test_build_ends_with_long_easy(self) -> None:
        assert _week(WeekObjective.BUILD, 3) == [EASY, TEMPO, LONG]
        assert _week(WeekObjective.BUILD, 6) == [EASY, TEMPO, EASY, TEMPO, EASY, LONG]


class TestBuildEnduranceSession:
    def test_three_blocks(self) -> None:
        session = build_endurance_session(TEMPO, WeekObjective.PUSH)
        assert [b.title for b in session.blocks] == ["Warm-up", "Main Set", "Cool-down"]
        assert [i.slot for i in session.items] == ["E1", "E2", "E3"]

    def test_metadata(self) -> None:
        session = build_endurance_session(LONG, WeekObjective.BUILD)
        assert session.kind == WorkoutKind.ENDURANCE
        assert session.type == "long-easy"
        assert session.target_mode == TargetMode.ZONE
        assert session.target_value == "Z2"
        assert session.day_type is None
        assert session.objective == WeekObjective.BUILD

    def test_hard_sessions_use_rpe(self) -> None:
        assert build_endurance_session(INTERVAL, WeekObjective.PUSH).target_mode == TargetMode.RPE
