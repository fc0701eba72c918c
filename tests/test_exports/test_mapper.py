"""Tests for the export model mapper."""

import pytest

from mesocycle_engine.exports.mapper import (
    collision_adjustment_count,
    day_cell_text,
    hard_endurance_count,
    map_program_to_export_model,
    select_weeks,
)
from mesocycle_engine.exports.model import EXPORT_HEADERS
from mesocycle_engine.exports.options import ExportDetail, ExportOptions, ExportScope


def _options(**overrides) -> ExportOptions:
    return ExportOptions(**overrides)


class TestSelectWeeks:
    def test_all_scope(self, beginner_program) -> None:
        assert select_weeks(beginner_program, _options()) == beginner_program.weeks

    def test_selected_scope_keeps_program_order(self, beginner_program) -> None:
        options = _options(scope=ExportScope.SELECTED, selected_weeks=(5, 2, 2, 9))
        assert [w.week_index for w in select_weeks(beginner_program, options)] == [2, 5]

    def test_selected_without_list_means_all(self, beginner_program) -> None:
        options = _options(scope=ExportScope.SELECTED, selected_weeks=None)
        assert len(select_weeks(beginner_program, options)) == 6

    def test_explicit_empty_selection_yields_nothing(self, beginner_program) -> None:
        options = _options(scope=ExportScope.SELECTED, selected_weeks=())
        assert select_weeks(beginner_program, options) == ()

    def test_selection_ignored_for_all_scope(self, beginner_program) -> None:
        options = _options(scope=ExportScope.ALL, selected_weeks=(1,))
        assert len(select_weeks(beginner_program, options)) == 6


class TestOverview:
    def test_keys_in_order(self, beginner_program, fixed_now) -> None:
        model = map_program_to_export_model(beginner_program, _options(), fixed_now)
        assert [row.key for row in model.overview] == [
            "Program Focus",
            "Strength Profile",
            "Initial Level",
            "Mesocycle Length (weeks)",
            "Sessions / Week",
            "Mixed Bias (%)",
            "Auto Deload",
            "Exported At",
            "Total Sessions",
            "Total Strength Sessions",
            "Total Endurance Sessions",
            "Total Deload Weeks",
            "Average Weekly Effort",
        ]

    def test_values(self, beginner_program, fixed_now) -> None:
        model = map_program_to_export_model(beginner_program, _options(), fixed_now)
        assert model.overview_value("Program Focus") == "strength"
        assert model.overview_value("Mixed Bias (%)") == ""
        assert model.overview_value("Exported At") == fixed_now
        assert model.overview_value("Total Sessions") == "17"
        assert model.overview_value("Total Strength Sessions") == "15"
        assert model.overview_value("Total Deload Weeks") == "1"
        assert float(model.overview_value("Average Weekly Effort")) == pytest.approx(1.85, abs=0.01)

    def test_totals_follow_selection(self, beginner_program, fixed_now) -> None:
        options = _options(scope=ExportScope.SELECTED, selected_weeks=(6,))
        model = map_program_to_export_model(beginner_program, options, fixed_now)
        assert model.overview_value("Total Sessions") == "2"
        assert model.overview_value("Total Deload Weeks") == "1"

    def test_no_weeks_average_is_zero(self, beginner_program, fixed_now) -> None:
        options = _options(scope=ExportScope.SELECTED, selected_weeks=())
        model = map_program_to_export_model(beginner_program, options, fixed_now)
        assert model.overview_value("Average Weekly Effort") == "0.00"
        assert model.calendar_rows == ()

    def test_mixed_bias_shown(self, mixed_program, fixed_now) -> None:
        model = map_program_to_export_model(mixed_program, _options(), fixed_now)
        assert model.overview_value("Mixed Bias (%)") == "50"

    def test_default_timestamp_is_utc_iso(self, beginner_program) -> None:
        model = map_program_to_export_model(beginner_program, _options())
        assert model.overview_value("Exported At").endswith("Z")


class TestCalendarRows:
    def test_one_row_per_week_with_all_days(self, beginner_program, fixed_now) -> None:
        model = map_program_to_export_model(beginner_program, _options(), fixed_now)
        assert len(model.calendar_rows) == 6
        for row in model.calendar_rows:
            assert tuple(row) == EXPORT_HEADERS["calendar"]

    def test_cell_text(self, beginner_program) -> None:
        week = beginner_program.weeks[0]
        monday, tuesday = week.days[0], week.days[1]
        assert day_cell_text(monday) == f"{monday.workout.title}\nstrength\nEffort: 3/5"
        assert day_cell_text(tuesday) == "rest\nrest\nEffort: 1/5"


class TestWorkoutRows:
    def test_keys_match_headers(self, mixed_program, fixed_now) -> None:
        model = map_program_to_export_model(mixed_program, _options(), fixed_now)
        assert model.workout_rows
        for row in model.workout_rows:
            assert tuple(row) == EXPORT_HEADERS["workouts"]

    def test_one_row_per_item(self, beginner_program, fixed_now) -> None:
        model = map_program_to_export_model(beginner_program, _options(), fixed_now)
        expected = sum(
            len(day.workout.items)
            for week in beginner_program.weeks
            for day in week.training_days
        )
        assert len(model.workout_rows) == expected

    def test_prescription_split(self, beginner_program, fixed_now) -> None:
        model = map_program_to_export_model(beginner_program, _options(), fixed_now)
        main = next(r for r in model.workout_rows if r["Slot"] == "S1")
        assert (main["Sets"], main["Reps"], main["RIR"]) == ("4", "6", "2")
        warmup = next(r for r in model.workout_rows if r["Slot"] == "W1")
        assert (warmup["Sets"], warmup["Reps"], warmup["RIR"]) == ("", "", "")

    def test_endurance_rows_carry_targets(self, mixed_program, fixed_now) -> None:
        model = map_program_to_export_model(mixed_program, _options(), fixed_now)
        endurance = [r for r in model.workout_rows if r["Session Type"] == "endurance"]
        assert endurance
        assert {r["Target Mode"] for r in endurance} <= {"zone", "rpe"}
        assert all(r["Day Type"] == "" for r in endurance)

    def test_flags_joined(self, mixed_program, fixed_now) -> None:
        model = map_program_to_export_model(mixed_program, _options(), fixed_now)
        flagged = [r for r in model.workout_rows if r["Flags"]]
        assert flagged
        assert {r["Flags"] for r in flagged} == {"cardio-collision-adjusted"}

    def test_calendar_only_has_no_workout_rows(self, beginner_program, fixed_now) -> None:
        options = _options(detail=ExportDetail.CALENDAR_ONLY)
        model = map_program_to_export_model(beginner_program, options, fixed_now)
        assert model.workout_rows == ()
        assert model.session_rows


class TestSessionRows:
    def test_blank_logging_columns(self, beginner_program, fixed_now) -> None:
        model = map_program_to_export_model(beginner_program, _options(), fixed_now)
        for row in model.session_rows:
            assert tuple(row) == EXPORT_HEADERS["sessions"]
            assert row["Actual Reps"] == row["Weight"] == row["Notes"] == ""


class TestProgressionRows:
    def test_schema(self, mixed_program, fixed_now) -> None:
        model = map_program_to_export_model(mixed_program, _options(), fixed_now)
        assert len(model.progression_rows) == 8
        for row in model.progression_rows:
            assert tuple(row) == EXPORT_HEADERS["progression"]

    def test_push_week_counts(self, mixed_program, fixed_now) -> None:
        model = map_program_to_export_model(mixed_program, _options(), fixed_now)
        week3 = model.progression_rows[2]
        assert week3["Objective"] == "push"
        assert week3["Is Deload Week"] == "no"
        assert week3["Hard Endurance Sessions"] == 2
        assert week3["Collision Adjustments"] == 4

    def test_helpers(self, mixed_program) -> None:
        week4 = mixed_program.weeks[3]
        assert hard_endurance_count(week4) == 0
        assert collision_adjustment_count(week4) == 0


class TestPurity:
    def test_mapping_is_deterministic(self, mixed_program, fixed_now) -> None:
        first = map_program_to_export_model(mixed_program, _options(), fixed_now)
        second = map_program_to_export_model(mixed_program, _options(), fixed_now)
        assert first == second
