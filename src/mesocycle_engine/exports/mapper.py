"""Export model mapper: projects a program onto overview, calendar, workout,
session-tracker and progression rows.

All functions are pure. The only non-deterministic input is ``now_iso``,
which feeds the "Exported At" overview row and nothing else.
"""

from __future__ import annotations

from datetime import datetime, timezone

from mesocycle_engine.exports.model import ExportModel, OverviewRow, Row
from mesocycle_engine.exports.options import ExportDetail, ExportOptions, ExportScope
from mesocycle_engine.models.enums import (
    CARDIO_COLLISION_FLAG,
    TargetMode,
    WorkoutKind,
)
from mesocycle_engine.models.program import DayPlan, ProgramOutput, WeekPlan
from mesocycle_engine.workout_builder.prescription import parse_prescription


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def select_weeks(program: ProgramOutput, options: ExportOptions) -> tuple[WeekPlan, ...]:
    """Weeks covered by the export.

    Falls back to every week unless scope is SELECTED with an explicit
    selection. An explicit empty selection yields no weeks; callers reject
    that case before mapping (see ``validate_export_options``).
    """
    if options.scope != ExportScope.SELECTED or options.selected_weeks is None:
        return program.weeks
    selected = set(options.selected_weeks)
    return tuple(week for week in program.weeks if week.week_index in selected)


def session_type_label(day: DayPlan) -> str:
    if day.workout is not None:
        return day.workout.kind.value
    return day.session_type.value


def day_cell_text(day: DayPlan) -> str:
    title = day.workout.title if day.workout is not None else day.session_type.value
    return f"{title}\n{day.session_type.value}\nEffort: {day.effort}/5"


def hard_endurance_count(week: WeekPlan) -> int:
    return sum(
        1 for day in week.days
        if day.workout is not None
        and day.workout.kind == WorkoutKind.ENDURANCE
        and day.workout.target_mode == TargetMode.RPE
    )


def collision_adjustment_count(week: WeekPlan) -> int:
    return sum(
        len(day.workout.flagged_items(CARDIO_COLLISION_FLAG))
        for day in week.days
        if day.workout is not None
    )


def _format_average(values: list[float]) -> str:
    if not values:
        return "0.00"
    return f"{sum(values) / len(values):.2f}"


def map_overview(
    program: ProgramOutput, weeks: tuple[WeekPlan, ...], now_iso: str
) -> tuple[OverviewRow, ...]:
    inputs = program.inputs
    rows = [
        ("Program Focus", inputs.focus.value),
        ("Strength Profile", inputs.strength_profile.value),
        ("Initial Level", inputs.level.value),
        ("Mesocycle Length (weeks)", str(inputs.mesocycle_weeks)),
        ("Sessions / Week", str(inputs.sessions_per_week)),
        ("Mixed Bias (%)", "" if inputs.mixed_bias is None else str(inputs.mixed_bias)),
        ("Auto Deload", "true" if inputs.auto_deload else "false"),
        ("Exported At", now_iso),
        ("Total Sessions", str(sum(w.planned_session_count for w in weeks))),
        ("Total Strength Sessions", str(sum(w.summary.strength_sessions for w in weeks))),
        ("Total Endurance Sessions", str(sum(w.summary.endurance_sessions for w in weeks))),
        ("Total Deload Weeks", str(sum(1 for w in weeks if w.is_deload_week))),
        ("Average Weekly Effort", _format_average([w.summary.avg_effort for w in weeks])),
    ]
    return tuple(OverviewRow(key=key, value=value) for key, value in rows)


def map_calendar_rows(weeks: tuple[WeekPlan, ...]) -> tuple[Row, ...]:
    rows = []
    for week in weeks:
        row: Row = {"Week": week.week_index, "Objective": week.objective.value}
        for day in week.days:
            row[day.date_label] = day_cell_text(day)
        rows.append(row)
    return tuple(rows)


def map_workout_rows(weeks: tuple[WeekPlan, ...]) -> tuple[Row, ...]:
    """One row per workout item, with sets/reps/RIR split out where parseable."""
    rows: list[Row] = []
    for week in weeks:
        for day in week.days:
            workout = day.workout
            if workout is None:
                continue
            for block in workout.blocks:
                for item in block.items:
                    parsed = parse_prescription(item.prescription)
                    rows.append({
                        "Week": week.week_index,
                        "Day": day.date_label,
                        "Session Title": workout.title,
                        "Session Type": session_type_label(day),
                        "Week Objective": week.objective.value,
                        "Day Type": workout.day_type.value if workout.day_type else "",
                        "Block": block.title,
                        "Slot": item.slot,
                        "Exercise": item.name,
                        "Prescription": item.prescription,
                        "Sets": str(parsed.sets) if parsed else "",
                        "Reps": parsed.reps if parsed else "",
                        "RIR": str(parsed.rir) if parsed else "",
                        "Target Mode": workout.target_mode.value if workout.target_mode else "",
                        "Target Value": workout.target_value or "",
                        "Flags": ", ".join(item.flags),
                        "Notes": day.notes or "",
                    })
    return tuple(rows)


def map_session_rows(weeks: tuple[WeekPlan, ...]) -> tuple[Row, ...]:
    """Printable tracker rows with blank columns for logging on paper."""
    rows: list[Row] = []
    for week in weeks:
        for day in week.days:
            if day.workout is None:
                continue
            for item in day.workout.items:
                rows.append({
                    "Week": week.week_index,
                    "Week Objective": week.objective.value,
                    "Effort": day.effort,
                    "Day Label": day.date_label,
                    "Session Type": day.workout.title,
                    "Exercise": item.name,
                    "Prescription": item.prescription,
                    "Actual Reps": "",
                    "Weight": "",
                    "Notes": "",
                })
    return tuple(rows)


def map_progression_rows(weeks: tuple[WeekPlan, ...]) -> tuple[Row, ...]:
    return tuple(
        {
            "Week": week.week_index,
            "Objective": week.objective.value,
            "Is Deload Week": "yes" if week.is_deload_week else "no",
            "Planned Sessions": week.planned_session_count,
            "Strength Sessions": week.summary.strength_sessions,
            "Endurance Sessions": week.summary.endurance_sessions,
            "Mixed Sessions": week.summary.mixed_sessions,
            "Rest Days": week.summary.rest_days,
            "Avg Effort": week.summary.avg_effort,
            "Hard Endurance Sessions": hard_endurance_count(week),
            "Collision Adjustments": collision_adjustment_count(week),
        }
        for week in weeks
    )


def map_program_to_export_model(
    program: ProgramOutput,
    options: ExportOptions,
    now_iso: str | None = None,
) -> ExportModel:
    """Project a program onto the row collections consumed by format builders.

    Args:
        program: Output of generate_program().
        options: Export options; only scope, selected_weeks and detail are read.
        now_iso: Export timestamp; defaults to the current UTC time.

    Returns:
        A fresh ExportModel. Workout rows are empty for calendar-only exports.
    """
    weeks = select_weeks(program, options)
    resolved_now = now_iso if now_iso is not None else utc_now_iso()

    workout_rows = (
        () if options.detail == ExportDetail.CALENDAR_ONLY else map_workout_rows(weeks)
    )
    return ExportModel(
        program=program,
        options=options,
        filtered_weeks=weeks,
        overview=map_overview(program, weeks, resolved_now),
        session_rows=map_session_rows(weeks),
        calendar_rows=map_calendar_rows(weeks),
        workout_rows=workout_rows,
        progression_rows=map_progression_rows(weeks),
    )
