"""Program generator: the single-pass, deterministic mesocycle builder."""

from __future__ import annotations

import logging

from mesocycle_engine.math.periodization import (
    get_deload_weeks,
    get_planned_session_count,
    get_training_days,
    get_training_effort,
    is_deload_objective,
    objective_for_week,
    round_half_up,
)
from mesocycle_engine.models.enums import (
    DAY_LABELS,
    REST_DAY_EFFORT,
    SessionType,
    WorkoutKind,
)
from mesocycle_engine.models.inputs import PlannerInputs
from mesocycle_engine.models.program import DayPlan, ProgramOutput, WeekPlan, WeekSummary
from mesocycle_engine.planner.allocation import allocate_disciplines
from mesocycle_engine.planner.inputs import normalize_inputs
from mesocycle_engine.workout_builder import WorkoutBuilder

logger = logging.getLogger(__name__)

_DISPLAY_TYPE = {
    WorkoutKind.STRENGTH: SessionType.STRENGTH,
    WorkoutKind.ENDURANCE: SessionType.ENDURANCE,
}


def summarize_week(days: tuple[DayPlan, ...]) -> WeekSummary:
    """Count days by displayed type and average effort over all seven days."""

    def count(*types: SessionType) -> int:
        return sum(1 for day in days if day.session_type in types)

    avg = sum(day.effort for day in days) / len(days) if days else 0.0
    return WeekSummary(
        strength_sessions=count(SessionType.STRENGTH),
        endurance_sessions=count(SessionType.ENDURANCE),
        mixed_sessions=count(SessionType.MIXED),
        deload_sessions=count(SessionType.DELOAD),
        rest_days=count(SessionType.REST, SessionType.RECOVERY),
        avg_effort=round_half_up(avg * 10) / 10,
    )


def _build_week(
    inputs: PlannerInputs,
    week_index: int,
    deload_weeks: list[int],
    builder: WorkoutBuilder,
) -> WeekPlan:
    objective = objective_for_week(week_index, deload_weeks, inputs.mesocycle_weeks)
    is_deload_week = is_deload_objective(objective)
    planned = get_planned_session_count(objective, inputs.sessions_per_week)
    training_days = get_training_days(planned)
    disciplines = allocate_disciplines(inputs.focus, planned, inputs.mixed_bias)

    slots = list(zip(training_days, disciplines))
    sessions = builder.build_week(week_index, objective, slots)
    slot_kind = dict(slots)

    days: list[DayPlan] = []
    for day_index, label in enumerate(DAY_LABELS, start=1):
        if day_index not in slot_kind:
            days.append(DayPlan(
                week_index=week_index,
                day_index=day_index,
                date_label=label,
                session_type=SessionType.REST,
                effort=REST_DAY_EFFORT,
                is_training_day=False,
            ))
            continue

        order = training_days.index(day_index) + 1
        session_type = (
            SessionType.DELOAD if is_deload_week else _DISPLAY_TYPE[slot_kind[day_index]]
        )
        days.append(DayPlan(
            week_index=week_index,
            day_index=day_index,
            date_label=label,
            session_type=session_type,
            effort=get_training_effort(objective, order, planned),
            is_training_day=True,
            workout=sessions[day_index],
        ))

    logger.debug(
        "Week %d: objective=%s planned=%d/%d",
        week_index, objective.value, planned, inputs.sessions_per_week,
    )
    day_tuple = tuple(days)
    return WeekPlan(
        week_index=week_index,
        objective=objective,
        is_deload_week=is_deload_week,
        target_session_count=inputs.sessions_per_week,
        planned_session_count=planned,
        days=day_tuple,
        summary=summarize_week(day_tuple),
    )


def generate_program(raw_inputs: PlannerInputs) -> ProgramOutput:
    """Generate a full mesocycle from planner inputs.

    Inputs are normalized first, so out-of-range values are clamped rather
    than rejected. The result depends on nothing but the inputs.

    Args:
        raw_inputs: User parameters (normalized or not).

    Returns:
        ProgramOutput with one WeekPlan per mesocycle week.
    """
    inputs = normalize_inputs(raw_inputs)
    deload_weeks = get_deload_weeks(inputs.mesocycle_weeks) if inputs.auto_deload else []
    builder = WorkoutBuilder(inputs.strength_profile)

    weeks = tuple(
        _build_week(inputs, week_index, deload_weeks, builder)
        for week_index in range(1, inputs.mesocycle_weeks + 1)
    )
    logger.info(
        "Generated %d-week %s mesocycle (%s, %d sessions/week, deloads at %s)",
        inputs.mesocycle_weeks,
        inputs.focus.value,
        inputs.strength_profile.value,
        inputs.sessions_per_week,
        deload_weeks,
    )
    return ProgramOutput(inputs=inputs, weeks=weeks)
