"""Periodization math: deload placement, week objectives, session counts, effort.

Implements a fixed-pattern mesocycle model:
- The final week is always a taper week
- Short cycles (<= 6 weeks) deload only at the end
- Medium cycles (7-9 weeks) add a mid-cycle deload
- Long cycles (>= 10 weeks) deload every 4th week
- The week before any deload (or before the taper) is a push week

References:
    Bompa & Haff (2009), Periodization: Theory and Methodology of Training.
    Pritchard et al. (2015), Tapering practices of strength athletes.
"""

from __future__ import annotations

import math
from collections.abc import Collection

from mesocycle_engine.models.enums import (
    DAY_TEMPLATES,
    LONG_CYCLE_DELOAD_WEEKS,
    LONG_CYCLE_THRESHOLD,
    MAX_EFFORT,
    MIN_EFFORT,
    MIN_SESSIONS_PER_WEEK,
    SHORT_CYCLE_THRESHOLD,
    WeekObjective,
)

_DELOAD_CLASS = frozenset({WeekObjective.DELOAD, WeekObjective.TAPER})


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    ``round()`` uses banker's rounding (``round(4.5) == 4``), which would
    move the mid-cycle deload of a 9-week cycle.
    """
    return math.floor(value + 0.5)


def get_deload_weeks(week_count: int) -> list[int]:
    """Return the sorted 1-indexed weeks scheduled for deload.

    Args:
        week_count: Mesocycle length in weeks.

    Returns:
        Sorted, deduplicated week indexes. The final week is always included
        (it is reclassified as taper by ``objective_for_week``).
    """
    if week_count <= SHORT_CYCLE_THRESHOLD:
        return [week_count]

    if week_count < LONG_CYCLE_THRESHOLD:
        return sorted({round_half_up(week_count / 2), week_count})

    weeks = {*LONG_CYCLE_DELOAD_WEEKS, week_count}
    return sorted(w for w in weeks if w <= week_count)


def objective_for_week(
    week: int, deload_weeks: Collection[int], week_count: int
) -> WeekObjective:
    """Derive the objective for a week.

    Taper takes precedence over deload on the final week; the week before
    a deload or the taper is a push week.
    """
    if week == week_count:
        return WeekObjective.TAPER
    if week in deload_weeks:
        return WeekObjective.DELOAD
    if week + 1 in deload_weeks or week + 1 == week_count:
        return WeekObjective.PUSH
    return WeekObjective.BUILD


def is_deload_objective(objective: WeekObjective) -> bool:
    return objective in _DELOAD_CLASS


def get_planned_session_count(objective: WeekObjective, sessions_per_week: int) -> int:
    """Drop one session in deload/taper weeks, never below the minimum."""
    if is_deload_objective(objective):
        return max(MIN_SESSIONS_PER_WEEK, sessions_per_week - 1)
    return sessions_per_week


def get_training_days(planned_sessions: int) -> tuple[int, ...]:
    """Map a planned session count to fixed 1-indexed weekdays.

    Raises:
        KeyError: If the count is outside the supported 2-6 range.
    """
    return DAY_TEMPLATES[planned_sessions]


def get_training_effort(objective: WeekObjective, order: int, total: int) -> int:
    """Effort (1-5) for the ``order``-th of ``total`` training sessions.

    Deload and taper weeks sit at 2, with the final taper session at 1.
    Push weeks peak at the middle session; build weeks are flat.
    """
    if is_deload_objective(objective):
        if objective == WeekObjective.TAPER and order == total:
            return MIN_EFFORT
        return 2

    if objective == WeekObjective.PUSH:
        return MAX_EFFORT if order == math.ceil(total / 2) else MAX_EFFORT - 1

    return 3
