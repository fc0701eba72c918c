"""Input normalization and recommended defaults."""

from __future__ import annotations

import dataclasses
import math

from mesocycle_engine.math.periodization import round_half_up
from mesocycle_engine.models.enums import (
    DEFAULT_MIXED_BIAS,
    MAX_MESOCYCLE_WEEKS,
    MAX_MIXED_BIAS,
    MAX_SESSIONS_PER_WEEK,
    MIN_MESOCYCLE_WEEKS,
    MIN_MIXED_BIAS,
    MIN_SESSIONS_PER_WEEK,
    Focus,
    Level,
    StrengthProfile,
)
from mesocycle_engine.models.inputs import PlannerInputs, RecommendedDefaults

# (level, is_mixed) -> (weeks, sessions); mixed entries also get the default bias
_RECOMMENDED: dict[tuple[Level, bool], tuple[int, int]] = {
    (Level.ADVANCED, False): (10, 5),
    (Level.ADVANCED, True): (8, 4),
    (Level.INTERMEDIATE, False): (8, 4),
    (Level.INTERMEDIATE, True): (8, 4),
    (Level.BEGINNER, False): (6, 3),
    (Level.BEGINNER, True): (6, 3),
}


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _to_int(value: object) -> int:
    """Round to an integer; None, NaN, infinities and junk become 0."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return round_half_up(number)


def get_recommended_defaults(level: Level | str, focus: Focus | str) -> RecommendedDefaults:
    """Suggested cycle length, weekly frequency and (for mixed) bias.

    Unknown levels fall back to the beginner recommendation.
    """
    focus = Focus(focus)
    try:
        level = Level(level)
    except ValueError:
        level = Level.BEGINNER

    is_mixed = focus == Focus.MIXED
    weeks, sessions = _RECOMMENDED[(level, is_mixed)]
    return RecommendedDefaults(
        mesocycle_weeks=weeks,
        sessions_per_week=sessions,
        mixed_bias=DEFAULT_MIXED_BIAS if is_mixed else None,
    )


def normalize_inputs(inputs: PlannerInputs) -> PlannerInputs:
    """Clamp numeric fields and enforce the mixed-bias invariant.

    - mesocycle_weeks -> [4, 12], sessions_per_week -> [2, 6]
    - mixed_bias -> [0, 100] (default 50) for mixed focus, None otherwise
    - auto_deload forced on, strength_profile defaults to balanced

    Never raises for numeric input; enum strings are converted to members.
    """
    focus = Focus(inputs.focus)
    if focus == Focus.MIXED:
        raw_bias = DEFAULT_MIXED_BIAS if inputs.mixed_bias is None else inputs.mixed_bias
        mixed_bias = _clamp(_to_int(raw_bias), MIN_MIXED_BIAS, MAX_MIXED_BIAS)
    else:
        mixed_bias = None

    profile = inputs.strength_profile
    return dataclasses.replace(
        inputs,
        focus=focus,
        level=Level(inputs.level),
        mesocycle_weeks=_clamp(
            _to_int(inputs.mesocycle_weeks), MIN_MESOCYCLE_WEEKS, MAX_MESOCYCLE_WEEKS,
        ),
        sessions_per_week=_clamp(
            _to_int(inputs.sessions_per_week), MIN_SESSIONS_PER_WEEK, MAX_SESSIONS_PER_WEEK,
        ),
        mixed_bias=mixed_bias,
        auto_deload=True,
        strength_profile=StrengthProfile(profile) if profile else StrengthProfile.BALANCED,
    )
