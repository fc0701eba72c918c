"""Planner input models."""

from __future__ import annotations

from dataclasses import dataclass

from mesocycle_engine.models.enums import Focus, Level, StrengthProfile


@dataclass(frozen=True)
class PlannerInputs:
    """User parameters for a mesocycle.

    Raw instances may hold out-of-range or non-finite numbers; pass them
    through ``normalize_inputs`` to obtain clamped integers. After
    normalization ``mixed_bias`` is set iff ``focus`` is MIXED.
    """

    focus: Focus
    level: Level
    mesocycle_weeks: float
    sessions_per_week: float
    mixed_bias: float | None = None
    auto_deload: bool = True
    strength_profile: StrengthProfile | None = StrengthProfile.BALANCED


@dataclass(frozen=True)
class RecommendedDefaults:
    """Suggested cycle length and frequency for a level/focus pair."""

    mesocycle_weeks: int
    sessions_per_week: int
    mixed_bias: int | None = None
