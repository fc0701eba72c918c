"""Data models for the mesocycle engine."""

from mesocycle_engine.models.enums import (
    DayType,
    EnduranceWorkoutType,
    Focus,
    Level,
    SessionType,
    StrengthProfile,
    TargetMode,
    WeekObjective,
    WorkoutKind,
)
from mesocycle_engine.models.inputs import PlannerInputs, RecommendedDefaults
from mesocycle_engine.models.program import (
    DayPlan,
    ProgramOutput,
    WeekPlan,
    WeekSummary,
    WorkoutBlock,
    WorkoutItem,
    WorkoutSession,
)

__all__ = [
    "DayPlan",
    "DayType",
    "EnduranceWorkoutType",
    "Focus",
    "Level",
    "PlannerInputs",
    "ProgramOutput",
    "RecommendedDefaults",
    "SessionType",
    "StrengthProfile",
    "TargetMode",
    "WeekObjective",
    "WeekPlan",
    "WeekSummary",
    "WorkoutBlock",
    "WorkoutItem",
    "WorkoutKind",
    "WorkoutSession",
]
