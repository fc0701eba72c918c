"""Generated program models: weeks, days and workout sessions."""

from __future__ import annotations

from dataclasses import dataclass, field

from mesocycle_engine.models.enums import (
    DayType,
    SessionType,
    StrengthProfile,
    TargetMode,
    WeekObjective,
    WorkoutKind,
)
from mesocycle_engine.models.inputs import PlannerInputs


@dataclass(frozen=True)
class WorkoutItem:
    """A single exercise or effort line within a block.

    ``prescription`` is free text; strength items follow
    ``"<sets>x<reps> @ <rir> RIR"``.
    """

    slot: str
    name: str
    prescription: str
    flags: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutBlock:
    title: str
    items: tuple[WorkoutItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutSession:
    """A prescribed workout attached to a training day.

    Strength sessions carry ``day_type`` and ``strength_profile``;
    endurance sessions carry ``target_mode`` and ``target_value``.
    """

    kind: WorkoutKind
    type: str
    title: str
    objective: WeekObjective
    blocks: tuple[WorkoutBlock, ...] = field(default_factory=tuple)
    day_type: DayType | None = None
    strength_profile: StrengthProfile | None = None
    target_mode: TargetMode | None = None
    target_value: str | None = None

    @property
    def items(self) -> tuple[WorkoutItem, ...]:
        """All items across blocks, in order."""
        return tuple(item for block in self.blocks for item in block.items)

    def flagged_items(self, flag: str) -> tuple[WorkoutItem, ...]:
        return tuple(item for item in self.items if flag in item.flags)


@dataclass(frozen=True)
class DayPlan:
    week_index: int
    day_index: int  # 1 = Mon ... 7 = Sun
    date_label: str
    session_type: SessionType
    effort: int  # 1-5
    is_training_day: bool
    workout: WorkoutSession | None = None
    notes: str | None = None


@dataclass(frozen=True)
class WeekSummary:
    """Per-week counts of displayed session types and average effort."""

    strength_sessions: int = 0
    endurance_sessions: int = 0
    mixed_sessions: int = 0
    deload_sessions: int = 0
    rest_days: int = 0
    avg_effort: float = 0.0


@dataclass(frozen=True)
class WeekPlan:
    week_index: int
    objective: WeekObjective
    is_deload_week: bool
    target_session_count: int
    planned_session_count: int
    days: tuple[DayPlan, ...]
    summary: WeekSummary

    @property
    def training_days(self) -> tuple[DayPlan, ...]:
        return tuple(day for day in self.days if day.is_training_day)


@dataclass(frozen=True)
class ProgramOutput:
    """Output of generate_program(): normalized inputs + ordered weeks."""

    inputs: PlannerInputs
    weeks: tuple[WeekPlan, ...] = field(default_factory=tuple)

    @property
    def week_count(self) -> int:
        return len(self.weeks)
