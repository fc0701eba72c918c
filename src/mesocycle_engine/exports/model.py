"""Export model: flat row collections derived from a generated program.

Rows are plain dicts keyed by column name so that each collection maps
directly onto a spreadsheet sheet or a document table.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mesocycle_engine.exports.options import ExportOptions
from mesocycle_engine.models.enums import DAY_LABELS
from mesocycle_engine.models.program import ProgramOutput, WeekPlan

Row = dict[str, str | int | float]

EXPORT_HEADERS: dict[str, tuple[str, ...]] = {
    "overview": ("Key", "Value"),
    "calendar": ("Week", "Objective", *DAY_LABELS),
    "workouts": (
        "Week",
        "Day",
        "Session Title",
        "Session Type",
        "Week Objective",
        "Day Type",
        "Block",
        "Slot",
        "Exercise",
        "Prescription",
        "Sets",
        "Reps",
        "RIR",
        "Target Mode",
        "Target Value",
        "Flags",
        "Notes",
    ),
    "sessions": (
        "Week",
        "Week Objective",
        "Effort",
        "Day Label",
        "Session Type",
        "Exercise",
        "Prescription",
        "Actual Reps",
        "Weight",
        "Notes",
    ),
    "progression": (
        "Week",
        "Objective",
        "Is Deload Week",
        "Planned Sessions",
        "Strength Sessions",
        "Endurance Sessions",
        "Mixed Sessions",
        "Rest Days",
        "Avg Effort",
        "Hard Endurance Sessions",
        "Collision Adjustments",
    ),
}


@dataclass(frozen=True)
class OverviewRow:
    key: str
    value: str


@dataclass(frozen=True)
class ExportModel:
    """Output of map_program_to_export_model()."""

    program: ProgramOutput
    options: ExportOptions
    filtered_weeks: tuple[WeekPlan, ...] = field(default_factory=tuple)
    overview: tuple[OverviewRow, ...] = field(default_factory=tuple)
    session_rows: tuple[Row, ...] = field(default_factory=tuple)
    calendar_rows: tuple[Row, ...] = field(default_factory=tuple)
    workout_rows: tuple[Row, ...] = field(default_factory=tuple)
    progression_rows: tuple[Row, ...] = field(default_factory=tuple)

    def overview_value(self, key: str) -> str | None:
        for row in self.overview:
            if row.key == key:
                return row.value
        return None
