"""Shared test fixtures: planner inputs, generated programs, export timestamps."""

from __future__ import annotations

import pytest

from mesocycle_engine.models.enums import Focus, Level, StrengthProfile
from mesocycle_engine.models.inputs import PlannerInputs
from mesocycle_engine.models.program import ProgramOutput
from mesocycle_engine.planner import generate_program

FIXED_NOW = "2026-03-02T07:30:00.000Z"


@pytest.fixture
def fixed_now() -> str:
    return FIXED_NOW


@pytest.fixture
def beginner_inputs() -> PlannerInputs:
    """Beginner strength: 6 weeks, 3 sessions (Mon/Wed/Fri), balanced profile."""
    return PlannerInputs(
        focus=Focus.STRENGTH,
        level=Level.BEGINNER,
        mesocycle_weeks=6,
        sessions_per_week=3,
    )


@pytest.fixture
def beginner_program(beginner_inputs: PlannerInputs) -> ProgramOutput:
    return generate_program(beginner_inputs)


@pytest.fixture
def mixed_inputs() -> PlannerInputs:
    """Intermediate mixed: 8 weeks, 4 sessions, 50% endurance (deloads at 4 and 8)."""
    return PlannerInputs(
        focus=Focus.MIXED,
        level=Level.INTERMEDIATE,
        mesocycle_weeks=8,
        sessions_per_week=4,
        mixed_bias=50,
    )


@pytest.fixture
def mixed_program(mixed_inputs: PlannerInputs) -> ProgramOutput:
    return generate_program(mixed_inputs)


@pytest.fixture
def endurance_support_program() -> ProgramOutput:
    """Advanced strength with the endurance-support profile, 10 weeks x 5 sessions."""
    return generate_program(PlannerInputs(
        focus=Focus.STRENGTH,
        level=Level.ADVANCED,
        mesocycle_weeks=10,
        sessions_per_week=5,
        strength_profile=StrengthProfile.ENDURANCE_SUPPORT,
    ))


@pytest.fixture
def endurance_program() -> ProgramOutput:
    """Endurance focus: 12 weeks, 6 sessions."""
    return generate_program(PlannerInputs(
        focus=Focus.ENDURANCE,
        level=Level.ADVANCED,
        mesocycle_weeks=12,
        sessions_per_week=6,
    ))
