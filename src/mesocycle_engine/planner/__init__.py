"""Program generation: input normalization, discipline allocation and week building."""

from mesocycle_engine.planner.allocation import allocate_mixed_sessions
from mesocycle_engine.planner.generator import generate_program
from mesocycle_engine.planner.inputs import get_recommended_defaults, normalize_inputs

__all__ = [
    "allocate_mixed_sessions",
    "generate_program",
    "get_recommended_defaults",
    "normalize_inputs",
]
