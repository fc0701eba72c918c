"""Workout builder: turns a week's training slots into strength and endurance sessions."""

from mesocycle_engine.workout_builder.builder import WorkoutBuilder

__all__ = ["WorkoutBuilder"]
