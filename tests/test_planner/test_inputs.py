"""Tests for input normalization and recommended defaults."""

import math

import pytest

from mesocycle_engine.models.enums import Focus, Level, StrengthProfile
from mesocycle_engine.models.inputs import PlannerInputs, RecommendedDefaults
from mesocycle_engine.planner import get_recommended_defaults, normalize_inputs


def _inputs(**overrides) -> PlannerInputs:
    values = dict(
        focus=Focus.STRENGTH,
        level=Level.INTERMEDIATE,
        mesocycle_weeks=8,
        sessions_per_week=4,
    )
    values.update(overrides)
    return PlannerInputs(**values)


class TestRecommendedDefaults:
    def test_advanced_non_mixed(self) -> None:
        assert get_recommended_defaults(Level.ADVANCED, Focus.STRENGTH) == RecommendedDefaults(10, 5)

    def test_advanced_mixed(self) -> None:
        assert get_recommended_defaults(Level.ADVANCED, Focus.MIXED) == RecommendedDefaults(8, 4, 50)

    def test_intermediate(self) -> None:
        assert get_recommended_defaults(Level.INTERMEDIATE, Focus.ENDURANCE) == RecommendedDefaults(8, 4)
        assert get_recommended_defaults(Level.INTERMEDIATE, Focus.MIXED) == RecommendedDefaults(8, 4, 50)

    def test_beginner(self) -> None:
        assert get_recommended_defaults(Level.BEGINNER, Focus.STRENGTH) == RecommendedDefaults(6, 3)
        assert get_recommended_defaults("beginner", "mixed") == RecommendedDefaults(6, 3, 50)

    def test_unknown_level_falls_back_to_beginner(self) -> None:
        assert get_recommended_defaults("elite", Focus.STRENGTH) == RecommendedDefaults(6, 3)


class TestNormalizeInputs:
    def test_valid_inputs_unchanged(self) -> None:
        result = normalize_inputs(_inputs())
        assert result.mesocycle_weeks == 8
        assert result.sessions_per_week == 4
        assert result.mixed_bias is None
        assert result.auto_deload is True
        assert result.strength_profile == StrengthProfile.BALANCED

    @pytest.mark.parametrize(
        "raw, expected",
        [(1, 4), (3.4, 4), (4.5, 5), (7.5, 8), (12.4, 12), (40, 12)],
    )
    def test_weeks_rounded_and_clamped(self, raw: float, expected: int) -> None:
        assert normalize_inputs(_inputs(mesocycle_weeks=raw)).mesocycle_weeks == expected

    @pytest.mark.parametrize("raw, expected", [(0, 2), (2.5, 3), (5.49, 5), (9, 6)])
    def test_sessions_rounded_and_clamped(self, raw: float, expected: int) -> None:
        assert normalize_inputs(_inputs(sessions_per_week=raw)).sessions_per_week == expected

    @pytest.mark.parametrize("junk", [math.nan, math.inf, -math.inf, None, "abc"])
    def test_non_finite_values_clamp_to_minimum(self, junk) -> None:
        result = normalize_inputs(_inputs(mesocycle_weeks=junk, sessions_per_week=junk))
        assert result.mesocycle_weeks == 4
        assert result.sessions_per_week == 2

    def test_mixed_bias_defaults_to_fifty(self) -> None:
        assert normalize_inputs(_inputs(focus=Focus.MIXED)).mixed_bias == 50

    @pytest.mark.parametrize("raw, expected", [(-10, 0), (33.5, 34), (150, 100), (math.nan, 0)])
    def test_mixed_bias_clamped(self, raw: float, expected: int) -> None:
        assert normalize_inputs(_inputs(focus=Focus.MIXED, mixed_bias=raw)).mixed_bias == expected

    def test_bias_dropped_for_non_mixed_focus(self) -> None:
        assert normalize_inputs(_inputs(focus=Focus.ENDURANCE, mixed_bias=70)).mixed_bias is None

    def test_auto_deload_forced_on(self) -> None:
        assert normalize_inputs(_inputs(auto_deload=False)).auto_deload is True

    def test_missing_profile_defaults_to_balanced(self) -> None:
        result = normalize_inputs(_inputs(strength_profile=None))
        assert result.strength_profile == StrengthProfile.BALANCED

    def test_enum_strings_accepted(self) -> None:
        result = normalize_inputs(_inputs(
            focus="mixed", level="advanced", strength_profile="endurance-support",
        ))
        assert result.focus is Focus.MIXED
        assert result.level is Level.ADVANCED
        assert result.strength_profile is StrengthProfile.ENDURANCE_SUPPORT

    def test_unknown_focus_raises(self) -> None:
        with pytest.raises(ValueError):
            normalize_inputs(_inputs(focus="yoga"))

    def test_idempotent(self) -> None:
        once = normalize_inputs(_inputs(focus=Focus.MIXED, mesocycle_weeks=20, mixed_bias=33.3))
        assert normalize_inputs(once) == once
