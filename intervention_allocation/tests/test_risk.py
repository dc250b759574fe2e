"""Unit tests for risk classification."""

import pytest

from intervention_allocation.config import EngineConfig
from intervention_allocation.models import RiskLevel
from intervention_allocation.risk import classify_risk, level_for_score, risk_score


class TestRiskScore:
    def test_weighted_components(self):
        assert risk_score(1.5, 5000) == pytest.approx(0.6 * 0.5 + 0.4 * 0.5)

    def test_components_saturate(self):
        assert risk_score(9.0, 1e6) == pytest.approx(1.0)

    def test_negative_r0_floored(self):
        assert risk_score(-1.0, 0) == 0.0

    def test_custom_weights(self):
        config = EngineConfig(r0_weight=0.0, cases_weight=1.0)
        assert risk_score(3.0, 2500, config) == pytest.approx(0.25)


class TestLevelBoundaries:
    def test_exactly_medium_threshold(self):
        assert level_for_score(0.3) is RiskLevel.MEDIUM

    def test_exactly_high_threshold(self):
        assert level_for_score(0.6) is RiskLevel.HIGH

    def test_just_under_medium(self):
        assert level_for_score(0.29999999) is RiskLevel.LOW

    def test_just_under_high(self):
        assert level_for_score(0.59999999) is RiskLevel.MEDIUM

    def test_custom_thresholds(self):
        config = EngineConfig(medium_threshold=0.2, high_threshold=0.5)
        assert level_for_score(0.25, config) is RiskLevel.MEDIUM
        assert level_for_score(0.5, config) is RiskLevel.HIGH


class TestClassifyRisk:
    def test_score_of_exactly_point_three_is_medium(self):
        assessment = classify_risk(1.5, 0)
        assert assessment.score == 0.3
        assert assessment.level is RiskLevel.MEDIUM

    def test_score_of_exactly_point_six_is_high(self):
        assessment = classify_risk(3.0, 0)
        assert assessment.score == 0.6
        assert assessment.level is RiskLevel.HIGH

    def test_just_under_point_three_is_low(self):
        assessment = classify_risk(1.49, 0)
        assert assessment.score < 0.3
        assert assessment.level is RiskLevel.LOW

    def test_colors(self):
        assert classify_risk(0.5, 0).color == "#10b981"
        assert classify_risk(1.5, 1000).color == "#f59e0b"
        assert classify_risk(3.0, 10000).color == "#ef4444"

    def test_level_values(self):
        assert [level.value for level in RiskLevel] == ["Low", "Medium", "High"]
