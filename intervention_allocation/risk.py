"""Risk tier classification from effective R0 and projected cases."""

from intervention_allocation.config import DEFAULT_CONFIG, EngineConfig
from intervention_allocation.models import RiskAssessment, RiskLevel


def risk_score(effective_r0: float, expected_cases: float, config: EngineConfig | None = None) -> float:
    """Weighted combination of normalized R0 and case components, in [0, 1].

    Parameters
    ----------
    effective_r0 : float
        Suppressed reproduction number.
    expected_cases : float
        Projected case count.
    config : EngineConfig, optional
        Supplies normalizers and weights. Defaults to :data:`DEFAULT_CONFIG`.

    Returns
    -------
    float
    """
    config = config or DEFAULT_CONFIG
    r0_component = min(effective_r0 / config.r0_normalizer, 1.0)
    cases_component = min(expected_cases / config.cases_normalizer, 1.0)
    score = config.r0_weight * r0_component + config.cases_weight * cases_component
    return min(max(score, 0.0), 1.0)


def level_for_score(score: float, config: EngineConfig | None = None) -> RiskLevel:
    """Map a score to a tier. Lower thresholds are inclusive."""
    config = config or DEFAULT_CONFIG
    if score < config.medium_threshold:
        return RiskLevel.LOW
    if score < config.high_threshold:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def classify_risk(effective_r0: float, expected_cases: float, config: EngineConfig | None = None) -> RiskAssessment:
    """Classify an outbreak as Low, Medium or High risk.

    Parameters
    ----------
    effective_r0 : float
        Suppressed reproduction number.
    expected_cases : float
        Projected case count.
    config : EngineConfig, optional
        Calibration values. Defaults to :data:`DEFAULT_CONFIG`.

    Returns
    -------
    RiskAssessment
    """
    score = risk_score(effective_r0, expected_cases, config)
    level = level_for_score(score, config)
    return RiskAssessment(level=level, score=score, color=level.color)
