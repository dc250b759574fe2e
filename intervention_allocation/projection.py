"""Case-count projection with logistic saturation.

Cases compound once per week by the effective R0. The unconstrained value is
damped by ``ceiling * (1 - exp(-raw / ceiling))``, which tracks the raw value
while it is small relative to the ceiling and flattens towards the ceiling
otherwise. Growth is computed in log space and capped at ``max_raw_cases`` so
large R0 values and long horizons cannot overflow.
"""

import logging
import math

from intervention_allocation.config import DEFAULT_CONFIG, EngineConfig
from intervention_allocation.models import ProjectionRequest, ProjectionResult

logger = logging.getLogger(__name__)


def _raw_expected(initial_cases: float, effective_r0: float, elapsed_weeks: int, cap: float) -> float:
    if initial_cases <= 0:
        return 0.0
    if elapsed_weeks == 0:
        return min(float(initial_cases), cap)
    if effective_r0 <= 0:
        return 0.0
    log_raw = math.log(initial_cases) + elapsed_weeks * math.log(effective_r0)
    if log_raw >= math.log(cap):
        return cap
    return math.exp(log_raw)


def _sanitize(initial_cases: int, elapsed_weeks: int, population_ceiling: float | None, config: EngineConfig):
    if initial_cases < 0:
        logger.warning("Negative initial_cases %s clamped to 0", initial_cases)
        initial_cases = 0
    if elapsed_weeks < 0:
        logger.warning("Negative elapsed_weeks %s clamped to 0", elapsed_weeks)
        elapsed_weeks = 0
    if population_ceiling is None:
        population_ceiling = config.population_ceiling
    elif population_ceiling <= 0:
        logger.warning(
            "Non-positive population_ceiling %s replaced by default %s",
            population_ceiling,
            config.population_ceiling,
        )
        population_ceiling = config.population_ceiling
    return initial_cases, int(elapsed_weeks), float(population_ceiling)


def project_expected_cases(
    initial_cases: int,
    effective_r0: float,
    elapsed_weeks: int,
    population_ceiling: float | None = None,
    config: EngineConfig | None = None,
) -> ProjectionResult:
    """Project the expected case count after ``elapsed_weeks``.

    Parameters
    ----------
    initial_cases : int
        Cases at week zero. Negative values are clamped to 0.
    effective_r0 : float
        Per-week growth factor.
    elapsed_weeks : int
        Weeks of compounding. Negative values are clamped to 0.
    population_ceiling : float, optional
        Saturation ceiling. Defaults to ``config.population_ceiling``;
        non-positive values fall back to the default.
    config : EngineConfig, optional
        Calibration values. Defaults to :data:`DEFAULT_CONFIG`.

    Returns
    -------
    ProjectionResult
        ``expected_cases`` is strictly below the ceiling.
    """
    config = config or DEFAULT_CONFIG
    initial_cases, elapsed_weeks, ceiling = _sanitize(initial_cases, elapsed_weeks, population_ceiling, config)

    raw = _raw_expected(initial_cases, effective_r0, elapsed_weeks, config.max_raw_cases)
    saturated = ceiling * (1 - math.exp(-raw / ceiling))
    upper = max(math.ceil(ceiling) - 1, 0)
    # Half-up rounding.
    expected = min(math.floor(saturated + 0.5), upper)
    return ProjectionResult(expected_cases=expected, raw_expected=raw, elapsed_weeks=elapsed_weeks)


def project(request: ProjectionRequest, config: EngineConfig | None = None) -> ProjectionResult:
    """Run :func:`project_expected_cases` for a :class:`ProjectionRequest`."""
    return project_expected_cases(
        request.initial_cases,
        request.effective_r0,
        request.elapsed_weeks,
        request.population_ceiling,
        config,
    )


def project_timeline(
    initial_cases: int,
    effective_r0: float,
    weeks: int | None = None,
    population_ceiling: float | None = None,
    config: EngineConfig | None = None,
) -> list[ProjectionResult]:
    """Project weeks ``0..weeks`` inclusive, as stepped through by the animation.

    ``weeks`` defaults to ``config.timeline_weeks``.
    """
    config = config or DEFAULT_CONFIG
    if weeks is None:
        weeks = config.timeline_weeks
    return [
        project_expected_cases(initial_cases, effective_r0, week, population_ceiling, config)
        for week in range(max(weeks, 0) + 1)
    ]
