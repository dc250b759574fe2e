"""Animation radius for the spread map.

A rendering heuristic, not an epidemiological quantity: the ring for 1-based
week ``w`` has radius ``base * growth ** ((w - 1) * ln(effective_r0))``. An
effective R0 of 1 keeps the radius constant and values below 1 shrink it.
The radius is evaluated in log space and capped at ``max_radius_km``.
"""

import logging
import math

from intervention_allocation.config import DEFAULT_CONFIG, EngineConfig

logger = logging.getLogger(__name__)


def spread_radius(effective_r0: float, week: int, config: EngineConfig | None = None) -> float:
    """Return the ring radius in km for a 1-based ``week``.

    Parameters
    ----------
    effective_r0 : float
        Suppressed reproduction number. Non-positive values have no
        logarithm; they are treated as the limit towards zero, so week 1
        keeps the base radius and later weeks collapse to 0.
    week : int
        1-based animation week. Values below 1 are treated as week 1.
    config : EngineConfig, optional
        Supplies ``base_radius_km``, ``radius_growth_base`` and
        ``max_radius_km``.

    Returns
    -------
    float
        Radius in km, never above ``max_radius_km``.
    """
    config = config or DEFAULT_CONFIG
    steps = max(week, 1) - 1
    if effective_r0 <= 0:
        logger.warning("Non-positive effective R0 %s has no spread radius growth", effective_r0)
        return min(config.base_radius_km, config.max_radius_km) if steps == 0 else 0.0
    if config.base_radius_km == 0:
        return 0.0
    log_growth = steps * math.log(effective_r0) * math.log(config.radius_growth_base)
    if math.log(config.base_radius_km) + log_growth >= math.log(config.max_radius_km):
        return config.max_radius_km
    return config.base_radius_km * math.exp(log_growth)


def spread_radii(effective_r0: float, weeks: int, config: EngineConfig | None = None) -> list[float]:
    """Return radii for weeks ``1..weeks``."""
    return [spread_radius(effective_r0, w, config) for w in range(1, weeks + 1)]
