"""Shared utilities for allocators.

Contains the cost-effectiveness ranking, budget normalization of relative
costs, and the input sanitation applied before any allocator runs.
"""

import logging

from intervention_allocation.catalog import Intervention
from intervention_allocation.config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def cost_effectiveness(intervention: Intervention) -> float:
    """Return R0 reduction per unit of relative cost. Higher is better."""
    return intervention.max_r0_reduction / intervention.relative_cost


def rank_by_cost_effectiveness(candidates: list[Intervention]) -> list[Intervention]:
    """Order interventions by cost-effectiveness, best first.

    The sort is stable, so interventions with equal scores keep their
    relative input (catalog) order. Does not mutate input.

    Parameters
    ----------
    candidates : list[Intervention]
        Interventions in catalog order.

    Returns
    -------
    list[Intervention]
    """
    return sorted(candidates, key=cost_effectiveness, reverse=True)


def normalized_cost(intervention: Intervention, cost_scale: float = DEFAULT_CONFIG.cost_scale) -> float:
    """Map a 1-10 relative cost onto a fraction of the normalized budget."""
    return intervention.relative_cost / cost_scale


def sanitize_budget(budget: float) -> float:
    """Clamp a requested budget into [0, 1].

    Parameters
    ----------
    budget : float
        Requested normalized budget.

    Returns
    -------
    float
        The budget, clamped. Out-of-range values are logged.
    """
    if budget < 0:
        logger.warning("Negative budget %.3f clamped to 0", budget)
        return 0.0
    if budget > 1:
        logger.warning("Budget %.3f above the normalized maximum clamped to 1", budget)
        return 1.0
    return float(budget)


def zero_allocation(candidates: list[Intervention]) -> dict[str, float]:
    """Build an allocation that gives nothing to every candidate."""
    return {i.name: 0.0 for i in candidates}
