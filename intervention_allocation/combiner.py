"""Aggregate R0 reduction with diminishing returns, and the effective R0.

Stacked interventions overlap in their mechanisms of action, so each
additional intervention counts at ``stacking_decay`` times the one before it.
The stacking order is the raw reduction magnitude, which is independent of
the cost-effectiveness order used to spend the budget.
"""

import logging

from intervention_allocation.catalog import Intervention
from intervention_allocation.config import DEFAULT_CONFIG, EngineConfig

logger = logging.getLogger(__name__)


def order_by_reduction(chosen: list[tuple[Intervention, float]]) -> list[tuple[Intervention, float]]:
    """Sort chosen ``(intervention, fraction)`` pairs by raw reduction, largest first.

    Stable, so equal reductions keep their input order.
    """
    return sorted(chosen, key=lambda pair: pair[0].max_r0_reduction, reverse=True)


class DiminishingReturnsCombiner:
    """Combine per-intervention reductions into one aggregate reduction.

    Parameters
    ----------
    stacking_decay : float, optional
        Multiplier per stacked intervention. Defaults to the config value.
    reduction_ceiling : float, optional
        Maximum aggregate reduction. Defaults to the config value.
    config : EngineConfig, optional
        Source of defaults. Defaults to :data:`DEFAULT_CONFIG`.
    """

    def __init__(
        self,
        stacking_decay: float | None = None,
        reduction_ceiling: float | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        config = config or DEFAULT_CONFIG
        self.stacking_decay = config.stacking_decay if stacking_decay is None else stacking_decay
        self.reduction_ceiling = config.reduction_ceiling if reduction_ceiling is None else reduction_ceiling

    def __call__(self, allocations: list[tuple[Intervention, float]]) -> float:
        """Return the aggregate reduction in ``[0, reduction_ceiling]``.

        Parameters
        ----------
        allocations : list[tuple[Intervention, float]]
            Every candidate with its allocated fraction, in catalog order.
            Only interventions with a positive fraction are stacked.

        Returns
        -------
        float
        """
        chosen = [(i, a) for i, a in allocations if a > 0]
        total = 0.0
        for rank, (intervention, fraction) in enumerate(order_by_reduction(chosen)):
            total += intervention.max_r0_reduction * fraction * self.stacking_decay**rank
        if total > self.reduction_ceiling:
            logger.debug("Aggregate reduction %.4f capped at %.2f", total, self.reduction_ceiling)
        return min(max(total, 0.0), self.reduction_ceiling)


def effective_r0(base_r0: float, aggregate_reduction: float) -> float:
    """Return ``base_r0 * (1 - aggregate_reduction)``."""
    return base_r0 * (1 - aggregate_reduction)
