"""Greedy cost-effectiveness allocation rule.

Spends the budget on interventions in order of R0 reduction per unit cost,
giving each its full normalized cost until the budget runs out. This is a
knapsack-by-ratio heuristic rather than a globally optimal split. The
candidate set holds at most ten interventions and the allocation re-runs on
every animation frame, so a single linear pass is the intended trade-off; see
:class:`~intervention_allocation.allocation.linear_program.LinearProgramAllocator`
for the optimal alternative.
"""

import logging

from intervention_allocation.allocation._common import normalized_cost, rank_by_cost_effectiveness
from intervention_allocation.catalog import Intervention
from intervention_allocation.config import DEFAULT_CONFIG, EngineConfig

logger = logging.getLogger(__name__)


class GreedyBudgetAllocator:
    """Greedy knapsack-by-ratio allocation.

    Parameters
    ----------
    config : EngineConfig, optional
        Supplies ``cost_scale``. Defaults to :data:`DEFAULT_CONFIG`.
    """

    rule = "greedy"

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def __call__(self, candidates: list[Intervention], budget: float) -> dict[str, float]:
        """Allocate ``budget`` across ``candidates``.

        Parameters
        ----------
        candidates : list[Intervention]
            Interventions in catalog order.
        budget : float
            Normalized budget in [0, 1].

        Returns
        -------
        dict[str, float]
            Fraction per intervention name. Interventions reached after the
            budget is exhausted get 0.
        """
        allocations = {i.name: 0.0 for i in candidates}
        remaining = budget
        for intervention in rank_by_cost_effectiveness(candidates):
            if remaining <= 0:
                break
            fraction = min(normalized_cost(intervention, self.config.cost_scale), remaining)
            allocations[intervention.name] = fraction
            remaining -= fraction
        logger.debug("Greedy allocation: %s (unspent %.3f)", allocations, max(remaining, 0.0))
        return allocations
