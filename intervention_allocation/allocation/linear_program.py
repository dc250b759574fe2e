"""Linear-program allocation rule.

Finds the budget split that maximizes the nominal (unstacked) R0 reduction
``sum(r_i * a_i)`` subject to the budget and to each intervention's normalized
cost cap. Uses PuLP with the CBC solver. Opt-in alternative to the greedy
rule; the greedy heuristic stays the default.
"""

import logging

import pulp as lp

from intervention_allocation.allocation._common import normalized_cost, zero_allocation
from intervention_allocation.catalog import Intervention
from intervention_allocation.config import DEFAULT_CONFIG, EngineConfig

logger = logging.getLogger(__name__)


class LinearProgramAllocator:
    """Optimal continuous allocation via linear programming.

    Parameters
    ----------
    config : EngineConfig, optional
        Supplies ``cost_scale``. Defaults to :data:`DEFAULT_CONFIG`.
    """

    rule = "linear_program"

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.last_status: str | None = None

    def __call__(self, candidates: list[Intervention], budget: float) -> dict[str, float]:
        """Solve the allocation problem.

        Parameters
        ----------
        candidates : list[Intervention]
            Interventions in catalog order.
        budget : float
            Normalized budget in [0, 1].

        Returns
        -------
        dict[str, float]
            Fraction per intervention name. All zero if the solver does not
            reach an optimal solution.
        """
        if not candidates:
            return {}

        prob = lp.LpProblem("Intervention_Budget_Allocation", lp.LpMaximize)
        indices = range(len(candidates))
        a = {
            k: lp.LpVariable(
                f"Allocate_{k}",
                lowBound=0,
                upBound=normalized_cost(candidates[k], self.config.cost_scale),
            )
            for k in indices
        }
        prob += lp.lpSum(a[k] * candidates[k].max_r0_reduction for k in indices)
        prob += lp.lpSum(a[k] for k in indices) <= budget

        logger.info("Solving intervention allocation LP over %d candidates", len(candidates))
        try:
            prob.solve(lp.PULP_CBC_CMD(msg=False))
        except Exception:
            logger.exception("Error solving intervention allocation LP")
            self.last_status = "Error"
            return zero_allocation(candidates)

        self.last_status = lp.LpStatus[prob.status]
        if prob.status != lp.LpStatusOptimal:
            logger.warning("Solver returned non-optimal status: %s, allocating nothing", self.last_status)
            return zero_allocation(candidates)

        # CBC can report values a hair outside the bounds.
        allocations = {}
        for k in indices:
            cap = normalized_cost(candidates[k], self.config.cost_scale)
            allocations[candidates[k].name] = min(max(a[k].varValue or 0.0, 0.0), cap)
        return allocations
