"""Budget allocation rules.

Provides the greedy cost-effectiveness rule (the default), an optional
linear-program rule, the shared ranking and sanitation helpers, and the
``BudgetAllocator`` protocol that all rules satisfy.
"""

from intervention_allocation.allocation._common import (
    cost_effectiveness,
    normalized_cost,
    rank_by_cost_effectiveness,
    sanitize_budget,
    zero_allocation,
)
from intervention_allocation.allocation._types import BudgetAllocator
from intervention_allocation.allocation.greedy import GreedyBudgetAllocator
from intervention_allocation.allocation.linear_program import LinearProgramAllocator

__all__ = [
    "BudgetAllocator",
    "GreedyBudgetAllocator",
    "LinearProgramAllocator",
    "cost_effectiveness",
    "normalized_cost",
    "rank_by_cost_effectiveness",
    "sanitize_budget",
    "zero_allocation",
]
