"""Type definitions for the allocator protocol."""

from typing import Protocol

from intervention_allocation.catalog import Intervention


class BudgetAllocator(Protocol):
    """Protocol for budget allocation rules.

    Implementations receive the candidate interventions in catalog order and a
    sanitized budget in [0, 1], and return the budget fraction given to each
    candidate, keyed by name. Every candidate must appear in the mapping.

    Attributes
    ----------
    rule : str
        Identifier for the allocation rule (e.g. ``"greedy"``).
    """

    rule: str

    def __call__(self, candidates: list[Intervention], budget: float) -> dict[str, float]: ...
