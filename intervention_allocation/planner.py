"""End-to-end planning: allocation, effective R0, projection and risk.

The flow per call is catalog filter, allocation rule, diminishing-returns
combination, effective R0, case projection, risk classification and the
animation radii. Every step is a pure function of its inputs.
"""

import logging
from collections.abc import Iterable

from intervention_allocation.allocation import BudgetAllocator, GreedyBudgetAllocator, sanitize_budget
from intervention_allocation.catalog import INTERVENTIONS, Disease, Intervention, applicable_interventions
from intervention_allocation.combiner import DiminishingReturnsCombiner, effective_r0
from intervention_allocation.config import DEFAULT_CONFIG, EngineConfig
from intervention_allocation.models import (
    AllocationRequest,
    AllocationResult,
    InterventionAllocation,
    PlanningResult,
)
from intervention_allocation.projection import project_expected_cases
from intervention_allocation.radius import spread_radii
from intervention_allocation.risk import classify_risk

logger = logging.getLogger(__name__)


def _sanitize_base_r0(base_r0: float) -> float:
    if base_r0 < 0:
        logger.warning("Negative base R0 %.3f clamped to 0", base_r0)
        return 0.0
    return float(base_r0)


def select_candidates(
    disease: Disease | str,
    selected_interventions: Iterable[str] | None = None,
    catalog: tuple[Intervention, ...] = INTERVENTIONS,
) -> list[Intervention]:
    """Return the applicable interventions, restricted to a selection if one is given.

    Parameters
    ----------
    disease : Disease | str
        Disease identifier.
    selected_interventions : Iterable[str], optional
        Names to consider. A single string is one name. ``None`` keeps every
        applicable intervention; an empty selection keeps none. Names that
        are unknown or not applicable are ignored.
    catalog : tuple[Intervention, ...]
        Interventions to draw from.

    Returns
    -------
    list[Intervention]
        Candidates in catalog order.
    """
    applicable = applicable_interventions(disease, catalog)
    if not applicable:
        logger.warning("No interventions applicable to disease %r", disease)
    if selected_interventions is None:
        return applicable
    if isinstance(selected_interventions, str):
        selected_interventions = (selected_interventions,)
    selected = set(selected_interventions)
    candidates = [i for i in applicable if i.name in selected]
    ignored = selected - {i.name for i in candidates}
    if ignored:
        logger.warning("Ignoring interventions not applicable to %r: %s", disease, sorted(ignored))
    return candidates


def allocate_interventions(
    disease: Disease | str,
    base_r0: float,
    budget: float = 1.0,
    selected_interventions: Iterable[str] | None = None,
    allocator: BudgetAllocator | None = None,
    combiner: DiminishingReturnsCombiner | None = None,
    catalog: tuple[Intervention, ...] = INTERVENTIONS,
    config: EngineConfig | None = None,
) -> AllocationResult:
    """Allocate a normalized budget and compute the resulting effective R0.

    Parameters
    ----------
    disease : Disease | str
        Disease identifier. Unknown diseases yield no reduction.
    base_r0 : float
        Reproduction number before interventions. Negative values are
        clamped to 0.
    budget : float
        Normalized budget, clamped into [0, 1].
    selected_interventions : Iterable[str], optional
        Restrict consideration to these names.
    allocator : BudgetAllocator, optional
        Allocation rule. Defaults to :class:`GreedyBudgetAllocator`.
    combiner : DiminishingReturnsCombiner, optional
        Stacking rule. Defaults to one built from ``config``.
    catalog : tuple[Intervention, ...]
        Interventions to draw from.
    config : EngineConfig, optional
        Calibration values. Defaults to :data:`DEFAULT_CONFIG`.

    Returns
    -------
    AllocationResult
    """
    config = config or DEFAULT_CONFIG
    allocator = allocator or GreedyBudgetAllocator(config)
    combiner = combiner or DiminishingReturnsCombiner(config=config)

    base_r0 = _sanitize_base_r0(base_r0)
    budget = sanitize_budget(budget)
    candidates = select_candidates(disease, selected_interventions, catalog)

    if not candidates:
        return AllocationResult(
            interventions=[],
            aggregate_reduction=0.0,
            effective_r0=base_r0,
            optimal_mix=[],
            rule=allocator.rule,
        )

    fractions = allocator(candidates, budget)
    paired = [(i, fractions[i.name]) for i in candidates]
    aggregate = combiner(paired)

    interventions = [
        InterventionAllocation(
            name=i.name,
            allocation_fraction=fraction,
            contributed_reduction=i.max_r0_reduction * fraction,
        )
        for i, fraction in paired
    ]
    result = AllocationResult(
        interventions=interventions,
        aggregate_reduction=aggregate,
        effective_r0=effective_r0(base_r0, aggregate),
        optimal_mix=[a.name for a in interventions if a.allocation_fraction > 0],
        rule=allocator.rule,
    )
    logger.info(
        "Allocation complete: rule=%s, mix=%s, reduction=%.4f, effective_r0=%.4f",
        result.rule,
        result.optimal_mix,
        result.aggregate_reduction,
        result.effective_r0,
    )
    return result


def allocate(request: AllocationRequest, **kwargs) -> AllocationResult:
    """Run :func:`allocate_interventions` for an :class:`AllocationRequest`."""
    return allocate_interventions(
        request.disease,
        request.base_r0,
        request.budget,
        request.selected_interventions,
        **kwargs,
    )


def plan_intervention(
    disease: Disease | str,
    base_r0: float,
    initial_cases: int,
    elapsed_weeks: int,
    budget: float = 1.0,
    selected_interventions: Iterable[str] | None = None,
    population_ceiling: float | None = None,
    allocator: BudgetAllocator | None = None,
    catalog: tuple[Intervention, ...] = INTERVENTIONS,
    config: EngineConfig | None = None,
) -> PlanningResult:
    """Compute allocation, projection, risk and radii for one animation tick.

    Parameters
    ----------
    disease : Disease | str
        Disease identifier.
    base_r0 : float
        Reproduction number before interventions.
    initial_cases : int
        Cases at week zero.
    elapsed_weeks : int
        Weeks since the outbreak start.
    budget : float
        Normalized budget.
    selected_interventions : Iterable[str], optional
        Restrict consideration to these names.
    population_ceiling : float, optional
        Saturation ceiling. Defaults to ``config.population_ceiling``.
    allocator : BudgetAllocator, optional
        Allocation rule. Defaults to :class:`GreedyBudgetAllocator`.
    catalog : tuple[Intervention, ...]
        Interventions to draw from.
    config : EngineConfig, optional
        Calibration values. Defaults to :data:`DEFAULT_CONFIG`.

    Returns
    -------
    PlanningResult
    """
    config = config or DEFAULT_CONFIG
    allocation = allocate_interventions(
        disease,
        base_r0,
        budget,
        selected_interventions,
        allocator=allocator,
        catalog=catalog,
        config=config,
    )
    projection = project_expected_cases(
        initial_cases,
        allocation.effective_r0,
        elapsed_weeks,
        population_ceiling,
        config,
    )
    risk = classify_risk(allocation.effective_r0, projection.expected_cases, config)
    radii = spread_radii(allocation.effective_r0, projection.elapsed_weeks, config)
    return PlanningResult(allocation=allocation, projection=projection, risk=risk, radii_km=radii)
