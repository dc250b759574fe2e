"""Data models for allocation, projection and risk results."""

from dataclasses import dataclass, field
from enum import Enum

from intervention_allocation.catalog import Disease


class RiskLevel(str, Enum):
    """Categorical risk tier with its display color."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def color(self) -> str:
        return _RISK_COLORS[self]


_RISK_COLORS = {
    RiskLevel.LOW: "#10b981",
    RiskLevel.MEDIUM: "#f59e0b",
    RiskLevel.HIGH: "#ef4444",
}


@dataclass(frozen=True)
class AllocationRequest:
    """Inputs to a single allocation.

    Parameters
    ----------
    disease : Disease | str
        Disease identifier.
    base_r0 : float
        Reproduction number before interventions.
    budget : float
        Normalized budget in [0, 1].
    selected_interventions : tuple[str, ...] | None
        Restrict consideration to these names. ``None`` means all applicable
        interventions; an empty tuple means none.
    """

    disease: Disease | str
    base_r0: float
    budget: float = 1.0
    selected_interventions: tuple[str, ...] | None = None


@dataclass(frozen=True)
class InterventionAllocation:
    name: str
    allocation_fraction: float
    contributed_reduction: float


@dataclass(frozen=True)
class AllocationResult:
    """Budget split across interventions and the resulting effective R0.

    Parameters
    ----------
    interventions : list[InterventionAllocation]
        One entry per candidate, in catalog order, including zero allocations.
    aggregate_reduction : float
        Combined R0 reduction after stacking penalties and the ceiling.
    effective_r0 : float
        ``base_r0 * (1 - aggregate_reduction)``.
    optimal_mix : list[str]
        Names with a positive allocation, in catalog order.
    rule : str
        Identifier of the allocator that produced the split.
    """

    interventions: list[InterventionAllocation]
    aggregate_reduction: float
    effective_r0: float
    optimal_mix: list[str]
    rule: str = "none"

    def __post_init__(self) -> None:
        """Validate that the mix matches the positive allocations."""
        positive = [i.name for i in self.interventions if i.allocation_fraction > 0]
        if positive != list(self.optimal_mix):
            raise ValueError("optimal_mix must list exactly the interventions with a positive allocation")

    @property
    def total_allocated(self) -> float:
        return sum(i.allocation_fraction for i in self.interventions)


@dataclass(frozen=True)
class ProjectionRequest:
    initial_cases: int
    effective_r0: float
    elapsed_weeks: int
    population_ceiling: float | None = None


@dataclass(frozen=True)
class ProjectionResult:
    """Expected case count at a given week.

    Parameters
    ----------
    expected_cases : int
        Saturated projection, strictly below the population ceiling.
    raw_expected : float
        Unsaturated projection after the numeric cap.
    elapsed_weeks : int
        Week the projection refers to.
    """

    expected_cases: int
    raw_expected: float
    elapsed_weeks: int


@dataclass(frozen=True)
class RiskAssessment:
    level: RiskLevel
    score: float
    color: str


@dataclass(frozen=True)
class PlanningResult:
    """Everything the visualization layer needs for one tick."""

    allocation: AllocationResult
    projection: ProjectionResult
    risk: RiskAssessment
    radii_km: list[float] = field(default_factory=list)
