"""Intervention budget allocation and outbreak projection for epidemic planning."""

from intervention_allocation.adapter import InterventionPlanningComponent
from intervention_allocation.allocation import GreedyBudgetAllocator, LinearProgramAllocator
from intervention_allocation.catalog import INTERVENTIONS, Disease, Intervention, applicable_interventions
from intervention_allocation.config import EngineConfig
from intervention_allocation.models import AllocationResult, PlanningResult, ProjectionResult, RiskAssessment, RiskLevel
from intervention_allocation.planner import allocate_interventions, plan_intervention
from intervention_allocation.projection import project_expected_cases, project_timeline
from intervention_allocation.radius import spread_radii, spread_radius
from intervention_allocation.risk import classify_risk

__all__ = [
    "AllocationResult",
    "Disease",
    "EngineConfig",
    "GreedyBudgetAllocator",
    "INTERVENTIONS",
    "Intervention",
    "InterventionPlanningComponent",
    "LinearProgramAllocator",
    "PlanningResult",
    "ProjectionResult",
    "RiskAssessment",
    "RiskLevel",
    "allocate_interventions",
    "applicable_interventions",
    "classify_risk",
    "plan_intervention",
    "project_expected_cases",
    "project_timeline",
    "spread_radii",
    "spread_radius",
]
