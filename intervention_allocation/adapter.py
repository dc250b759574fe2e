"""PLAN component: dict-in, dict-out entry point for the visualization layer."""

import logging
from dataclasses import asdict
from typing import Any, Protocol

from intervention_allocation.allocation import BudgetAllocator, GreedyBudgetAllocator
from intervention_allocation.catalog import INTERVENTIONS, Intervention, disease_profile
from intervention_allocation.config import DEFAULT_CONFIG, EngineConfig
from intervention_allocation.models import PlanningResult
from intervention_allocation.planner import plan_intervention

logger = logging.getLogger(__name__)


class PipelineComponent(Protocol):
    """Structural interface for pipeline stage components."""

    def execute(self, event: dict) -> dict:
        """Process event and return result."""
        ...


_FIELD_MAP_IN: dict[str, str] = {
    "baseR0": "base_r0",
    "initialCases": "initial_cases",
    "elapsedWeeks": "elapsed_weeks",
    "week": "elapsed_weeks",
    "populationCeiling": "population_ceiling",
    "interventions": "selected_interventions",
    "selectedInterventions": "selected_interventions",
}


def _to_planner_format(event: dict[str, Any]) -> dict[str, Any]:
    """Map collaborator field names to planner argument names.

    Parameters
    ----------
    event : dict[str, Any]
        Event with either snake_case or camelCase keys.

    Returns
    -------
    dict[str, Any]
        Event with planner argument names. When several keys map to the
        same argument, the first one in event order wins.
    """
    args: dict[str, Any] = {}
    source: dict[str, str] = {}
    for key, value in event.items():
        name = _FIELD_MAP_IN.get(key, key)
        if name in args:
            logger.warning("Conflicting fields %s and %s for %s, using %s", source[name], key, name, source[name])
            continue
        args[name] = value
        source[name] = key
    return args


def _default_base_r0(disease: Any) -> float:
    profile = disease_profile(disease)
    if profile is None:
        logger.warning("No base_r0 given and no profile for disease %r, using 0", disease)
        return 0.0
    return profile.default_r0


def _serialize(result: PlanningResult) -> dict[str, Any]:
    payload = asdict(result)
    payload["risk"]["level"] = result.risk.level.value
    payload["allocation"]["total_allocated"] = result.allocation.total_allocated
    return payload


class InterventionPlanningComponent(PipelineComponent):
    """Plan interventions for one tick of the outbreak animation.

    Handles field mapping and defaults, then delegates to
    :func:`~intervention_allocation.planner.plan_intervention`.

    Parameters
    ----------
    allocator : BudgetAllocator, optional
        Allocation rule. Defaults to :class:`GreedyBudgetAllocator`.
    config : EngineConfig, optional
        Calibration values. Defaults to :data:`DEFAULT_CONFIG`.
    catalog : tuple[Intervention, ...]
        Interventions to draw from.
    """

    def __init__(
        self,
        allocator: BudgetAllocator | None = None,
        config: EngineConfig | None = None,
        catalog: tuple[Intervention, ...] = INTERVENTIONS,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self._allocator = allocator or GreedyBudgetAllocator(self.config)
        self.catalog = catalog

    def execute(self, event: dict) -> dict:
        """Run the planning pipeline and return a ``PlanningResult`` dict.

        Parameters
        ----------
        event : dict
            Must contain ``disease``. Optional keys: ``base_r0`` (default
            the midpoint of the disease's R0 range), ``budget`` (default
            1.0), ``selected_interventions`` (a list, or one name),
            ``initial_cases`` (default 0), ``elapsed_weeks`` (default 0),
            ``population_ceiling``.

        Returns
        -------
        dict
            Serialized ``PlanningResult`` with ``allocation``, ``projection``,
            ``risk`` and ``radii_km``.
        """
        args = _to_planner_format(event)
        selected = args.get("selected_interventions")
        if isinstance(selected, str):
            selected = [selected]
        base_r0 = args.get("base_r0")
        if base_r0 is None:
            base_r0 = _default_base_r0(args["disease"])

        result = plan_intervention(
            disease=args["disease"],
            base_r0=base_r0,
            initial_cases=args.get("initial_cases", 0),
            elapsed_weeks=args.get("elapsed_weeks", 0),
            budget=args.get("budget", 1.0),
            selected_interventions=None if selected is None else tuple(selected),
            population_ceiling=args.get("population_ceiling"),
            allocator=self._allocator,
            catalog=self.catalog,
            config=self.config,
        )

        logger.info(
            "Plan complete: disease=%s, effective_r0=%.3f, expected_cases=%d, risk=%s",
            args["disease"],
            result.allocation.effective_r0,
            result.projection.expected_cases,
            result.risk.level.value,
        )
        return _serialize(result)

    def compare_scenarios(self, events: list[dict]) -> list[dict]:
        """Execute several events independently, e.g. for side-by-side comparison.

        Parameters
        ----------
        events : list[dict]
            Events as accepted by :meth:`execute`. An optional ``label`` key
            is echoed back in the result.

        Returns
        -------
        list[dict]
            One result per event, in input order.
        """
        results = []
        for event in events:
            label = event.get("label")
            payload = self.execute({k: v for k, v in event.items() if k != "label"})
            if label is not None:
                payload["label"] = label
            results.append(payload)
        return results
