"""Calibration constants for the allocation and projection engine.

All numeric policy values live on :class:`EngineConfig` so they can be
recalibrated through keyword overrides, a plain mapping, or environment
variables without touching the algorithms.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

logger = logging.getLogger(__name__)

ENV_PREFIX = "INTERVENTION_"


@dataclass(frozen=True)
class EngineConfig:
    """Named, overridable calibration values.

    Parameters
    ----------
    stacking_decay : float
        Effectiveness multiplier applied per additionally stacked intervention.
    reduction_ceiling : float
        Upper bound on the aggregate R0 reduction.
    r0_normalizer : float
        Effective R0 at which the R0 risk component saturates.
    cases_normalizer : float
        Expected case count at which the case risk component saturates.
    r0_weight : float
        Weight of the R0 component in the risk score.
    cases_weight : float
        Weight of the case component in the risk score.
    medium_threshold : float
        Lowest score classified as Medium.
    high_threshold : float
        Lowest score classified as High.
    population_ceiling : float
        Default per-district population proxy for saturation.
    max_raw_cases : float
        Cap on the unsaturated case projection.
    cost_scale : float
        Divisor turning a relative cost into a budget fraction.
    base_radius_km : float
        Animation radius in week one.
    radius_growth_base : float
        Base of the per-week radius growth.
    max_radius_km : float
        Cap on the animation radius.
    timeline_weeks : int
        Number of weeks in a projected timeline.

    Raises
    ------
    ValueError
        If any value is outside its valid range.
    """

    stacking_decay: float = 0.85
    reduction_ceiling: float = 0.80
    r0_normalizer: float = 3.0
    cases_normalizer: float = 10000.0
    r0_weight: float = 0.6
    cases_weight: float = 0.4
    medium_threshold: float = 0.3
    high_threshold: float = 0.6
    population_ceiling: float = 1_000_000.0
    max_raw_cases: float = 1e12
    cost_scale: float = 10.0
    base_radius_km: float = 20.0
    radius_growth_base: float = 1.4
    max_radius_km: float = 20_000.0
    timeline_weeks: int = 8

    def __post_init__(self) -> None:
        if not (0 < self.stacking_decay <= 1):
            raise ValueError("stacking_decay must be in (0, 1].")
        if not (0 <= self.reduction_ceiling < 1):
            raise ValueError("reduction_ceiling must be in [0, 1).")
        positive = ("r0_normalizer", "cases_normalizer", "population_ceiling", "max_raw_cases", "cost_scale", "max_radius_km")
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive.")
        if self.r0_weight < 0 or self.cases_weight < 0:
            raise ValueError("Risk weights must be non-negative.")
        if abs(self.r0_weight + self.cases_weight - 1.0) > 1e-9:
            raise ValueError("Risk weights must sum to 1.")
        if not (0 < self.medium_threshold < self.high_threshold <= 1):
            raise ValueError("Risk thresholds must satisfy 0 < medium < high <= 1.")
        if self.base_radius_km < 0 or self.radius_growth_base <= 0:
            raise ValueError("base_radius_km must be non-negative and radius_growth_base positive.")
        if self.timeline_weeks < 0:
            raise ValueError("timeline_weeks must be non-negative.")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "EngineConfig":
        """Build a config from a mapping, ignoring unknown keys.

        Parameters
        ----------
        values : Mapping[str, Any]
            Field names to override.

        Returns
        -------
        EngineConfig
        """
        known = {f.name for f in fields(cls)}
        overrides: dict[str, Any] = {}
        for key, value in values.items():
            if key not in known:
                logger.warning("Ignoring unknown config key: %s", key)
                continue
            overrides[key] = int(value) if key == "timeline_weeks" else float(value)
        return cls(**overrides)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ: Mapping[str, str] | None = None) -> "EngineConfig":
        """Build a config from ``<prefix><FIELD_NAME>`` environment variables.

        Empty or unparsable values are skipped with a warning and the default
        is kept.

        Parameters
        ----------
        prefix : str
            Variable name prefix, e.g. ``INTERVENTION_STACKING_DECAY``.
        environ : Mapping[str, str], optional
            Source of variables. Defaults to ``os.environ``.

        Returns
        -------
        EngineConfig
        """
        if environ is None:
            environ = os.environ
        overrides: dict[str, Any] = {}
        for f in fields(cls):
            raw = environ.get(f"{prefix}{f.name.upper()}")
            if raw is None or raw == "":
                continue
            try:
                overrides[f.name] = int(raw) if f.name == "timeline_weeks" else float(raw)
            except ValueError:
                logger.warning("Invalid value for %s%s: %r, keeping default", prefix, f.name.upper(), raw)
        return cls(**overrides)


DEFAULT_CONFIG = EngineConfig()
