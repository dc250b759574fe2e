"""Unit tests for calibration configuration."""

import logging

import pytest

from intervention_allocation.config import DEFAULT_CONFIG, EngineConfig


class TestDefaults:
    def test_values(self):
        assert DEFAULT_CONFIG.stacking_decay == 0.85
        assert DEFAULT_CONFIG.reduction_ceiling == 0.80
        assert DEFAULT_CONFIG.r0_normalizer == 3.0
        assert DEFAULT_CONFIG.cases_normalizer == 10000
        assert (DEFAULT_CONFIG.r0_weight, DEFAULT_CONFIG.cases_weight) == (0.6, 0.4)
        assert DEFAULT_CONFIG.population_ceiling == 1_000_000

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.stacking_decay = 0.9


class TestValidation:
    def test_decay_out_of_range(self):
        with pytest.raises(ValueError, match="stacking_decay"):
            EngineConfig(stacking_decay=0.0)

    def test_ceiling_out_of_range(self):
        with pytest.raises(ValueError, match="reduction_ceiling"):
            EngineConfig(reduction_ceiling=1.0)

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ValueError, match="sum to 1"):
            EngineConfig(r0_weight=0.7, cases_weight=0.4)

    def test_thresholds_ordered(self):
        with pytest.raises(ValueError, match="thresholds"):
            EngineConfig(medium_threshold=0.7, high_threshold=0.6)

    def test_non_positive_ceiling(self):
        with pytest.raises(ValueError, match="population_ceiling"):
            EngineConfig(population_ceiling=0)

    def test_non_positive_radius_cap(self):
        with pytest.raises(ValueError, match="max_radius_km"):
            EngineConfig(max_radius_km=0)


class TestFromMapping:
    def test_overrides(self):
        config = EngineConfig.from_mapping({"stacking_decay": "0.9", "timeline_weeks": "12"})
        assert config.stacking_decay == 0.9
        assert config.timeline_weeks == 12

    def test_unknown_key_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="intervention_allocation.config"):
            config = EngineConfig.from_mapping({"nonsense": 1})
        assert config == DEFAULT_CONFIG
        assert "nonsense" in caplog.text


class TestFromEnv:
    def test_reads_prefixed_variables(self):
        environ = {"INTERVENTION_REDUCTION_CEILING": "0.7", "INTERVENTION_CASES_NORMALIZER": "5000"}
        config = EngineConfig.from_env(environ=environ)
        assert config.reduction_ceiling == 0.7
        assert config.cases_normalizer == 5000

    def test_custom_prefix(self):
        config = EngineConfig.from_env(prefix="SIM_", environ={"SIM_BASE_RADIUS_KM": "12"})
        assert config.base_radius_km == 12

    def test_empty_and_invalid_values_keep_default(self, caplog):
        environ = {"INTERVENTION_STACKING_DECAY": "", "INTERVENTION_R0_NORMALIZER": "abc"}
        with caplog.at_level(logging.WARNING, logger="intervention_allocation.config"):
            config = EngineConfig.from_env(environ=environ)
        assert config == DEFAULT_CONFIG
        assert "R0_NORMALIZER" in caplog.text

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv("INTERVENTION_STACKING_DECAY", "0.75")
        assert EngineConfig.from_env().stacking_decay == 0.75
