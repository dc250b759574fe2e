"""Unit tests for diminishing-returns stacking and the effective R0."""

import pytest

from intervention_allocation.catalog import Disease, Intervention
from intervention_allocation.combiner import DiminishingReturnsCombiner, effective_r0, order_by_reduction
from intervention_allocation.config import EngineConfig


def _intervention(name, reduction, cost=5):
    return Intervention(name, reduction, cost, frozenset({Disease.DENGUE}))


class TestOrderByReduction:
    def test_largest_first(self, dengue_pair):
        vaccination, surge_labs = dengue_pair
        ordered = order_by_reduction([(surge_labs, 0.2), (vaccination, 0.8)])
        assert [i.name for i, _ in ordered] == ["vaccination", "surge-labs"]

    def test_independent_of_cost_ranking(self):
        cheap = _intervention("cheap", 0.30, 3)
        strong = _intervention("strong", 0.45, 8)
        ordered = order_by_reduction([(cheap, 0.3), (strong, 0.7)])
        assert [i.name for i, _ in ordered] == ["strong", "cheap"]

    def test_equal_reductions_keep_input_order(self):
        first = _intervention("first", 0.3)
        second = _intervention("second", 0.3)
        ordered = order_by_reduction([(first, 0.1), (second, 0.2)])
        assert [i.name for i, _ in ordered] == ["first", "second"]


class TestDiminishingReturnsCombiner:
    def test_two_intervention_aggregate(self, dengue_pair):
        vaccination, surge_labs = dengue_pair
        aggregate = DiminishingReturnsCombiner()([(vaccination, 0.8), (surge_labs, 0.2)])
        assert aggregate == pytest.approx(0.36 + 0.0425)

    def test_input_order_irrelevant(self, dengue_pair):
        vaccination, surge_labs = dengue_pair
        combiner = DiminishingReturnsCombiner()
        assert combiner([(surge_labs, 0.2), (vaccination, 0.8)]) == combiner([(vaccination, 0.8), (surge_labs, 0.2)])

    def test_zero_allocations_not_stacked(self):
        unfunded = _intervention("unfunded", 0.9)
        funded = _intervention("funded", 0.3)
        aggregate = DiminishingReturnsCombiner()([(unfunded, 0.0), (funded, 1.0)])
        assert aggregate == pytest.approx(0.3)

    def test_ceiling(self):
        strong = Intervention("strong", 1.0, 10, frozenset({Disease.DENGUE}))
        assert DiminishingReturnsCombiner()([(strong, 1.0)]) == pytest.approx(0.80)

    def test_empty(self):
        assert DiminishingReturnsCombiner()([]) == 0.0

    def test_decay_override(self, dengue_pair):
        vaccination, surge_labs = dengue_pair
        combiner = DiminishingReturnsCombiner(stacking_decay=1.0)
        assert combiner([(vaccination, 0.8), (surge_labs, 0.2)]) == pytest.approx(0.36 + 0.05)

    def test_ceiling_override(self):
        strong = Intervention("strong", 1.0, 10, frozenset({Disease.DENGUE}))
        assert DiminishingReturnsCombiner(reduction_ceiling=0.5)([(strong, 1.0)]) == pytest.approx(0.5)

    def test_config_defaults(self):
        combiner = DiminishingReturnsCombiner(config=EngineConfig(stacking_decay=0.5, reduction_ceiling=0.7))
        assert combiner.stacking_decay == 0.5
        assert combiner.reduction_ceiling == 0.7

    def test_third_intervention_decay(self):
        a, b, c = _intervention("a", 0.5), _intervention("b", 0.4), _intervention("c", 0.2)
        aggregate = DiminishingReturnsCombiner()([(a, 0.5), (b, 0.5), (c, 0.5)])
        assert aggregate == pytest.approx(0.25 + 0.2 * 0.85 + 0.1 * 0.85**2)


class TestEffectiveR0:
    def test_formula(self):
        assert effective_r0(2.0, 0.4025) == 2.0 * (1 - 0.4025)

    def test_no_reduction(self):
        assert effective_r0(2.5, 0.0) == 2.5

    def test_full_ceiling(self):
        assert effective_r0(3.0, 0.8) == pytest.approx(0.6)
