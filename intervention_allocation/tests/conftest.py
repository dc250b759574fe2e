"""Shared fixtures for intervention allocation tests."""

import pytest

from intervention_allocation.catalog import Disease, Intervention


@pytest.fixture()
def dengue_pair():
    """Vaccination and surge labs, the two-intervention dengue scenario."""
    return [
        Intervention("vaccination", 0.45, 8, frozenset({Disease.DENGUE})),
        Intervention("surge-labs", 0.25, 5, frozenset(Disease)),
    ]


@pytest.fixture()
def tied_catalog():
    """Catalog where ``equal-a`` and ``equal-b`` share a cost-effectiveness of 0.1."""
    return (
        Intervention("equal-a", 0.4, 4, frozenset({Disease.MALARIA})),
        Intervention("equal-b", 0.2, 2, frozenset({Disease.MALARIA})),
        Intervention("best", 0.9, 3, frozenset({Disease.MALARIA})),
    )


@pytest.fixture()
def sample_event():
    """Collaborator-shaped event for one animation tick."""
    return {
        "disease": "dengue",
        "base_r0": 2.0,
        "budget": 1.0,
        "selected_interventions": ["vaccination", "surge-labs"],
        "initial_cases": 100,
        "elapsed_weeks": 4,
    }
