"""Reference data: available interventions and the diseases they apply to."""

from dataclasses import dataclass
from enum import Enum


class Disease(str, Enum):
    """Diseases the planning engine knows about."""

    DENGUE = "dengue"
    MALARIA = "malaria"
    DIARRHOEA = "diarrhoea"

    @classmethod
    def parse(cls, value: "Disease | str") -> "Disease | None":
        """Return the matching disease, or ``None`` for an unknown identifier."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Intervention:
    """An intervention and its nominal effect.

    Parameters
    ----------
    name : str
        Unique key.
    max_r0_reduction : float
        Fractional R0 reduction at full allocation, in (0, 1].
    relative_cost : int
        Relative cost on a 1-10 scale.
    applicability : frozenset[Disease]
        Diseases this intervention acts on.

    Raises
    ------
    ValueError
        If the reduction or cost is out of range.
    """

    name: str
    max_r0_reduction: float
    relative_cost: int
    applicability: frozenset[Disease]

    def __post_init__(self) -> None:
        if not (0 < self.max_r0_reduction <= 1):
            raise ValueError(f"{self.name}: max_r0_reduction must be in (0, 1].")
        if not (1 <= self.relative_cost <= 10):
            raise ValueError(f"{self.name}: relative_cost must be between 1 and 10.")

    def applies_to(self, disease: Disease) -> bool:
        return disease in self.applicability


@dataclass(frozen=True)
class DiseaseProfile:
    """Display metadata and typical transmission range for a disease."""

    display_name: str
    r0_range: tuple[float, float]
    transmission: str

    @property
    def default_r0(self) -> float:
        low, high = self.r0_range
        return (low + high) / 2


INTERVENTIONS: tuple[Intervention, ...] = (
    Intervention("mosquito-control", 0.35, 6, frozenset({Disease.DENGUE, Disease.MALARIA})),
    # No widely available malaria vaccine.
    Intervention("vaccination", 0.45, 8, frozenset({Disease.DENGUE})),
    Intervention("water-sanitation", 0.40, 7, frozenset({Disease.DIARRHOEA})),
    # Early detection.
    Intervention("surge-labs", 0.25, 5, frozenset(Disease)),
    # Behaviour change communication.
    Intervention("community-bcc", 0.30, 3, frozenset(Disease)),
)

DISEASE_PROFILES: dict[Disease, DiseaseProfile] = {
    Disease.DENGUE: DiseaseProfile("Dengue", (1.5, 3.0), "Aedes mosquito"),
    Disease.MALARIA: DiseaseProfile("Malaria", (1.0, 2.5), "Anopheles mosquito"),
    Disease.DIARRHOEA: DiseaseProfile("Acute Watery Diarrhoea", (2.0, 4.0), "Contaminated water"),
}


def applicable_interventions(
    disease: Disease | str,
    catalog: tuple[Intervention, ...] = INTERVENTIONS,
) -> list[Intervention]:
    """Return the catalog entries applicable to ``disease``, in catalog order.

    Parameters
    ----------
    disease : Disease | str
        Disease member or identifier. Unknown identifiers match nothing.
    catalog : tuple[Intervention, ...]
        Interventions to search. Defaults to :data:`INTERVENTIONS`.

    Returns
    -------
    list[Intervention]
    """
    parsed = Disease.parse(disease)
    if parsed is None:
        return []
    return [i for i in catalog if i.applies_to(parsed)]


def disease_profile(disease: Disease | str) -> DiseaseProfile | None:
    parsed = Disease.parse(disease)
    if parsed is None:
        return None
    return DISEASE_PROFILES[parsed]
