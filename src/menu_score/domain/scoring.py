"""Domain models for health scoring."""

from dataclasses import dataclass
from enum import Enum


class ReferenceSet(str, Enum):
    """Reference value table used to normalize nutrients."""

    MEAL = "meal"
    DAILY = "daily"


@dataclass(frozen=True)
class ScoreProfile:
    """Per-nutrient weights for the health score."""

    id: str
    name: str
    calories_weight: float
    protein_weight: float
    carbs_weight: float
    fat_weight: float
    sodium_weight: float
    fiber_weight: float
    sugar_weight: float
    is_default: bool = False


@dataclass(frozen=True)
class ComponentScores:
    """Per-nutrient sub-scores on a 0-100 scale, not amounts."""

    calories: float
    protein: float
    carbs: float
    fat: float
    sodium: float
    fiber: float
    sugar: float


@dataclass(frozen=True)
class ScoreBreakdown:
    """Normalized component scores with the final weighted score."""

    score: int
    components: ComponentScores
