"""Domain models for ingredient swaps."""

from dataclasses import dataclass

from menu_score.domain.nutrition import Ingredient


@dataclass(frozen=True)
class SwapSuggestion:
    """A healthier alternative for an ingredient."""

    ingredient: Ingredient
    improvement: float
    reason: str
