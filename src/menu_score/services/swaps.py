"""Healthier ingredient swap suggestions."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from menu_score.domain.nutrition import Ingredient
from menu_score.domain.swaps import SwapSuggestion

SWAP_REASON = "Lower calories and better macros"


class IngredientCatalog(Protocol):
    """Read access to catalog ingredients."""

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        """Return an ingredient by id, if present."""

    def list_ingredients(self) -> list[Ingredient]:
        """Return every catalog ingredient."""


def suggest_swaps(
    current: Ingredient, candidates: Iterable[Ingredient], limit: int = 5
) -> list[SwapSuggestion]:
    """Rank candidates that beat `current` on calories, protein or fiber."""
    eligible = [
        candidate
        for candidate in candidates
        if candidate.id != current.id
        and (
            candidate.calories_per_100g < current.calories_per_100g
            or candidate.protein > current.protein
            or candidate.fiber > current.fiber
        )
    ]
    eligible.sort(key=_swap_rank)
    return [
        SwapSuggestion(
            ingredient=candidate,
            improvement=max(0.0, _improvement(current, candidate)),
            reason=SWAP_REASON,
        )
        for candidate in eligible[:limit]
    ]


def _swap_rank(ingredient: Ingredient) -> float:
    return (
        ingredient.calories_per_100g
        + ingredient.fat * 9
        - ingredient.protein * 4
        - ingredient.fiber * 2
    )


def _improvement(current: Ingredient, candidate: Ingredient) -> float:
    return (
        current.calories_per_100g
        - candidate.calories_per_100g
        + (candidate.protein - current.protein) * 4
        + (candidate.fiber - current.fiber) * 2
        - (candidate.fat - current.fat) * 9
    )


@dataclass
class SwapService:
    """Looks up swap suggestions from the ingredient catalog."""

    catalog: IngredientCatalog
    limit: int = 5

    def suggest(self, ingredient_id: str) -> list[SwapSuggestion]:
        """Return swaps for an ingredient; unknown ids yield none."""
        current = self.catalog.get_ingredient(ingredient_id)
        if current is None:
            return []
        return suggest_swaps(current, self.catalog.list_ingredients(), self.limit)
