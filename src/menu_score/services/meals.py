"""Meal tray aggregation."""

from dataclasses import dataclass, field, replace

from menu_score.domain.meals import MealItem
from menu_score.domain.nutrition import NutritionData
from menu_score.domain.scoring import ReferenceSet, ScoreProfile
from menu_score.services.nutrition import sum_nutrition
from menu_score.services.scoring import (
    DEFAULT_SCORE_PROFILE,
    EMPTY_MEAL_SCORE,
    compute_score,
)


@dataclass
class MealTray:
    """Items picked for one meal; owned by a single session or request."""

    items: list[MealItem] = field(default_factory=list)

    def add_item(self, item: MealItem) -> None:
        """Append an item to the tray."""
        self.items.append(item)

    def update_item(self, meal_item_id: str, **changes: object) -> MealItem | None:
        """Replace fields of a tray item and return the updated item."""
        for index, current in enumerate(self.items):
            if current.id == meal_item_id:
                updated = replace(current, **changes)
                self.items[index] = updated
                return updated
        return None

    def remove_item(self, meal_item_id: str) -> None:
        """Drop an item from the tray."""
        self.items = [item for item in self.items if item.id != meal_item_id]

    def clear(self) -> None:
        """Remove every item."""
        self.items = []

    def total_nutrition(self) -> NutritionData:
        """Sum item nutrition, each scaled by its quantity."""
        return sum_nutrition(
            item.nutrition.scaled(item.quantity) for item in self.items
        )

    def total_score(
        self,
        profile: ScoreProfile = DEFAULT_SCORE_PROFILE,
        reference_set: ReferenceSet = ReferenceSet.MEAL,
    ) -> int:
        """Score the whole tray; an empty tray scores a neutral 50."""
        if not self.items:
            return EMPTY_MEAL_SCORE
        return compute_score(self.total_nutrition(), profile, reference_set)
