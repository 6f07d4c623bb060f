"""Domain models for meal trays."""

from dataclasses import dataclass, field

from menu_score.domain.customizations import Customization
from menu_score.domain.menu import Item
from menu_score.domain.nutrition import NutritionData


@dataclass(frozen=True)
class MealItem:
    """A resolved item on a meal tray."""

    id: str
    item: Item
    nutrition: NutritionData
    score: int
    customizations: list[Customization] = field(default_factory=list)
    quantity: float = 1
