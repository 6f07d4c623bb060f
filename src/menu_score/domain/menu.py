"""Domain models for restaurant menus."""

from dataclasses import dataclass

from menu_score.domain.nutrition import NutritionData


@dataclass(frozen=True)
class Restaurant:
    """Restaurant that owns menu items."""

    id: str
    name: str
    logo_url: str | None = None


@dataclass(frozen=True)
class Item:
    """Menu item as served with its standard recipe."""

    id: str
    restaurant_id: str | None
    name: str
    description: str | None
    base_calories: float
    base_protein: float
    base_carbs: float
    base_fat: float
    base_sodium: float
    base_fiber: float
    base_sugar: float
    image_url: str | None = None

    @property
    def base_nutrition(self) -> NutritionData:
        """Nutrition of the item before any customization."""
        return NutritionData(
            calories=self.base_calories,
            protein=self.base_protein,
            carbs=self.base_carbs,
            fat=self.base_fat,
            sodium=self.base_sodium,
            fiber=self.base_fiber,
            sugar=self.base_sugar,
        )


@dataclass(frozen=True)
class ItemIngredientLink:
    """Grams of an ingredient in an item's standard recipe."""

    item_id: str
    ingredient_id: str
    quantity_g: float
