"""Nutrition domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NutritionData:
    """Absolute nutrition totals (kcal, g, g, g, mg, g, g)."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    sodium: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0

    def __add__(self, other: "NutritionData") -> "NutritionData":
        return NutritionData(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
            sodium=self.sodium + other.sodium,
            fiber=self.fiber + other.fiber,
            sugar=self.sugar + other.sugar,
        )

    def __sub__(self, other: "NutritionData") -> "NutritionData":
        return self + other.scaled(-1.0)

    def scaled(self, factor: float) -> "NutritionData":
        """Return totals multiplied by a factor."""
        return NutritionData(
            calories=self.calories * factor,
            protein=self.protein * factor,
            carbs=self.carbs * factor,
            fat=self.fat * factor,
            sodium=self.sodium * factor,
            fiber=self.fiber * factor,
            sugar=self.sugar * factor,
        )

    def clamped(self) -> "NutritionData":
        """Return totals with negative fields floored to zero."""
        return NutritionData(
            calories=max(0.0, self.calories),
            protein=max(0.0, self.protein),
            carbs=max(0.0, self.carbs),
            fat=max(0.0, self.fat),
            sodium=max(0.0, self.sodium),
            fiber=max(0.0, self.fiber),
            sugar=max(0.0, self.sugar),
        )


@dataclass(frozen=True)
class Ingredient:
    """Catalog ingredient with nutrient densities per 100 g."""

    id: str
    name: str
    calories_per_100g: float
    protein: float
    carbs: float
    fat: float
    sodium: float
    fiber: float
    sugar: float
    allergen_flags: tuple[str, ...] = field(default_factory=tuple)

    def amount_for(self, grams: float) -> NutritionData:
        """Return the absolute nutrition contributed by `grams` of this ingredient."""
        ratio = grams / 100.0
        return NutritionData(
            calories=self.calories_per_100g * ratio,
            protein=self.protein * ratio,
            carbs=self.carbs * ratio,
            fat=self.fat * ratio,
            sodium=self.sodium * ratio,
            fiber=self.fiber * ratio,
            sugar=self.sugar * ratio,
        )
