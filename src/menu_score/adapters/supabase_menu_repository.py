"""Supabase implementation of the menu catalog."""

from dataclasses import dataclass

from supabase import Client

from menu_score.domain.menu import Item, ItemIngredientLink, Restaurant
from menu_score.domain.nutrition import Ingredient
from menu_score.domain.scoring import ScoreProfile
from menu_score.services.menu import MenuRepository


@dataclass
class SupabaseMenuRepository(MenuRepository):
    """Supabase-backed read-only menu catalog."""

    client: Client

    def list_restaurants(self) -> list[Restaurant]:
        """Return restaurants ordered by name."""
        response = self.client.table("restaurants").select("*").order("name").execute()
        return [_parse_restaurant(row) for row in response.data or []]

    def get_item(self, item_id: str) -> Item | None:
        """Return an item by id, if present."""
        response = (
            self.client.table("items").select("*").eq("id", item_id).limit(1).execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def list_item_links(self, item_id: str) -> list[ItemIngredientLink]:
        """Return the standard recipe of an item."""
        response = (
            self.client.table("item_ingredients")
            .select("item_id, ingredient_id, quantity_g")
            .eq("item_id", item_id)
            .execute()
        )
        return [
            ItemIngredientLink(
                item_id=str(row.get("item_id") or item_id),
                ingredient_id=str(row["ingredient_id"]),
                quantity_g=float(row.get("quantity_g") or 0.0),
            )
            for row in response.data or []
        ]

    def get_ingredients_by_ids(self, ingredient_ids: list[str]) -> list[Ingredient]:
        """Return ingredients for a batch of ids."""
        if not ingredient_ids:
            return []
        response = (
            self.client.table("ingredients")
            .select("*")
            .in_("id", list(dict.fromkeys(ingredient_ids)))
            .execute()
        )
        return [_parse_ingredient(row) for row in response.data or []]

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        """Return an ingredient by id, if present."""
        response = (
            self.client.table("ingredients")
            .select("*")
            .eq("id", ingredient_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_ingredient(response.data[0])

    def list_ingredients(self) -> list[Ingredient]:
        """Return every catalog ingredient."""
        response = self.client.table("ingredients").select("*").order("name").execute()
        return [_parse_ingredient(row) for row in response.data or []]

    def get_default_score_profile(self) -> ScoreProfile | None:
        """Return the profile flagged as default, if any."""
        response = (
            self.client.table("score_profiles")
            .select("*")
            .eq("is_default", True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def get_score_profile(self, profile_id: str) -> ScoreProfile | None:
        """Return a score profile by id, if present."""
        response = (
            self.client.table("score_profiles")
            .select("*")
            .eq("id", profile_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])


def _to_float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0


def _parse_restaurant(row: dict[str, object]) -> Restaurant:
    return Restaurant(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        logo_url=row.get("logo_url"),
    )


def _parse_item(row: dict[str, object]) -> Item:
    """Parse an items row into a domain model."""
    restaurant_id = row.get("restaurant_id")
    return Item(
        id=str(row["id"]),
        restaurant_id=str(restaurant_id) if restaurant_id else None,
        name=str(row.get("name", "")),
        description=row.get("description"),
        image_url=row.get("image_url"),
        base_calories=_to_float(row.get("base_calories")),
        base_protein=_to_float(row.get("base_protein")),
        base_carbs=_to_float(row.get("base_carbs")),
        base_fat=_to_float(row.get("base_fat")),
        base_sodium=_to_float(row.get("base_sodium")),
        base_fiber=_to_float(row.get("base_fiber")),
        base_sugar=_to_float(row.get("base_sugar")),
    )


def _parse_ingredient(row: dict[str, object]) -> Ingredient:
    """Parse an ingredients row into a domain model."""
    return Ingredient(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        calories_per_100g=_to_float(row.get("calories_per_100g")),
        protein=_to_float(row.get("protein")),
        carbs=_to_float(row.get("carbs")),
        fat=_to_float(row.get("fat")),
        sodium=_to_float(row.get("sodium")),
        fiber=_to_float(row.get("fiber")),
        sugar=_to_float(row.get("sugar")),
        allergen_flags=tuple(row.get("allergen_flags") or ()),
    )


def _parse_profile(row: dict[str, object]) -> ScoreProfile:
    """Parse a score_profiles row into a domain model."""
    return ScoreProfile(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        calories_weight=_to_float(row.get("calories_weight")),
        protein_weight=_to_float(row.get("protein_weight")),
        carbs_weight=_to_float(row.get("carbs_weight")),
        fat_weight=_to_float(row.get("fat_weight")),
        sodium_weight=_to_float(row.get("sodium_weight")),
        fiber_weight=_to_float(row.get("fiber_weight")),
        sugar_weight=_to_float(row.get("sugar_weight")),
        is_default=bool(row.get("is_default", False)),
    )
