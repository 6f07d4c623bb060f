"""Menu item customization and scoring service."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from menu_score.domain.customizations import (
    Customization,
    CustomizationAction,
    InvalidCustomizationError,
)
from menu_score.domain.meals import MealItem
from menu_score.domain.menu import Item, ItemIngredientLink, Restaurant
from menu_score.domain.nutrition import Ingredient, NutritionData
from menu_score.domain.scoring import ReferenceSet, ScoreBreakdown, ScoreProfile
from menu_score.services.customizations import validate_customizations
from menu_score.services.meals import MealTray
from menu_score.services.nutrition import resolve_nutrition
from menu_score.services.scoring import DEFAULT_SCORE_PROFILE, score_breakdown

_logger = logging.getLogger(__name__)


class ItemNotFoundError(LookupError):
    """Raised when a menu item does not exist."""


class ScoreProfileNotFoundError(LookupError):
    """Raised when a requested score profile does not exist."""


class MenuRepository(Protocol):
    """Read-only access to the menu catalog."""

    def list_restaurants(self) -> list[Restaurant]:
        """Return restaurants ordered by name."""

    def get_item(self, item_id: str) -> Item | None:
        """Return an item by id, if present."""

    def list_item_links(self, item_id: str) -> list[ItemIngredientLink]:
        """Return the standard recipe of an item."""

    def get_ingredients_by_ids(self, ingredient_ids: list[str]) -> list[Ingredient]:
        """Return ingredients for a batch of ids."""

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        """Return an ingredient by id, if present."""

    def list_ingredients(self) -> list[Ingredient]:
        """Return every catalog ingredient."""

    def get_default_score_profile(self) -> ScoreProfile | None:
        """Return the profile flagged as default, if any."""

    def get_score_profile(self, profile_id: str) -> ScoreProfile | None:
        """Return a score profile by id, if present."""


@dataclass(frozen=True)
class CustomizationResult:
    """Resolved nutrition and score for a customized item."""

    item: Item
    profile_id: str
    nutrition: NutritionData
    breakdown: ScoreBreakdown

    @property
    def score(self) -> int:
        return self.breakdown.score


@dataclass(frozen=True)
class ItemDetail:
    """An item with its recipe and as-served score."""

    item: Item
    ingredients: list[tuple[Ingredient, float]]
    nutrition: NutritionData
    score: int


@dataclass(frozen=True)
class TrayRequestItem:
    """One entry of a meal tray to evaluate."""

    item_id: str
    customizations: list[Customization]
    quantity: float = 1


@dataclass(frozen=True)
class TraySummary:
    """Evaluated meal tray."""

    items: list[MealItem]
    total_nutrition: NutritionData
    total_score: int


@dataclass
class MenuService:
    """Loads catalog records and runs the nutrition and score engine."""

    repository: MenuRepository
    reference_set: ReferenceSet = ReferenceSet.MEAL
    reject_duplicate_customizations: bool = False

    def list_restaurants(self) -> list[Restaurant]:
        """Return every restaurant."""
        return self.repository.list_restaurants()

    def get_item_detail(self, item_id: str) -> ItemDetail:
        """Return an item, its recipe and its unmodified score."""
        item = self.get_item(item_id)
        links = self.repository.list_item_links(item_id)
        ingredients = self._load_ingredients(links, [])
        by_id = {ingredient.id: ingredient for ingredient in ingredients}
        recipe = [
            (by_id[link.ingredient_id], link.quantity_g)
            for link in links
            if link.ingredient_id in by_id
        ]
        result = self._evaluate(item, links, ingredients, [], self.resolve_profile())
        return ItemDetail(
            item=item,
            ingredients=recipe,
            nutrition=result.nutrition,
            score=result.score,
        )

    def customize(
        self,
        item_id: str,
        customizations: list[Customization],
        profile_id: str | None = None,
        reference_set: ReferenceSet | None = None,
    ) -> CustomizationResult:
        """Resolve nutrition and score for an item with edits applied."""
        return self._customize(
            item_id, customizations, self.resolve_profile(profile_id), reference_set
        )

    def evaluate_tray(
        self,
        entries: list[TrayRequestItem],
        profile_id: str | None = None,
        reference_set: ReferenceSet | None = None,
    ) -> TraySummary:
        """Resolve every tray entry and score the combined meal."""
        profile = self.resolve_profile(profile_id)
        reference_set = reference_set or self.reference_set
        tray = MealTray()
        for entry in entries:
            if not math.isfinite(entry.quantity) or entry.quantity <= 0:
                raise InvalidCustomizationError(
                    f"Quantity for {entry.item_id} must be a positive finite number"
                )
            result = self._customize(
                entry.item_id, entry.customizations, profile, reference_set
            )
            tray.add_item(
                MealItem(
                    id=str(uuid4()),
                    item=result.item,
                    nutrition=result.nutrition,
                    score=result.score,
                    customizations=list(entry.customizations),
                    quantity=entry.quantity,
                )
            )
        return TraySummary(
            items=tray.items,
            total_nutrition=tray.total_nutrition(),
            total_score=tray.total_score(profile, reference_set),
        )

    def resolve_profile(self, profile_id: str | None = None) -> ScoreProfile:
        """Return the requested profile, the catalog default, or the built-in one."""
        if profile_id is not None:
            profile = self.repository.get_score_profile(profile_id)
            if profile is not None:
                return profile
            if profile_id == DEFAULT_SCORE_PROFILE.id:
                return DEFAULT_SCORE_PROFILE
            raise ScoreProfileNotFoundError(profile_id)
        default = self.repository.get_default_score_profile()
        if default is None:
            _logger.warning("No default score profile in catalog, using built-in")
            return DEFAULT_SCORE_PROFILE
        return default

    def _customize(
        self,
        item_id: str,
        customizations: list[Customization],
        profile: ScoreProfile,
        reference_set: ReferenceSet | None = None,
    ) -> CustomizationResult:
        edits = validate_customizations(
            customizations, reject_duplicates=self.reject_duplicate_customizations
        )
        item = self.get_item(item_id)
        links = self.repository.list_item_links(item_id)
        ingredients = self._load_ingredients(links, edits)
        return self._evaluate(item, links, ingredients, edits, profile, reference_set)

    def get_item(self, item_id: str) -> Item:
        """Return an item or raise `ItemNotFoundError`."""
        item = self.repository.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def _load_ingredients(
        self, links: list[ItemIngredientLink], edits: list[Customization]
    ) -> list[Ingredient]:
        ingredient_ids = [link.ingredient_id for link in links]
        for edit in edits:
            if (
                edit.action == CustomizationAction.ADD
                and edit.ingredient_id not in ingredient_ids
            ):
                ingredient_ids.append(edit.ingredient_id)
        if not ingredient_ids:
            return []
        return self.repository.get_ingredients_by_ids(ingredient_ids)

    def _evaluate(  # noqa: PLR0913
        self,
        item: Item,
        links: list[ItemIngredientLink],
        ingredients: list[Ingredient],
        edits: list[Customization],
        profile: ScoreProfile,
        reference_set: ReferenceSet | None = None,
    ) -> CustomizationResult:
        nutrition = resolve_nutrition(item, ingredients, links, edits)
        breakdown = score_breakdown(
            nutrition, profile, reference_set or self.reference_set
        )
        _logger.debug(
            "Scored item=%s edits=%s profile=%s score=%s",
            item.id,
            len(edits),
            profile.id,
            breakdown.score,
        )
        return CustomizationResult(
            item=item,
            profile_id=profile.id,
            nutrition=nutrition,
            breakdown=breakdown,
        )
