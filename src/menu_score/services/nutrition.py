"""Nutrition recomputation for customized menu items."""

import logging
from collections.abc import Iterable

from menu_score.domain.customizations import Customization, CustomizationAction
from menu_score.domain.menu import Item, ItemIngredientLink
from menu_score.domain.nutrition import Ingredient, NutritionData
from menu_score.services.customizations import index_customizations

_logger = logging.getLogger(__name__)


def resolve_nutrition(
    item: Item,
    ingredients: Iterable[Ingredient],
    links: Iterable[ItemIngredientLink],
    customizations: Iterable[Customization] = (),
) -> NutritionData:
    """Apply ingredient edits to an item's base nutrition.

    Totals start from the item as served. Each linked ingredient contributes
    the difference between its effective and standard quantities, so
    removals, multipliers and extra portions net out against the base.
    Ingredients added outside the standard recipe are added in full.
    Ingredients missing from `ingredients` are skipped.
    """
    catalog = {ingredient.id: ingredient for ingredient in ingredients}
    edits = index_customizations(customizations)
    totals = item.base_nutrition
    linked_ids: set[str] = set()

    for link in links:
        linked_ids.add(link.ingredient_id)
        ingredient = catalog.get(link.ingredient_id)
        if ingredient is None:
            continue
        edit = edits.get(link.ingredient_id)
        effective_g = _effective_quantity(link.quantity_g, edit)
        if effective_g == link.quantity_g:
            continue
        totals = (
            totals
            + ingredient.amount_for(effective_g)
            - ingredient.amount_for(link.quantity_g)
        )

    for ingredient_id, edit in edits.items():
        if edit.action != CustomizationAction.ADD or not edit.quantity_g:
            continue
        if ingredient_id in linked_ids:
            continue
        ingredient = catalog.get(ingredient_id)
        if ingredient is None:
            _logger.debug("Skipping add of unknown ingredient %s", ingredient_id)
            continue
        totals = totals + ingredient.amount_for(edit.quantity_g)

    return totals.clamped()


def sum_nutrition(items: Iterable[NutritionData]) -> NutritionData:
    """Field-wise sum; an empty sequence yields zeros."""
    total = NutritionData()
    for nutrition in items:
        total = total + nutrition
    return total


def _effective_quantity(standard_g: float, edit: Customization | None) -> float:
    if edit is None:
        return standard_g
    if edit.action == CustomizationAction.REMOVE:
        return 0.0
    if edit.action == CustomizationAction.MODIFY and edit.multiplier is not None:
        return standard_g * edit.multiplier
    if edit.action == CustomizationAction.ADD and edit.quantity_g:
        return standard_g + edit.quantity_g
    return standard_g
