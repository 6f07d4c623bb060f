"""Tests for the menu service."""

import pytest

from menu_score.domain.customizations import (
    Customization,
    CustomizationAction,
    InvalidCustomizationError,
)
from menu_score.domain.scoring import ReferenceSet, ScoreProfile
from menu_score.services.menu import (
    ItemNotFoundError,
    MenuService,
    ScoreProfileNotFoundError,
    TrayRequestItem,
)
from menu_score.services.scoring import DEFAULT_SCORE_PROFILE, compute_score
from tests.conftest import (
    AVOCADO_ID,
    BURGER_ID,
    CHEESE_ID,
    InMemoryMenuRepository,
)

PROTEIN_PROFILE = ScoreProfile(
    id="protein-focus",
    name="Protein Focus",
    calories_weight=0.1,
    protein_weight=0.4,
    carbs_weight=0.1,
    fat_weight=0.1,
    sodium_weight=0.1,
    fiber_weight=0.1,
    sugar_weight=0.1,
)


def test_item_detail_lists_recipe(menu_service: MenuService) -> None:
    detail = menu_service.get_item_detail(BURGER_ID)

    assert detail.item.id == BURGER_ID
    assert [(ing.id, grams) for ing, grams in detail.ingredients][0] == (CHEESE_ID, 30)
    assert detail.nutrition == detail.item.base_nutrition
    assert detail.score == compute_score(detail.item.base_nutrition)


def test_customize_removes_ingredient(menu_service: MenuService) -> None:
    result = menu_service.customize(
        BURGER_ID, [Customization(CHEESE_ID, CustomizationAction.REMOVE)]
    )

    assert result.nutrition.calories == pytest.approx(380)
    assert result.profile_id == DEFAULT_SCORE_PROFILE.id
    assert result.score == compute_score(result.nutrition)


def test_customize_loads_added_ingredients(
    menu_service: MenuService, menu_repository: InMemoryMenuRepository
) -> None:
    result = menu_service.customize(
        BURGER_ID,
        [Customization(AVOCADO_ID, CustomizationAction.ADD, quantity_g=50)],
    )

    assert AVOCADO_ID in menu_repository.ingredient_batches[-1]
    assert result.nutrition.calories == pytest.approx(580)


def test_customize_unknown_item(menu_service: MenuService) -> None:
    with pytest.raises(ItemNotFoundError):
        menu_service.customize("item-missing", [])


def test_customize_rejects_invalid_edit(menu_service: MenuService) -> None:
    with pytest.raises(InvalidCustomizationError):
        menu_service.customize(
            BURGER_ID, [Customization(CHEESE_ID, CustomizationAction.MODIFY)]
        )


def test_duplicate_edits_rejected_when_configured(
    menu_repository: InMemoryMenuRepository,
) -> None:
    service = MenuService(menu_repository, reject_duplicate_customizations=True)
    edits = [
        Customization(CHEESE_ID, CustomizationAction.REMOVE),
        Customization(CHEESE_ID, CustomizationAction.REMOVE),
    ]

    with pytest.raises(InvalidCustomizationError):
        service.customize(BURGER_ID, edits)


def test_profile_resolution(
    menu_service: MenuService, menu_repository: InMemoryMenuRepository
) -> None:
    assert menu_service.resolve_profile() == DEFAULT_SCORE_PROFILE
    assert menu_service.resolve_profile("default") == DEFAULT_SCORE_PROFILE
    with pytest.raises(ScoreProfileNotFoundError):
        menu_service.resolve_profile("missing")

    menu_repository.profiles[PROTEIN_PROFILE.id] = PROTEIN_PROFILE
    result = menu_service.customize(BURGER_ID, [], profile_id=PROTEIN_PROFILE.id)
    assert result.profile_id == PROTEIN_PROFILE.id
    assert result.score == compute_score(result.nutrition, PROTEIN_PROFILE)


def test_catalog_default_profile_is_preferred(
    menu_service: MenuService, menu_repository: InMemoryMenuRepository
) -> None:
    stored_default = ScoreProfile(
        id="stored-default",
        name="Stored",
        calories_weight=0.2,
        protein_weight=0.2,
        carbs_weight=0.1,
        fat_weight=0.1,
        sodium_weight=0.2,
        fiber_weight=0.1,
        sugar_weight=0.1,
        is_default=True,
    )
    menu_repository.profiles[stored_default.id] = stored_default

    assert menu_service.resolve_profile() == stored_default


def test_customize_with_daily_reference(menu_service: MenuService) -> None:
    result = menu_service.customize(BURGER_ID, [], reference_set=ReferenceSet.DAILY)

    assert result.score == compute_score(
        result.nutrition, reference_set=ReferenceSet.DAILY
    )


def test_evaluate_tray_sums_quantities(menu_service: MenuService) -> None:
    summary = menu_service.evaluate_tray(
        [
            TrayRequestItem(BURGER_ID, [], quantity=2),
            TrayRequestItem(
                BURGER_ID, [Customization(CHEESE_ID, CustomizationAction.REMOVE)]
            ),
        ]
    )

    assert len(summary.items) == 2
    assert summary.items[0].score == compute_score(summary.items[0].nutrition)
    assert summary.total_nutrition.calories == pytest.approx(500 * 2 + 380)
    assert summary.total_score == compute_score(summary.total_nutrition)


def test_evaluate_empty_tray(menu_service: MenuService) -> None:
    summary = menu_service.evaluate_tray([])

    assert summary.items == []
    assert summary.total_score == 50


def test_list_restaurants_sorted(menu_service: MenuService) -> None:
    names = [restaurant.name for restaurant in menu_service.list_restaurants()]

    assert names == ["Burger Barn", "Taco Stand"]


def test_evaluate_tray_with_daily_reference(menu_service: MenuService) -> None:
    summary = menu_service.evaluate_tray(
        [TrayRequestItem(BURGER_ID, [])], reference_set=ReferenceSet.DAILY
    )

    expected = compute_score(summary.total_nutrition, reference_set=ReferenceSet.DAILY)
    assert summary.total_score == expected
    assert summary.items[0].score == expected


@pytest.mark.parametrize("quantity", [float("inf"), float("nan"), 0])
def test_evaluate_tray_rejects_bad_quantity(
    menu_service: MenuService, quantity: float
) -> None:
    with pytest.raises(InvalidCustomizationError, match="Quantity"):
        menu_service.evaluate_tray([TrayRequestItem(BURGER_ID, [], quantity=quantity)])
