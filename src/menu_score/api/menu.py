"""Menu, scoring and meal tray endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from menu_score.api.models import (  # noqa: TC001
    CustomizeRequest,
    ScoreRequest,
    TrayRequest,
)
from menu_score.domain.customizations import InvalidCustomizationError
from menu_score.services.menu import (
    ItemNotFoundError,
    ScoreProfileNotFoundError,
    TrayRequestItem,
)
from menu_score.services.scoring import score_badge, score_tier

if TYPE_CHECKING:
    from menu_score.containers import AppContainer

router = APIRouter(tags=["menu"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/restaurants")
async def list_restaurants(request: Request) -> dict[str, object]:
    """Return every restaurant."""
    restaurants = _container(request).menu_service.list_restaurants()
    return {"restaurants": [asdict(restaurant) for restaurant in restaurants]}


@router.get("/items/{item_id}")
async def item_detail(item_id: str, request: Request) -> dict[str, object]:
    """Return an item with its recipe, nutrition and as-served score."""
    try:
        detail = _container(request).menu_service.get_item_detail(item_id)
    except ItemNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Item not found"
        ) from exc
    return {
        "item": asdict(detail.item),
        "ingredients": [
            {**asdict(ingredient), "quantity_g": quantity_g}
            for ingredient, quantity_g in detail.ingredients
        ],
        "nutrition": asdict(detail.nutrition),
        "score": detail.score,
    }


@router.post("/items/{item_id}/customize")
async def customize_item(
    item_id: str, body: CustomizeRequest, request: Request
) -> dict[str, object]:
    """Return nutrition and score for an item with edits applied."""
    customizations = [custom.to_domain() for custom in body.customizations]
    try:
        result = _container(request).menu_service.customize(item_id, customizations)
    except InvalidCustomizationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except ItemNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Item not found"
        ) from exc
    return {"nutrition": asdict(result.nutrition), "score": result.score}


@router.post("/score/{item_id}")
async def score_item(
    item_id: str, body: ScoreRequest, request: Request
) -> dict[str, object]:
    """Return the score, badge and per-nutrient breakdown for an item."""
    customizations = [custom.to_domain() for custom in body.customizations]
    try:
        result = _container(request).menu_service.customize(
            item_id,
            customizations,
            profile_id=body.score_profile_id,
            reference_set=body.reference_set,
        )
    except InvalidCustomizationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except ItemNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Item not found"
        ) from exc
    except ScoreProfileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Score profile not found"
        ) from exc
    return {
        "item_id": result.item.id,
        "profile_id": result.profile_id,
        "score": result.score,
        "badge": score_badge(result.score),
        "tier": score_tier(result.score),
        "nutrition": asdict(result.nutrition),
        "breakdown": asdict(result.breakdown.components),
    }


@router.post("/meals/score")
async def score_meal(body: TrayRequest, request: Request) -> dict[str, object]:
    """Resolve every tray item and score the combined meal."""
    entries = [
        TrayRequestItem(
            item_id=entry.item_id,
            customizations=[custom.to_domain() for custom in entry.customizations],
            quantity=entry.quantity,
        )
        for entry in body.items
    ]
    try:
        summary = _container(request).menu_service.evaluate_tray(
            entries,
            profile_id=body.score_profile_id,
            reference_set=body.reference_set,
        )
    except InvalidCustomizationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except ItemNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Item not found: {exc}"
        ) from exc
    except ScoreProfileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Score profile not found"
        ) from exc
    return {
        "items": [
            {
                "id": meal_item.id,
                "item_id": meal_item.item.id,
                "name": meal_item.item.name,
                "quantity": meal_item.quantity,
                "nutrition": asdict(meal_item.nutrition),
                "score": meal_item.score,
            }
            for meal_item in summary.items
        ],
        "total_nutrition": asdict(summary.total_nutrition),
        "total_score": summary.total_score,
        "badge": score_badge(summary.total_score),
    }


@router.get("/swaps/{item_id}")
async def swap_suggestions(
    item_id: str, ingredient_id: str, request: Request
) -> dict[str, object]:
    """Return healthier alternatives for an ingredient of an item."""
    container = _container(request)
    try:
        container.menu_service.get_item(item_id)
    except ItemNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Item not found"
        ) from exc
    suggestions = container.swap_service.suggest(ingredient_id)
    return {
        "item_id": item_id,
        "ingredient_id": ingredient_id,
        "suggestions": [asdict(suggestion) for suggestion in suggestions],
    }
