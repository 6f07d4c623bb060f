"""Customization validation and indexing."""

import math
from collections.abc import Iterable

from menu_score.domain.customizations import (
    Customization,
    CustomizationAction,
    InvalidCustomizationError,
)


def validate_customizations(
    customizations: Iterable[Customization], *, reject_duplicates: bool = False
) -> list[Customization]:
    """Check that every edit carries the payload its action needs."""
    validated: list[Customization] = []
    seen: set[str] = set()
    for custom in customizations:
        if not custom.ingredient_id:
            raise InvalidCustomizationError("Customization is missing ingredient_id")
        _require_finite(custom.ingredient_id, "quantity_g", custom.quantity_g)
        _require_finite(custom.ingredient_id, "multiplier", custom.multiplier)
        if custom.action == CustomizationAction.MODIFY:
            if custom.multiplier is None:
                raise InvalidCustomizationError(
                    f"Modify of {custom.ingredient_id} requires a multiplier"
                )
            if custom.multiplier < 0:
                raise InvalidCustomizationError(
                    f"Multiplier for {custom.ingredient_id} must not be negative"
                )
        if custom.action == CustomizationAction.ADD and (
            custom.quantity_g is None or custom.quantity_g <= 0
        ):
            raise InvalidCustomizationError(
                f"Add of {custom.ingredient_id} requires a positive quantity_g"
            )
        if reject_duplicates and custom.ingredient_id in seen:
            raise InvalidCustomizationError(
                f"Duplicate customization for {custom.ingredient_id}"
            )
        seen.add(custom.ingredient_id)
        validated.append(custom)
    return validated


def _require_finite(ingredient_id: str, name: str, value: float | None) -> None:
    if value is not None and not math.isfinite(value):
        raise InvalidCustomizationError(
            f"{name} for {ingredient_id} must be a finite number"
        )


def index_customizations(
    customizations: Iterable[Customization],
) -> dict[str, Customization]:
    """Key edits by ingredient id; later edits replace earlier ones."""
    indexed: dict[str, Customization] = {}
    for custom in customizations:
        indexed[custom.ingredient_id] = custom
    return indexed
