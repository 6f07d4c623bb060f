"""Domain models for item customizations."""

from dataclasses import dataclass
from enum import Enum


class CustomizationAction(str, Enum):
    """Kinds of ingredient edits."""

    ADD = "add"
    REMOVE = "remove"
    MODIFY = "modify"


@dataclass(frozen=True)
class Customization:
    """A single requested change to one ingredient of an item."""

    ingredient_id: str
    action: CustomizationAction
    quantity_g: float | None = None
    multiplier: float | None = None


class InvalidCustomizationError(ValueError):
    """Raised when a customization is missing its action payload."""
