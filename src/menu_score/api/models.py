"""Pydantic models for menu API request bodies."""

from pydantic import BaseModel, ConfigDict, Field

from menu_score.domain.customizations import Customization, CustomizationAction
from menu_score.domain.scoring import ReferenceSet


class CustomizationPayload(BaseModel):
    """Single ingredient edit."""

    model_config = ConfigDict(allow_inf_nan=False)

    ingredient_id: str
    action: CustomizationAction
    quantity_g: float | None = None
    multiplier: float | None = None

    def to_domain(self) -> Customization:
        """Convert to the domain record."""
        return Customization(
            ingredient_id=self.ingredient_id,
            action=self.action,
            quantity_g=self.quantity_g,
            multiplier=self.multiplier,
        )


class CustomizeRequest(BaseModel):
    """Body for item customization."""

    customizations: list[CustomizationPayload] = Field(default_factory=list)


class ScoreRequest(BaseModel):
    """Body for scoring a customized item."""

    customizations: list[CustomizationPayload] = Field(default_factory=list)
    score_profile_id: str | None = None
    reference_set: ReferenceSet | None = None


class TrayEntryPayload(BaseModel):
    """One item on a meal tray."""

    model_config = ConfigDict(allow_inf_nan=False)

    item_id: str
    customizations: list[CustomizationPayload] = Field(default_factory=list)
    quantity: float = Field(default=1, gt=0)


class TrayRequest(BaseModel):
    """Body for scoring a meal tray."""

    items: list[TrayEntryPayload] = Field(default_factory=list)
    score_profile_id: str | None = None
    reference_set: ReferenceSet | None = None
