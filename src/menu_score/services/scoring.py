"""Health score evaluation."""

import math

from menu_score.domain.nutrition import NutritionData
from menu_score.domain.scoring import (
    ComponentScores,
    ReferenceSet,
    ScoreBreakdown,
    ScoreProfile,
)

DEFAULT_SCORE_PROFILE = ScoreProfile(
    id="default",
    name="Default Profile",
    calories_weight=0.20,
    protein_weight=0.15,
    carbs_weight=0.15,
    fat_weight=0.15,
    sodium_weight=0.15,
    fiber_weight=0.10,
    sugar_weight=0.10,
    is_default=True,
)

# Per-meal values are roughly a third of the daily ones.
REFERENCE_VALUES: dict[ReferenceSet, NutritionData] = {
    ReferenceSet.MEAL: NutritionData(
        calories=667,
        protein=17,
        carbs=83,
        fat=22,
        sodium=767,
        fiber=8,
        sugar=17,
    ),
    ReferenceSet.DAILY: NutritionData(
        calories=2000,
        protein=50,
        carbs=250,
        fat=65,
        sodium=2300,
        fiber=25,
        sugar=50,
    ),
}

EMPTY_MEAL_SCORE = 50
_NEUTRAL_COMPONENT = 50.0
_MAX_RATIO = 2.0

_SCORE_BADGES = (
    (80, "Excellent"),
    (70, "Good"),
    (50, "Fair"),
    (30, "Poor"),
)
_SCORE_TIERS = (
    (70, "green"),
    (50, "gold"),
)


def normalize(value: float, reference: float, higher_is_better: bool) -> float:
    """Map a nutrient amount to 0-100 relative to its reference value."""
    if reference == 0:
        return _NEUTRAL_COMPONENT
    ratio = value / reference
    if higher_is_better:
        return min(100.0, max(0.0, ratio * 100.0))
    if ratio <= 0:
        return 100.0
    if ratio >= _MAX_RATIO:
        return 0.0
    # Anything at or under the reference keeps the full component.
    return min(100.0, max(0.0, 100.0 - (ratio - 1.0) * 50.0))


def score_breakdown(
    nutrition: NutritionData,
    profile: ScoreProfile = DEFAULT_SCORE_PROFILE,
    reference_set: ReferenceSet = ReferenceSet.MEAL,
) -> ScoreBreakdown:
    """Return each normalized component and the weighted score."""
    reference = REFERENCE_VALUES[ReferenceSet(reference_set)]
    components = ComponentScores(
        calories=normalize(nutrition.calories, reference.calories, False),
        protein=normalize(nutrition.protein, reference.protein, True),
        carbs=normalize(nutrition.carbs, reference.carbs, False),
        fat=normalize(nutrition.fat, reference.fat, False),
        sodium=normalize(nutrition.sodium, reference.sodium, False),
        fiber=normalize(nutrition.fiber, reference.fiber, True),
        sugar=normalize(nutrition.sugar, reference.sugar, False),
    )
    weighted = (
        components.calories * profile.calories_weight
        + components.protein * profile.protein_weight
        + components.carbs * profile.carbs_weight
        + components.fat * profile.fat_weight
        + components.sodium * profile.sodium_weight
        + components.fiber * profile.fiber_weight
        + components.sugar * profile.sugar_weight
    )
    # Round half up; weights that do not sum to 1 can leave the range.
    score = min(100, max(0, math.floor(weighted + 0.5)))
    return ScoreBreakdown(score=score, components=components)


def compute_score(
    nutrition: NutritionData,
    profile: ScoreProfile = DEFAULT_SCORE_PROFILE,
    reference_set: ReferenceSet = ReferenceSet.MEAL,
) -> int:
    """Compute the 0-100 health score for a nutrition profile."""
    return score_breakdown(nutrition, profile, reference_set).score


def score_badge(score: int) -> str:
    """Return a label for a score."""
    for threshold, badge in _SCORE_BADGES:
        if score >= threshold:
            return badge
    return "Very Poor"


def score_tier(score: int) -> str:
    """Return the color tier used to display a score."""
    for threshold, tier in _SCORE_TIERS:
        if score >= threshold:
            return tier
    return "red"
