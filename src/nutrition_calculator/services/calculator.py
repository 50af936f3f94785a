"""Nutrition scaling and totals aggregation."""

import math
from collections.abc import Iterable

from nutrition_calculator.domain.entries import FoodEntry
from nutrition_calculator.domain.nutrition import (
    ZERO_NUTRIENTS,
    FoodRecord,
    NutrientSet,
    NutritionTotals,
)

MIN_QUANTITY_G = 0.0
MAX_QUANTITY_G = 5000.0
REFERENCE_QUANTITY_G = 100.0


def clamp_quantity(quantity: float) -> float:
    """Clamp a quantity in grams to the accepted range."""
    if math.isnan(quantity):
        return MIN_QUANTITY_G
    return min(max(float(quantity), MIN_QUANTITY_G), MAX_QUANTITY_G)


def scale(record: FoodRecord, quantity: float) -> NutrientSet:
    """Return the nutrients of `quantity` grams of a food."""
    grams = clamp_quantity(quantity)
    return record.per_100g.scaled(grams / REFERENCE_QUANTITY_G)


def entry_nutrients(entry: FoodEntry) -> NutrientSet:
    """Return the scaled nutrients of an entry, zero when no food is selected."""
    if entry.food is None:
        return ZERO_NUTRIENTS
    return scale(entry.food, entry.quantity)


def aggregate(entries: Iterable[FoodEntry]) -> NutritionTotals:
    """Sum scaled nutrients across entries that have a food assigned."""
    total = ZERO_NUTRIENTS
    for entry in entries:
        if entry.food is None:
            continue
        total = total + scale(entry.food, entry.quantity)
    return total
