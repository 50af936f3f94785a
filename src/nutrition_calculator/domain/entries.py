"""Domain models for the food entry list."""

from dataclasses import dataclass

from nutrition_calculator.domain.nutrition import FoodRecord


@dataclass(frozen=True)
class FoodEntry:
    """A user-added row pairing an optional food with a quantity in grams."""

    id: int
    food: FoodRecord | None = None
    quantity: float = 0.0
