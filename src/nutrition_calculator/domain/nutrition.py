"""Nutrition domain models."""

from dataclasses import dataclass, fields

NUTRIENT_FIELDS = (
    "protein",
    "carbohydrates",
    "fat",
    "saturated_fat",
    "calories",
    "fiber",
    "sugar",
    "salt",
)


@dataclass(frozen=True)
class NutrientSet:
    """Amounts for the eight tracked nutrients.

    Calories are in kcal, everything else in grams.
    """

    protein: float = 0.0
    carbohydrates: float = 0.0
    fat: float = 0.0
    saturated_fat: float = 0.0
    calories: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    salt: float = 0.0

    def __add__(self, other: "NutrientSet") -> "NutrientSet":
        if not isinstance(other, NutrientSet):
            return NotImplemented
        return NutrientSet(
            **{
                name: getattr(self, name) + getattr(other, name)
                for name in NUTRIENT_FIELDS
            }
        )

    def scaled(self, factor: float) -> "NutrientSet":
        """Return every amount multiplied by factor."""
        return NutrientSet(
            **{name: getattr(self, name) * factor for name in NUTRIENT_FIELDS}
        )

    def rounded(self, ndigits: int = 2) -> "NutrientSet":
        """Return amounts rounded for display."""
        return NutrientSet(
            **{name: round(getattr(self, name), ndigits) for name in NUTRIENT_FIELDS}
        )

    def as_dict(self) -> dict[str, float]:
        """Return amounts keyed by nutrient name."""
        return {field.name: getattr(self, field.name) for field in fields(self)}


NutritionTotals = NutrientSet

ZERO_NUTRIENTS = NutrientSet()


@dataclass(frozen=True)
class FoodRecord:
    """Static reference entry for a named food, with nutrients per 100 g."""

    name: str
    per_100g: NutrientSet

    @property
    def protein(self) -> float:
        return self.per_100g.protein

    @property
    def carbohydrates(self) -> float:
        return self.per_100g.carbohydrates

    @property
    def fat(self) -> float:
        return self.per_100g.fat

    @property
    def saturated_fat(self) -> float:
        return self.per_100g.saturated_fat

    @property
    def calories(self) -> float:
        return self.per_100g.calories

    @property
    def fiber(self) -> float:
        return self.per_100g.fiber

    @property
    def sugar(self) -> float:
        return self.per_100g.sugar

    @property
    def salt(self) -> float:
        return self.per_100g.salt
