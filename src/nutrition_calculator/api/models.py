"""Pydantic models for the calculator HTTP API."""

from uuid import UUID

from pydantic import BaseModel

from nutrition_calculator.domain.entries import FoodEntry
from nutrition_calculator.domain.nutrition import FoodRecord, NutrientSet
from nutrition_calculator.services.calculator import entry_nutrients
from nutrition_calculator.services.entries import FoodEntryList

DISPLAY_DECIMALS = 2


class NutrientsModel(BaseModel):
    """Nutrient amounts, calories in kcal and the rest in grams."""

    protein: float
    carbohydrates: float
    fat: float
    saturated_fat: float
    calories: float
    fiber: float
    sugar: float
    salt: float

    @classmethod
    def from_nutrients(cls, nutrients: NutrientSet) -> "NutrientsModel":
        return cls(**nutrients.rounded(DISPLAY_DECIMALS).as_dict())


class FoodModel(BaseModel):
    """Catalog food with nutrients per 100 g."""

    name: str
    per_100g: NutrientsModel

    @classmethod
    def from_record(cls, record: FoodRecord) -> "FoodModel":
        return cls(
            name=record.name,
            per_100g=NutrientsModel.from_nutrients(record.per_100g),
        )


class FoodListResponse(BaseModel):
    """Catalog listing or search results."""

    foods: list[FoodModel]


class EntryModel(BaseModel):
    """One row of the calculator with its scaled nutrients."""

    id: int
    food_name: str | None
    quantity: float
    nutrients: NutrientsModel

    @classmethod
    def from_entry(cls, entry: FoodEntry) -> "EntryModel":
        return cls(
            id=entry.id,
            food_name=entry.food.name if entry.food else None,
            quantity=entry.quantity,
            nutrients=NutrientsModel.from_nutrients(entry_nutrients(entry)),
        )


class SessionResponse(BaseModel):
    """Full calculator state for a session."""

    session_id: UUID
    entries: list[EntryModel]
    totals: NutrientsModel

    @classmethod
    def from_list(
        cls, session_id: UUID, entry_list: FoodEntryList
    ) -> "SessionResponse":
        return cls(
            session_id=session_id,
            entries=[EntryModel.from_entry(entry) for entry in entry_list.entries],
            totals=NutrientsModel.from_nutrients(entry_list.totals),
        )


class SetFoodRequest(BaseModel):
    """Select a catalog food for an entry, or clear it with null."""

    food_name: str | None = None


class SetQuantityRequest(BaseModel):
    """Set an entry's quantity in grams; out-of-range values are clamped."""

    quantity: float
