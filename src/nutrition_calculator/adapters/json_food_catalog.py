"""Food catalog backed by a static JSON file."""

import json
import math
from dataclasses import dataclass
from pathlib import Path

from nutrition_calculator.domain.nutrition import (
    NUTRIENT_FIELDS,
    FoodRecord,
    NutrientSet,
)
from nutrition_calculator.services.catalog import CatalogError, FoodCatalogSource

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "foods.json"

# JSON keys use the catalog's camelCase naming.
_JSON_KEYS = {
    "protein": "protein",
    "carbohydrates": "carbohydrates",
    "fat": "fat",
    "saturated_fat": "saturatedFat",
    "calories": "calories",
    "fiber": "fiber",
    "sugar": "sugar",
    "salt": "salt",
}


@dataclass
class JsonFoodCatalog(FoodCatalogSource):
    """Loads food records from a JSON array of objects."""

    path: Path = DEFAULT_CATALOG_PATH

    def load_foods(self) -> list[FoodRecord]:
        """Read and validate every record in the file."""
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Invalid catalog JSON in {self.path}: {exc}") from exc
        if not isinstance(payload, list):
            raise CatalogError(f"Catalog {self.path} must contain a JSON array")
        return [parse_food(item) for item in payload]


def parse_food(item: object) -> FoodRecord:
    """Build a food record from one catalog object."""
    if not isinstance(item, dict):
        raise CatalogError(f"Catalog entry must be an object, got {item!r}")
    name = item.get("name")
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(f"Catalog entry has no name: {item!r}")
    values: dict[str, float] = {}
    for field_name in NUTRIENT_FIELDS:
        key = _JSON_KEYS[field_name]
        raw = item.get(key)
        if isinstance(raw, bool) or not isinstance(raw, int | float):
            raise CatalogError(f"{name}: {key} must be a number, got {raw!r}")
        value = float(raw)
        if not math.isfinite(value) or value < 0:
            raise CatalogError(f"{name}: {key} must be non-negative, got {raw!r}")
        values[field_name] = value
    return FoodRecord(name=name, per_100g=NutrientSet(**values))
