"""Read-only food catalog lookups."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from nutrition_calculator.domain.nutrition import FoodRecord

_logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog data is malformed."""


class FoodCatalogSource(Protocol):
    """Source of static food reference data."""

    def load_foods(self) -> list[FoodRecord]:
        """Return every food record in the catalog."""


@dataclass
class CatalogService:
    """Indexed, sorted view over a static food catalog."""

    source: FoodCatalogSource
    default_limit: int = 20
    _by_name: dict[str, FoodRecord] = field(init=False, repr=False)
    _sorted: list[FoodRecord] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        foods = self.source.load_foods()
        by_name: dict[str, FoodRecord] = {}
        for food in foods:
            if food.name in by_name:
                raise CatalogError(f"Duplicate food name: {food.name!r}")
            by_name[food.name] = food
        self._by_name = by_name
        self._sorted = sorted(foods, key=_sort_key)
        _logger.info("Food catalog loaded: foods=%s", len(foods))

    def find(self, name: str) -> FoodRecord | None:
        """Return the food with exactly this name, if present."""
        return self._by_name.get(name)

    def list_sorted(self) -> list[FoodRecord]:
        """Return all foods ordered by name."""
        return list(self._sorted)

    def search(self, query: str | None, limit: int | None = None) -> list[FoodRecord]:
        """Filter foods by a case-insensitive name fragment."""
        resolved_limit = self.default_limit if limit is None else limit
        needle = (query or "").strip().casefold()
        if not needle:
            return self._sorted[:resolved_limit]
        matches = [food for food in self._sorted if needle in food.name.casefold()]
        return matches[:resolved_limit]

    def __len__(self) -> int:
        return len(self._sorted)


def _sort_key(food: FoodRecord) -> tuple[str, str]:
    return food.name.casefold(), food.name
