"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrition_calculator.config import Settings
from nutrition_calculator.containers import AppContainer
from nutrition_calculator.domain.nutrition import FoodRecord, NutrientSet
from nutrition_calculator.services.catalog import CatalogService, FoodCatalogSource
from nutrition_calculator.services.sessions import SessionService


def make_food(name: str, **per_100g: float) -> FoodRecord:
    return FoodRecord(name=name, per_100g=NutrientSet(**per_100g))


LEAN_BEEF = make_food(
    "Lean beef",
    protein=20,
    carbohydrates=0,
    fat=5,
    saturated_fat=1,
    calories=120,
    fiber=0,
    sugar=0,
    salt=0.1,
)
OATS = make_food(
    "Oats",
    protein=16.9,
    carbohydrates=66.3,
    fat=6.9,
    saturated_fat=1.2,
    calories=389,
    fiber=10.6,
    sugar=0,
    salt=0,
)
APPLE = make_food(
    "apple",
    protein=0.3,
    carbohydrates=13.8,
    fat=0.2,
    calories=52,
    fiber=2.4,
    sugar=10.4,
)


@dataclass
class InMemoryFoodCatalog(FoodCatalogSource):
    """In-memory catalog source for tests."""

    foods: list[FoodRecord] = field(
        default_factory=lambda: [OATS, LEAN_BEEF, APPLE]
    )
    loads: int = 0

    def load_foods(self) -> list[FoodRecord]:
        self.loads += 1
        return list(self.foods)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", search_limit=10, max_sessions=50)


@pytest.fixture
def catalog_service() -> CatalogService:
    return CatalogService(InMemoryFoodCatalog())


@pytest.fixture
def container(settings: Settings, catalog_service: CatalogService) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog_service=catalog_service,
        session_service=SessionService(max_sessions=settings.max_sessions),
    )
