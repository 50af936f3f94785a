"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrition_calculator.adapters.json_food_catalog import (
    DEFAULT_CATALOG_PATH,
    JsonFoodCatalog,
)
from nutrition_calculator.config import Settings
from nutrition_calculator.services.catalog import CatalogService
from nutrition_calculator.services.sessions import SessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    session_service: SessionService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_source = JsonFoodCatalog(
        path=resolved_settings.catalog_path or DEFAULT_CATALOG_PATH
    )
    catalog_service = CatalogService(
        source=catalog_source,
        default_limit=resolved_settings.search_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        session_service=SessionService(max_sessions=resolved_settings.max_sessions),
    )
