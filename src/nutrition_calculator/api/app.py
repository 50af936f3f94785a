"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from nutrition_calculator.api.calculator import router as calculator_router
from nutrition_calculator.api.pages import router as pages_router
from nutrition_calculator.app_logging import configure_logging
from nutrition_calculator.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Nutrition Calculator")
    app.state.container = container

    app.include_router(pages_router)
    app.include_router(calculator_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info(
        "Nutrition calculator ready: environment=%s foods=%s",
        container.settings.environment,
        len(container.catalog_service),
    )
    return app
