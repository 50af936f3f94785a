"""ASGI entrypoint for the nutrition calculator API."""

from nutrition_calculator.api.app import create_app
from nutrition_calculator.app_logging import configure_logging
from nutrition_calculator.config import Settings
from nutrition_calculator.containers import build_container

settings = Settings()
configure_logging(settings.log_level)
app = create_app(build_container(settings))
