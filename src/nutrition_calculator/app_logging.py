"""Logging configuration helpers."""

import logging

LOGGER_NAME = "nutrition_calculator"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Set the package log level and install one stream handler.

    Repeated calls only adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
