"""Structured logger setup shared across handlers and services."""

import logging

from pythonjsonlogger import jsonlogger

from config.settings import Settings


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Context belongs in ``extra={...}`` so it lands as top-level JSON keys.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    level_name = Settings.from_environment().log_level
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    logger.propagate = False
    return logger
