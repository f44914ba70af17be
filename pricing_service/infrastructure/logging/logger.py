"""Structured logger for observability."""

import logging
from typing import Any

_logger = logging.getLogger("pricing_service")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(component: str, level: int = logging.INFO, **kwargs: Any) -> None:
    """
    Log a structured event as key=value pairs.

    Args:
        component: Component name (e.g., 'http', 'seed')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {"component": component}
    fields.update(kwargs)
    _logger.log(level, " | ".join(f"{k}={v!r}" for k, v in fields.items()))


logger = _logger
