"""Structured logger for observability."""

import logging
from typing import Any, Optional

_logger = logging.getLogger("vehicles_api")
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


def log_event(
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'http', 'car_service', 'pricing')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {"component": component}
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_car_operation(
    operation: str,
    car_id: Optional[int] = None,
    **kwargs: Any,
) -> None:
    """
    Log a car aggregate operation.

    Args:
        operation: Operation name (create, find, list, update, delete)
        car_id: Car identifier, when the operation targets one car
        **kwargs: Additional fields
    """
    fields: dict[str, Any] = {"operation": operation}
    if car_id is not None:
        fields["car_id"] = car_id
    fields.update(kwargs)

    log_event(component="car_service", **fields)


def log_collaborator_call(
    collaborator: str,
    outcome: str,
    **kwargs: Any,
) -> None:
    """
    Log the outcome of a call to an external collaborator.

    Failed outcomes are logged at WARNING level, everything else at INFO.

    Args:
        collaborator: Collaborator name ('pricing', 'maps', 'discovery')
        outcome: Outcome label ('ok', 'not_found', 'timeout', 'error', 'cache_hit')
        **kwargs: Additional fields
    """
    level = logging.WARNING if outcome in ("timeout", "error") else logging.INFO
    log_event(
        component=collaborator,
        level=level,
        collaborator_outcome=outcome,
        **kwargs,
    )


logger = _logger
