"""Structured logger for observability."""

import logging
from typing import Any, Optional

# Configure root logger with JSON-like structured format
_logger = logging.getLogger("car_dealership_inventory")
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
    action: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'http', 'inventory', 'catalog', 'storage')
        action: What happened (e.g., 'list_all', 'delete')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "component": component,
        "action": action,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_inventory_operation(
    action: str,
    car_id: Optional[str] = None,
    error: Optional[BaseException] = None,
    **kwargs: Any,
) -> None:
    """
    Log an inventory access-layer operation.

    Failures are logged at ERROR with the backend error detail, which is
    not carried in the message surfaced to callers.

    Args:
        action: Operation name
        car_id: Car identifier, when the operation targets one car
        error: Backend error, if the operation failed
        **kwargs: Additional fields
    """
    fields: dict[str, Any] = {}
    if car_id is not None:
        fields["car_id"] = car_id
    if error is not None:
        fields["error_type"] = type(error).__name__
        fields["error"] = str(error)
    fields.update(kwargs)

    log_event(
        component="inventory",
        action=action,
        level=logging.ERROR if error is not None else logging.INFO,
        **fields,
    )


def log_image_removal(
    reference: str,
    path: Optional[str],
    error: Optional[BaseException] = None,
) -> None:
    """
    Log removal of one stored car image.

    Args:
        reference: Image reference as stored on the car
        path: Extracted storage path, or None if the reference had none
        error: Storage error, if removal failed
    """
    if path is None:
        log_event(
            component="storage",
            action="remove_skipped",
            level=logging.WARNING,
            reference=reference,
        )
        return

    if error is not None:
        log_event(
            component="storage",
            action="remove_failed",
            level=logging.WARNING,
            path=path,
            error_type=type(error).__name__,
            error=str(error),
        )
        return

    log_event(component="storage", action="removed", path=path)


def log_catalog_filter(
    action: str,
    filters: dict[str, Any],
    results_count: int,
    **kwargs: Any,
) -> None:
    """
    Log a catalog filter/sort recomputation.

    Args:
        action: What triggered the recomputation
        filters: Active filter values
        results_count: Number of displayed cars
        **kwargs: Additional fields
    """
    log_event(
        component="catalog",
        action=action,
        level=logging.DEBUG,
        catalog_filters=filters,
        catalog_results_count=results_count,
        **kwargs,
    )


# Export logger instance for direct use
logger = _logger
