"""Domain service helpers for validating numeric input at the boundary."""

import math
from typing import List, Sequence

from src.domain.entities.errors import InvalidArgumentError
from src.domain.entities.order import Order


def _check_amount(value: float, label: str, errors: List[str]) -> None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        errors.append(f"{label} must be a number.")
        return

    if math.isnan(number):
        errors.append(f"{label} must not be NaN.")
    elif math.isinf(number):
        errors.append(f"{label} must be finite.")
    elif number < 0:
        errors.append(f"{label} must not be negative.")


def validate_series(series: Sequence[float]) -> None:
    """Validate a historical series before fitting it.

    Raises:
        InvalidArgumentError: If any value is negative, NaN or infinite.
    """

    errors: List[str] = []
    for idx, value in enumerate(series):
        _check_amount(value, f"Series value #{idx}", errors)

    if errors:
        raise InvalidArgumentError("Historical series is invalid.", errors=errors)


def validate_orders(orders: Sequence[Order]) -> None:
    """Validate order totals before aggregating them.

    Raises:
        InvalidArgumentError: If any total is negative, NaN or infinite.
    """

    errors: List[str] = []
    for order in orders:
        _check_amount(order.total, f"Order {order.id} total", errors)

    if errors:
        raise InvalidArgumentError("Order collection is invalid.", errors=errors)
