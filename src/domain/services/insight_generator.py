"""
Domain Service - Insight Generator

Rule pipeline turning a snapshot of orders into operational suggestions.
Rules run in a fixed order (peak hour, average ticket, cancellation rate)
and each one independently decides whether to emit its message.
"""

from datetime import datetime
from typing import Dict, List, Sequence

from src.domain.entities.order import Order
from src.domain.services.input_validator import validate_orders

EMPTY_ORDERS_MESSAGE = "Comece a vender para receber insights!"

LOW_TICKET_THRESHOLD = 50.0
HIGH_TICKET_THRESHOLD = 150.0
CANCELLATION_RATE_THRESHOLD = 0.10


def to_local(moment: datetime) -> datetime:
    """Aware datetimes are converted to the host timezone; naive ones are local."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone()


def group_by_hour(orders: Sequence[Order]) -> Dict[int, int]:
    """Count orders per local hour of day, keyed in first-seen order."""
    counts: Dict[int, int] = {}
    for order in orders:
        hour = to_local(order.created_at).hour
        counts[hour] = counts.get(hour, 0) + 1
    return counts


def find_peak_hour(hourly_counts: Dict[int, int]) -> int:
    # max() keeps the first maximal item, so ties go to the first-seen hour.
    return max(hourly_counts.items(), key=lambda item: item[1])[0]


def _peak_hour_suggestion(orders: Sequence[Order]) -> str:
    peak_hour = find_peak_hour(group_by_hour(orders))
    return (
        f"Horário de pico detectado às {peak_hour}h. "
        "Considere reforçar a equipe neste horário."
    )


def _ticket_suggestion(
    orders: Sequence[Order], low_threshold: float, high_threshold: float
) -> List[str]:
    average_ticket = sum(float(order.total) for order in orders) / len(orders)
    if average_ticket < low_threshold:
        return [
            f"Seu ticket médio está abaixo de R$ {low_threshold:.0f}. "
            "Crie combos para aumentar o valor por pedido."
        ]
    if average_ticket > high_threshold:
        return [
            "Ticket médio alto! Ofereça programas de fidelidade "
            "para reter esses clientes VIP."
        ]
    return []


def _cancellation_suggestion(orders: Sequence[Order], rate_threshold: float) -> List[str]:
    cancelled_count = sum(1 for order in orders if order.is_cancelled)
    if cancelled_count > len(orders) * rate_threshold:
        return [
            f"Taxa de cancelamento alta ({cancelled_count} pedidos). "
            "Verifique seu estoque e tempo de resposta."
        ]
    return []


def generate_optimizations(
    orders: Sequence[Order],
    *,
    low_ticket_threshold: float = LOW_TICKET_THRESHOLD,
    high_ticket_threshold: float = HIGH_TICKET_THRESHOLD,
    cancellation_rate_threshold: float = CANCELLATION_RATE_THRESHOLD,
) -> List[str]:
    """Build the ordered suggestion list for ``orders``.

    Raises:
        InvalidArgumentError: If an order total is negative, NaN or infinite.
    """
    if not orders:
        return [EMPTY_ORDERS_MESSAGE]

    validate_orders(orders)

    suggestions = [_peak_hour_suggestion(orders)]
    suggestions.extend(
        _ticket_suggestion(orders, low_ticket_threshold, high_ticket_threshold)
    )
    suggestions.extend(_cancellation_suggestion(orders, cancellation_rate_threshold))
    return suggestions
