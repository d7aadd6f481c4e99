"""Turns order snapshots into the daily revenue series the forecaster consumes."""

from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from src.domain.entities.order import Order
from src.domain.services.insight_generator import to_local

DEMO_REVENUE_SERIES = (1200.0, 1350.0, 1100.0, 1500.0, 1800.0, 1600.0, 1900.0)


def aggregate_daily_revenue(
    orders: Sequence[Order], days: int = 7, today: Optional[date] = None
) -> List[float]:
    """Sum order totals per local calendar day over the window ending ``today``.

    The result has exactly ``days`` buckets, oldest first. Days without
    orders are zero and orders outside the window are ignored.
    """
    if days <= 0:
        return []

    end = today or date.today()
    window = [end - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    buckets: Dict[date, float] = {day: 0.0 for day in window}

    for order in orders:
        day = to_local(order.created_at).date()
        if day in buckets:
            buckets[day] += float(order.total)

    return [buckets[day] for day in window]
