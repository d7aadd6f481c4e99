"""Domain entities for the order snapshots consumed by the insights rules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class OrderStatus(str, Enum):
    """Lifecycle status of a partner order."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERING = "delivering"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REJECTED = "rejected"
    RETURNED = "returned"
    PARTIALLY_RETURNED = "partially_returned"


@dataclass(frozen=True, slots=True)
class Order:
    """Read-only snapshot of an order owned by the order-management side."""

    id: str
    created_at: datetime
    total: float
    status: OrderStatus = OrderStatus.PENDING

    @property
    def is_cancelled(self) -> bool:
        return self.status is OrderStatus.CANCELLED
