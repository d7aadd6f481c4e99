from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.application.models import InsightRules  # noqa: E402
from src.domain.entities.order import Order, OrderStatus  # noqa: E402
from src.domain.services.campaign_composer import CampaignComposer  # noqa: E402
from src.infrastructure.services.random_source import SeededRandomSource  # noqa: E402


class FixedRandomSource:
    """Random source returning a scripted sequence of values, cycling."""

    def __init__(self, *values: float) -> None:
        self._values: Sequence[float] = values or (0.0,)
        self._index = 0
        self.calls = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        self.calls += 1
        return value


OrderFactory = Callable[..., Order]


@pytest.fixture()
def make_order() -> OrderFactory:
    counter = {"value": 0}

    def _make(
        total: float = 100.0,
        hour: int = 12,
        status: OrderStatus = OrderStatus.COMPLETED,
        created_at: datetime | None = None,
    ) -> Order:
        counter["value"] += 1
        return Order(
            id=f"order-{counter['value']}",
            created_at=created_at or datetime(2026, 3, 10, hour, 15),
            total=total,
            status=status,
        )

    return _make


@pytest.fixture()
def sample_orders(make_order: OrderFactory) -> List[Order]:
    return [
        make_order(total=40.0, hour=12),
        make_order(total=55.0, hour=19),
        make_order(total=35.0, hour=19),
        make_order(total=60.0, hour=20, status=OrderStatus.CANCELLED),
        make_order(total=45.0, hour=19),
    ]


@pytest.fixture()
def insight_rules() -> InsightRules:
    return InsightRules()


@pytest.fixture()
def fixed_random() -> FixedRandomSource:
    return FixedRandomSource(0.0)


@pytest.fixture()
def composer(fixed_random: FixedRandomSource) -> CampaignComposer:
    return CampaignComposer(random_source=fixed_random)


@pytest.fixture()
def seeded_composer() -> CampaignComposer:
    return CampaignComposer(random_source=SeededRandomSource(seed=42))
