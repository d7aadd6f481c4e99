from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

from src.domain.entities.errors import DomainError, InvalidArgumentError
from src.domain.entities.forecast import DemandTrend, PredictionResult
from src.domain.entities.order import Order, OrderStatus


def test_insufficient_data_result() -> None:
    result = PredictionResult.insufficient_data()
    assert result == PredictionResult(0, 0, DemandTrend.STABLE)


def test_prediction_result_is_immutable() -> None:
    result = PredictionResult(prediction=10, confidence=80, trend=DemandTrend.UP)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.prediction = 11  # type: ignore[misc]


def test_order_is_cancelled_flag() -> None:
    order = Order(
        id="1",
        created_at=datetime(2026, 1, 1, 10),
        total=10.0,
        status=OrderStatus.CANCELLED,
    )
    assert order.is_cancelled is True
    assert Order(id="2", created_at=datetime(2026, 1, 1), total=1.0).is_cancelled is False


def test_invalid_argument_error_carries_error_list() -> None:
    error = InvalidArgumentError("Series is invalid.", errors=["a", "b"])
    assert isinstance(error, DomainError)
    assert error.message == "Series is invalid."
    assert error.errors == ["a", "b"]
    assert error.details == {"errors": ["a", "b"]}
