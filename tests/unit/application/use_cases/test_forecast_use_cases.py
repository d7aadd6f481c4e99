from __future__ import annotations

import pytest

from src.application.models import InsightRules
from src.application.use_cases.forecast_use_cases import PredictDemandUseCase
from src.domain.entities.errors import InvalidArgumentError
from src.domain.entities.forecast import DemandTrend


def test_predict_demand_use_case_returns_dto(insight_rules) -> None:
    dto = PredictDemandUseCase(insight_rules).execute([10, 20, 30, 40, 50])

    assert dto.prediction == 60
    assert dto.confidence == 53
    assert dto.trend is DemandTrend.UP


def test_predict_demand_use_case_honours_rules() -> None:
    rules = InsightRules(min_series_length=6)

    dto = PredictDemandUseCase(rules).execute([10, 20, 30, 40, 50])

    assert dto.prediction == 0
    assert dto.confidence == 0
    assert dto.trend is DemandTrend.STABLE


def test_predict_demand_use_case_propagates_validation_errors(insight_rules) -> None:
    with pytest.raises(InvalidArgumentError):
        PredictDemandUseCase(insight_rules).execute([1, -1, 2])
