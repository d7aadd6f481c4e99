"""
Domain Service - Demand Forecaster

Fits an ordinary-least-squares line to a short series of per-period volumes
(daily order counts or revenue) and extrapolates one period ahead. The
confidence score is the complement of the series' coefficient of variation,
and the trend label compares the fitted slope with a fraction of the mean.
"""

import math
from typing import Sequence, Tuple

import numpy as np

from src.domain.entities.errors import InvalidArgumentError
from src.domain.entities.forecast import DemandTrend, PredictionResult
from src.domain.services.input_validator import validate_series

MIN_SERIES_LENGTH = 3
TREND_THRESHOLD_RATIO = 0.05


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def fit_linear_trend(values: np.ndarray) -> Tuple[float, float]:
    """Return ``(slope, intercept)`` of the OLS line through ``(i, values[i])``."""
    x = np.arange(values.size, dtype=float)
    x_mean = x.mean()
    y_mean = values.mean()

    denominator = float(np.sum((x - x_mean) ** 2))
    if denominator == 0.0:
        return 0.0, float(y_mean)

    slope = float(np.sum((x - x_mean) * (values - y_mean)) / denominator)
    intercept = float(y_mean - slope * x_mean)
    return slope, intercept


def classify_trend(slope: float, mean: float, ratio: float) -> DemandTrend:
    threshold = mean * ratio
    if slope > threshold:
        return DemandTrend.UP
    if slope < -threshold:
        return DemandTrend.DOWN
    return DemandTrend.STABLE


def compute_confidence(values: np.ndarray) -> int:
    """Map the coefficient of variation onto an integer score in [0, 100].

    Uses the population standard deviation. A zero mean is replaced by 1 so
    an all-zero series scores 100 instead of dividing by zero. Dispersion too
    large to represent as a float scores 0.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        mean = float(values.mean())
        std_dev = float(values.std(ddof=0))
    cv = std_dev / (mean or 1.0)
    if not math.isfinite(cv):
        return 0
    return max(0, min(100, _round_half_up((1.0 - cv) * 100.0)))


def predict_demand(
    series: Sequence[float],
    *,
    min_length: int = MIN_SERIES_LENGTH,
    trend_threshold_ratio: float = TREND_THRESHOLD_RATIO,
) -> PredictionResult:
    """Forecast the next period of ``series``.

    Args:
        series: Chronological non-negative values, one per time bucket.
        min_length: Shorter series get a zero-confidence ``stable`` answer.
        trend_threshold_ratio: Fraction of the mean the slope must exceed
            to be labelled ``up`` or ``down``.

    Returns:
        A fresh ``PredictionResult``; the input is never modified.

    Raises:
        InvalidArgumentError: If a value is negative, NaN or infinite, or the
            values are so large that the fitted line overflows.
    """
    validate_series(series)

    if len(series) < max(min_length, 1):
        return PredictionResult.insufficient_data()

    values = np.asarray(series, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        slope, intercept = fit_linear_trend(values)
        mean = float(values.mean())
        next_value = slope * values.size + intercept

    if not (math.isfinite(mean) and math.isfinite(next_value)):
        raise InvalidArgumentError(
            "Historical series is invalid.",
            errors=["Series values are too large to forecast."],
        )

    return PredictionResult(
        prediction=max(0, _round_half_up(next_value)),
        confidence=compute_confidence(values),
        trend=classify_trend(slope, mean, trend_threshold_ratio),
    )
