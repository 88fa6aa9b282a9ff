"""
Demand forecasting primitives.

Exponential smoothing:  F(t+1) = alpha * A(t) + (1 - alpha) * F(t)
A higher alpha weights recent observations more; a lower alpha gives a smoother
forecast. Trend is the OLS slope of the most recent points expressed as a
percentage of their mean.
"""

from collections.abc import Sequence
from typing import NamedTuple

import numpy as np

from models.enums import Trend
from utils.numeric import clamp, mean, population_std, round_half_up

__all__ = [
    "SmoothingResult",
    "exponential_smoothing",
    "calculate_trend",
    "calculate_confidence",
    "scale_to_window",
    "simple_moving_average",
    "weighted_moving_average",
]


class SmoothingResult(NamedTuple):
    forecast: int
    trend: Trend


def calculate_trend(data: Sequence[float], threshold_pct: float = 5.0) -> Trend:
    """Classify the least-squares slope of ``data`` against its index."""
    if len(data) < 2:
        return Trend.STABLE

    y = np.asarray(data, dtype=float)
    x = np.arange(len(y), dtype=float)
    x_dev = x - x.mean()
    y_mean = y.mean()

    denominator = float(np.sum(x_dev**2))
    slope = float(np.sum(x_dev * (y - y_mean))) / denominator if denominator else 0.0
    slope_pct = slope / y_mean * 100 if y_mean != 0 else 0.0

    if slope_pct > threshold_pct:
        return Trend.INCREASING
    if slope_pct < -threshold_pct:
        return Trend.DECREASING
    return Trend.STABLE


def exponential_smoothing(
    data: Sequence[float],
    alpha: float = 0.3,
    periods: int = 1,
    trend_window: int = 5,
    threshold_pct: float = 5.0,
    up_multiplier: float = 1.1,
    down_multiplier: float = 0.9,
) -> SmoothingResult:
    """
    Single-pass exponential smoothing with a trend adjustment for ``periods``
    steps ahead. The result is rounded half up and never negative.
    """
    if len(data) == 0:
        return SmoothingResult(0, Trend.STABLE)
    if len(data) == 1:
        return SmoothingResult(max(0, round_half_up(data[0])), Trend.STABLE)

    forecast = float(data[0])
    for actual in data[1:]:
        forecast = alpha * actual + (1 - alpha) * forecast

    trend = calculate_trend(data[-min(trend_window, len(data)):], threshold_pct)
    if trend == Trend.INCREASING:
        multiplier = up_multiplier**periods
    elif trend == Trend.DECREASING:
        multiplier = down_multiplier**periods
    else:
        multiplier = 1.0

    return SmoothingResult(max(0, round_half_up(forecast * multiplier)), trend)


def scale_to_window(demand: float, forecast_days: int, days_per_period: int = 7) -> int:
    """Rescale per-period demand to a forecast window of ``forecast_days``."""
    return round_half_up(demand / days_per_period * forecast_days)


def calculate_confidence(data: Sequence[float]) -> int:
    """
    Confidence (0-95) from data consistency and sample size.

    Base confidence is ``100 - CV`` (coefficient of variation in percent),
    floored at 30, plus one point per observation up to 15.
    """
    if len(data) == 0:
        return 0
    if len(data) < 3:
        return 40

    avg = mean(data)
    cv = population_std(data) / avg * 100 if avg != 0 else 100.0

    confidence = max(30.0, 100.0 - cv) + min(15, len(data))
    return int(clamp(round_half_up(confidence), 30, 95))


def simple_moving_average(data: Sequence[float], window: int = 3) -> int:
    if len(data) == 0:
        return 0
    return round_half_up(mean(data[-min(window, len(data)):]))


def weighted_moving_average(data: Sequence[float], window: int = 5) -> int:
    """Moving average with weights 1..n, most recent point weighted highest."""
    if len(data) == 0:
        return 0
    values = np.asarray(data[-min(window, len(data)):], dtype=float)
    weights = np.arange(1, len(values) + 1, dtype=float)
    return round_half_up(float(np.sum(values * weights) / np.sum(weights)))
