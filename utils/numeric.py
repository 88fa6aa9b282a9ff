"""
Numeric helpers shared by the forecasting and pricing pipelines.
"""

import math

import numpy as np

__all__ = ["round_half_up", "clamp", "mean", "population_std"]


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2),
    unlike the built-in round(), which rounds halves to even.
    """
    if math.isinf(value) or math.isnan(value):
        raise ValueError(f"Cannot round non-finite value {value!r}")
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def mean(values) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def population_std(values) -> float:
    """Standard deviation with ddof=0 (divides by n)."""
    if len(values) == 0:
        return 0.0
    return float(np.std(np.asarray(values, dtype=float)))
