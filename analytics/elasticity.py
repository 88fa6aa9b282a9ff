"""
Price elasticity of demand (PED) estimation.

    PED = %change in quantity / %change in price

using the midpoint method, where each percentage change is taken relative to
the average of the two observations:

    %dQ = (Q2 - Q1) / ((Q2 + Q1) / 2) * 100
    %dP = (P2 - P1) / ((P2 + P1) / 2) * 100

|PED| > 1 means demand reacts strongly to price (elastic), |PED| < 1 means it
barely reacts (inelastic).
"""

import logging
from collections.abc import Sequence
from datetime import date

from models.enums import ElasticityType
from models.pricing import ElasticityEstimate, PricePoint
from utils.numeric import clamp, mean, population_std, round_half_up

logger = logging.getLogger(__name__)

# Fallbacks when the history cannot support an estimate.
INSUFFICIENT_DATA = ElasticityEstimate(elasticity=-1.0, confidence=30)
NO_PRICE_VARIATION = ElasticityEstimate(elasticity=-1.2, confidence=40)


def _chronological(points: Sequence[PricePoint]) -> list[PricePoint]:
    # Undated points keep their position relative to each other, ahead of dated ones.
    return sorted(points, key=lambda p: p.sale_date or date.min)


def midpoint_elasticity(previous: PricePoint, current: PricePoint) -> float | None:
    """PED between two consecutive observations, or None if the price did not move."""
    if previous.price == current.price:
        return None

    avg_quantity = (current.quantity + previous.quantity) / 2
    avg_price = (current.price + previous.price) / 2

    quantity_change = (
        (current.quantity - previous.quantity) / avg_quantity * 100 if avg_quantity else 0.0
    )
    price_change = (current.price - previous.price) / avg_price * 100 if avg_price else 0.0
    if price_change == 0:
        return None
    return quantity_change / price_change


def calculate_price_elasticity(points: Sequence[PricePoint]) -> ElasticityEstimate:
    """
    Average midpoint PED across every consecutive price change in ``points``.

    Confidence starts from the consistency of the individual estimates
    (``100 - CV * 50`` clamped to [30, 95]) and earns two points per estimate,
    up to twenty, capped at 95.
    """
    if len(points) < 2:
        return INSUFFICIENT_DATA

    ordered = _chronological(points)
    samples: list[float] = []
    for previous, current in zip(ordered, ordered[1:]):
        ped = midpoint_elasticity(previous, current)
        if ped is not None:
            samples.append(ped)

    if not samples:
        logger.debug("No price variation in history; using default elasticity")
        return NO_PRICE_VARIATION

    avg = mean(samples)
    cv = population_std(samples) / abs(avg) if avg != 0 else 1.0

    confidence = clamp(100 - cv * 50, 30, 95)
    confidence = min(95, confidence + min(20, len(samples) * 2))
    return ElasticityEstimate(
        elasticity=avg,
        confidence=round_half_up(confidence),
        sample_count=len(samples),
    )


def classify_elasticity(elasticity: float) -> ElasticityType:
    magnitude = abs(elasticity)
    if magnitude > 1.1:
        return ElasticityType.ELASTIC
    if magnitude < 0.9:
        return ElasticityType.INELASTIC
    return ElasticityType.UNIT_ELASTIC
