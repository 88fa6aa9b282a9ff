"""
Revenue-maximizing price and elasticity-driven demand simulation.
"""

import logging
import math

from config.config import PricingConfig
from utils.numeric import clamp, round_half_up

logger = logging.getLogger(__name__)

_DEFAULT_PRICING = PricingConfig()


def calculate_optimal_price(
    current_price: float,
    elasticity: float,
    cost_price: float,
    min_margin: float | None = None,
    config: PricingConfig = _DEFAULT_PRICING,
) -> int:
    """
    Optimal price for revenue maximization:  P* = P * PED / (PED + 1)

    Near-zero or positive elasticity gets a flat markup instead. The result is
    kept above ``cost * (1 + min_margin)`` and within
    [lower_bound_ratio, upper_bound_ratio] of the current price.
    """
    if min_margin is None:
        min_margin = config.min_margin

    if elasticity >= config.inelastic_threshold:
        return round_half_up(current_price * config.inelastic_markup)

    denominator = elasticity + 1
    if denominator == 0:
        # Multiplier diverges to -inf; the margin floor takes over.
        optimal = -math.inf
    else:
        optimal = current_price * (elasticity / denominator)

    optimal = max(optimal, cost_price * (1 + min_margin))
    optimal = clamp(
        optimal,
        current_price * config.lower_bound_ratio,
        current_price * config.upper_bound_ratio,
    )
    return round_half_up(optimal)


def simulate_demand(
    current_price: float,
    current_demand: float,
    new_price: float,
    elasticity: float,
) -> int:
    """Q2 = Q1 * (1 + PED * (P2 - P1) / P1), never negative."""
    if current_price <= 0:
        logger.debug("Non-positive current price; demand left unchanged")
        return max(0, round_half_up(current_demand))
    price_change = (new_price - current_price) / current_price
    new_demand = current_demand * (1 + elasticity * price_change)
    return max(0, round_half_up(new_demand))
