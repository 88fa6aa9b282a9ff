"""
Stockout risk classification and reorder quantity calculation.
"""

import math

from config.config import RiskConfig
from models.enums import StockoutRisk, Trend
from utils.numeric import round_half_up

_DEFAULT_RISK = RiskConfig()


def days_of_stock(current_stock: float, predicted_demand: float, forecast_days: int) -> float:
    """Days the current stock lasts at the forecast daily rate (inf when no demand)."""
    daily_demand = predicted_demand / forecast_days if forecast_days else 0.0
    return current_stock / daily_demand if daily_demand > 0 else math.inf


def assess_stockout_risk(
    current_stock: int,
    min_stock: int,
    predicted_demand: int,
    forecast_days: int,
    config: RiskConfig = _DEFAULT_RISK,
) -> StockoutRisk:
    """
    HIGH:   under a week of stock left, or already below the minimum level.
    MEDIUM: under two weeks of stock left, or less than 1.5x the minimum level.
    """
    coverage = days_of_stock(current_stock, predicted_demand, forecast_days)
    stock_ratio = current_stock / min_stock if min_stock > 0 else 1.0

    if coverage < config.high_risk_days or current_stock < min_stock:
        return StockoutRisk.HIGH
    if coverage < config.medium_risk_days or stock_ratio < config.medium_stock_ratio:
        return StockoutRisk.MEDIUM
    return StockoutRisk.LOW


def calculate_reorder_quantity(
    current_stock: int,
    predicted_demand: int,
    min_stock: int,
    config: RiskConfig = _DEFAULT_RISK,
) -> int:
    """ROQ = (predicted demand - current stock) + safety stock + minimum stock."""
    safety_stock = math.ceil(predicted_demand * config.safety_stock_ratio)
    deficit = predicted_demand - current_stock
    return max(0, round_half_up(deficit + safety_stock + min_stock))


def recommend_action(risk: StockoutRisk, trend: Trend, reorder_qty: int) -> str:
    if risk == StockoutRisk.HIGH:
        return f"Order {reorder_qty} units immediately to avoid stockout."
    if risk == StockoutRisk.MEDIUM:
        return f"Plan to reorder {reorder_qty} units within 1 week."
    if trend == Trend.INCREASING:
        return "Monitor closely. Demand is rising."
    if trend == Trend.DECREASING:
        return "Hold orders. Demand is declining."
    return "Stock levels are adequate for the period."
