"""Inventory analytics engine: demand forecasting and pricing intelligence"""

from .timeseries import aggregate_sales
from .forecasting import (
    calculate_confidence,
    calculate_trend,
    exponential_smoothing,
    scale_to_window,
    simple_moving_average,
    weighted_moving_average,
)
from .stock_risk import (
    assess_stockout_risk,
    calculate_reorder_quantity,
    recommend_action,
)
from .insights import generate_insights, summarize
from .elasticity import calculate_price_elasticity, classify_elasticity
from .optimal_price import calculate_optimal_price, simulate_demand
from .simulation import generate_price_simulations
from .pricing import (
    analyze_competitor_prices,
    analyze_pricing,
    estimate_current_demand,
    generate_recommendation,
)
from .competitive import (
    adjust_for_competition,
    build_opportunities,
    latest_competitor_quotes,
    opportunity_score,
    revenue_impact,
    simulation_curve,
)
from .engine import AnalyticsEngine, forecast_series, generate_forecasts


__all__ = [
    # Forecasting pipeline
    "aggregate_sales",
    "exponential_smoothing",
    "calculate_trend",
    "calculate_confidence",
    "scale_to_window",
    "simple_moving_average",
    "weighted_moving_average",
    "assess_stockout_risk",
    "calculate_reorder_quantity",
    "recommend_action",
    "generate_insights",
    "summarize",
    "forecast_series",
    "generate_forecasts",
    # Pricing pipeline
    "calculate_price_elasticity",
    "classify_elasticity",
    "calculate_optimal_price",
    "simulate_demand",
    "generate_price_simulations",
    "analyze_competitor_prices",
    "estimate_current_demand",
    "generate_recommendation",
    "analyze_pricing",
    # Merge
    "latest_competitor_quotes",
    "adjust_for_competition",
    "opportunity_score",
    "revenue_impact",
    "build_opportunities",
    "simulation_curve",
    "AnalyticsEngine",
]
