"""
Portfolio-level insights and the one-line summary of a forecasting run.
"""

from collections.abc import Sequence

from models.enums import InsightType, StockoutRisk, Trend
from models.inventory import ForecastResult, Insight
from models.records import ProductSnapshot


def count_rising(forecasts: Sequence[ForecastResult]) -> int:
    """Products with rising demand that are not already flagged for reordering."""
    return sum(
        1
        for f in forecasts
        if f.stockout_risk == StockoutRisk.LOW and f.trend == Trend.INCREASING
    )


def generate_insights(
    forecasts: Sequence[ForecastResult],
    products: Sequence[ProductSnapshot],
    sales_count: int,
    limited_data_threshold: int = 10,
    growing_demand_threshold: int = 2,
) -> list[Insight]:
    insights: list[Insight] = []

    high_risk = sum(1 for f in forecasts if f.stockout_risk == StockoutRisk.HIGH)
    if high_risk > 0:
        insights.append(
            Insight(
                type=InsightType.WARNING,
                title="Stockout Alert",
                description=(
                    f"{high_risk} product{'s' if high_risk > 1 else ''} at high risk "
                    f"of stockout. Immediate action required."
                ),
            )
        )

    rising = count_rising(forecasts)
    if rising > growing_demand_threshold:
        insights.append(
            Insight(
                type=InsightType.OPPORTUNITY,
                title="Growing Demand",
                description=(
                    f"{rising} products show increasing demand trends. "
                    f"Consider bulk purchasing."
                ),
            )
        )

    below_min = sum(1 for p in products if p.current_stock < p.min_stock)
    if below_min > 0:
        insights.append(
            Insight(
                type=InsightType.WARNING,
                title="Below Minimum Stock",
                description=f"{below_min} products are below minimum stock levels.",
            )
        )

    if sales_count < limited_data_threshold:
        insights.append(
            Insight(
                type=InsightType.INFO,
                title="Limited Data",
                description=(
                    "Add more sales records for more accurate predictions. "
                    "Current analysis based on limited data."
                ),
            )
        )

    return insights


def summarize(forecasts: Sequence[ForecastResult], forecast_days: int) -> str:
    high_risk = sum(1 for f in forecasts if f.stockout_risk == StockoutRisk.HIGH)
    healthy = sum(1 for f in forecasts if f.stockout_risk == StockoutRisk.LOW)

    summary = ""
    if high_risk > 0:
        summary = (
            f"{high_risk} product{'s need' if high_risk > 1 else ' needs'} "
            f"immediate reordering. "
        )
    summary += f"Analyzed {len(forecasts)} products for the next {forecast_days} days. "
    summary += f"{healthy} products have healthy stock levels."
    return summary
