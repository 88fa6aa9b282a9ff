"""
End-to-end demonstration of the analytics engine over the dummy sales store:
forecasts and insights, a pricing analysis, and the ranked opportunity view.
"""

import asyncio

from analytics import AnalyticsEngine
from analytics.competitive import price_points_for
from connectors.dummy_sales_store import DummySalesStore
from utils.logger import get_logger

logger = get_logger("demos.analytics_demo")


async def load_inputs(store: DummySalesStore):
    """Fetch everything the engine needs before any computation starts."""
    return await asyncio.gather(
        store.get_sales_records(),
        store.get_products(),
        store.get_competitor_prices(),
    )


def run_demo(forecast_days: int = 30) -> None:
    store = DummySalesStore()
    sales, products, quotes = asyncio.run(load_inputs(store))
    engine = AnalyticsEngine.from_env()

    report = engine.forecast(sales, products, forecast_days)
    logger.info(report.summary)
    for forecast in report.forecasts:
        logger.info(
            f"{forecast.product_name:<30} demand={forecast.predicted_demand:>4} "
            f"risk={forecast.stockout_risk.value:<6} trend={forecast.trend.value:<10} "
            f"conf={forecast.confidence_level}% -> {forecast.recommendation}"
        )
    for insight in report.insights:
        logger.info(f"[{insight.type.value}] {insight.title}: {insight.description}")

    laptop = next(p for p in products if p.id == "1")
    analysis = engine.price(laptop, price_points_for(laptop, sales))
    logger.info(
        f"{laptop.name}: PED={analysis.elasticity.elasticity:.2f} "
        f"({analysis.elasticity.elasticity_type.value}), optimal price "
        f"{analysis.optimal_price}. {analysis.recommendation}"
    )
    for point in analysis.simulations:
        logger.info(
            f"  {point.price_change_percent:+6.1f}%  price={point.simulated_price:>7} "
            f"demand={point.simulated_demand:>4} revenue={point.simulated_revenue:>10,.0f} "
            f"margin={point.profit_margin}%"
        )

    for rank, view in enumerate(engine.opportunities(sales, products, quotes, forecast_days), 1):
        adjusted = view.adjustment.adjusted_demand if view.adjustment else "-"
        logger.info(
            f"#{rank} {view.product.name:<30} score={view.opportunity_score:>3} "
            f"impact={view.revenue_impact:>12,.0f} adjusted_demand={adjusted}"
        )


if __name__ == "__main__":
    run_demo()
