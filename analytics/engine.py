"""
Entry points of the analytics engine.

``generate_forecasts`` runs the forecasting pipeline over the whole catalogue;
``AnalyticsEngine`` bundles the configuration so the forecast, pricing and
pricing-intelligence screens all drive the same pipeline.
"""

import logging
from collections.abc import Sequence

from analytics.competitive import build_opportunities, simulation_curve
from analytics.forecasting import (
    calculate_confidence,
    exponential_smoothing,
    scale_to_window,
)
from analytics.insights import generate_insights, summarize
from analytics.pricing import analyze_pricing
from analytics.simulation import generate_price_simulations
from analytics.stock_risk import (
    assess_stockout_risk,
    calculate_reorder_quantity,
    recommend_action,
)
from analytics.timeseries import aggregate_sales
from config.config import CompetitiveConfig, ForecastConfig, PricingConfig, RiskConfig
from models.inventory import ForecastReport, ForecastResult, HistoricalPoint, ProductSeries
from models.pricing import OpportunityView, PricePoint, PriceSimulationPoint, PricingAnalysis
from models.records import CompetitorQuote, ProductSnapshot, SalesRecord

logger = logging.getLogger(__name__)

__all__ = [
    "forecast_series",
    "generate_forecasts",
    "analyze_pricing",
    "generate_price_simulations",
    "AnalyticsEngine",
]


def forecast_series(
    series: ProductSeries,
    forecast_days: int,
    config: ForecastConfig | None = None,
    risk_config: RiskConfig | None = None,
) -> ForecastResult:
    """Forecast demand and stock risk for one product's sales series."""
    config = config or ForecastConfig()
    risk_config = risk_config or RiskConfig()

    smoothed = exponential_smoothing(
        series.quantities,
        alpha=config.alpha,
        periods=config.periods,
        trend_window=config.trend_window,
        threshold_pct=config.trend_threshold_pct,
        up_multiplier=config.trend_up_multiplier,
        down_multiplier=config.trend_down_multiplier,
    )
    demand = max(0, scale_to_window(smoothed.forecast, forecast_days, config.days_per_period))
    risk = assess_stockout_risk(
        series.current_stock, series.min_stock, demand, forecast_days, risk_config
    )
    reorder_qty = calculate_reorder_quantity(
        series.current_stock, demand, series.min_stock, risk_config
    )

    return ForecastResult(
        product_id=series.product_id,
        product_name=series.product_name,
        predicted_demand=demand,
        confidence_level=calculate_confidence(series.quantities),
        trend=smoothed.trend,
        stockout_risk=risk,
        suggested_reorder_qty=reorder_qty,
        recommendation=recommend_action(risk, smoothed.trend, reorder_qty),
        historical_data=[
            HistoricalPoint(date=d, quantity=q)
            for d, q in zip(series.dates, series.quantities)
        ],
    )


def generate_forecasts(
    sales_records: Sequence[SalesRecord],
    products: Sequence[ProductSnapshot],
    forecast_days: int | None = None,
    config: ForecastConfig | None = None,
    risk_config: RiskConfig | None = None,
) -> ForecastReport:
    """
    Forecast every product in the catalogue.

    Forecasts are ordered by stockout risk (high first), then by predicted
    demand, largest first.
    """
    config = config or ForecastConfig()
    if forecast_days is None:
        forecast_days = config.forecast_days

    series_by_key = aggregate_sales(sales_records, products, config.group_by)
    forecasts = [
        forecast_series(series, forecast_days, config, risk_config)
        for series in series_by_key.values()
    ]
    forecasts.sort(key=lambda f: f.sort_key)

    insights = generate_insights(
        forecasts,
        products,
        len(sales_records),
        config.limited_data_threshold,
        config.growing_demand_threshold,
    )
    report = ForecastReport(
        forecasts=forecasts,
        insights=insights,
        summary=summarize(forecasts, forecast_days),
    )
    logger.info(
        f"Forecast {len(forecasts)} products over {forecast_days} days "
        f"({len(report.insights)} insights)"
    )
    return report


class AnalyticsEngine:
    """
    Single entry point for host screens. Holds the configuration so every
    caller uses the same smoothing, risk, pricing and grid parameters.
    """

    def __init__(
        self,
        forecast_config: ForecastConfig | None = None,
        risk_config: RiskConfig | None = None,
        pricing_config: PricingConfig | None = None,
        competitive_config: CompetitiveConfig | None = None,
    ):
        self.forecast_config = forecast_config or ForecastConfig()
        self.risk_config = risk_config or RiskConfig()
        self.pricing_config = pricing_config or PricingConfig()
        self.competitive_config = competitive_config or CompetitiveConfig()

    @classmethod
    def from_env(cls) -> "AnalyticsEngine":
        return cls(
            forecast_config=ForecastConfig.from_env(),
            pricing_config=PricingConfig.from_env(),
        )

    def forecast(
        self,
        sales_records: Sequence[SalesRecord],
        products: Sequence[ProductSnapshot],
        forecast_days: int | None = None,
    ) -> ForecastReport:
        return generate_forecasts(
            sales_records, products, forecast_days, self.forecast_config, self.risk_config
        )

    def price(
        self,
        product: ProductSnapshot,
        sales_history: Sequence[PricePoint],
        competitor_prices: Sequence[CompetitorQuote] = (),
    ) -> PricingAnalysis:
        return analyze_pricing(
            product.id,
            product.name,
            product.selling_price,
            product.cost_price,
            sales_history,
            competitor_prices,
            self.pricing_config,
        )

    def simulate(
        self,
        current_price: float,
        current_demand: int,
        cost_price: float,
        elasticity: float,
    ) -> list[PriceSimulationPoint]:
        return generate_price_simulations(
            current_price, current_demand, cost_price, elasticity, self.pricing_config.grid
        )

    def opportunities(
        self,
        sales_records: Sequence[SalesRecord],
        products: Sequence[ProductSnapshot],
        competitor_quotes: Sequence[CompetitorQuote],
        forecast_days: int | None = None,
    ) -> list[OpportunityView]:
        report = self.forecast(sales_records, products, forecast_days)
        return build_opportunities(
            products,
            report,
            sales_records,
            competitor_quotes,
            self.pricing_config,
            self.competitive_config,
        )

    def opportunity_curve(self, view: OpportunityView) -> list[PriceSimulationPoint]:
        return simulation_curve(
            view, self.competitive_config, self.pricing_config.default_demand
        )
