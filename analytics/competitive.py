"""
Competitive adjustment and the integrated opportunity view.

Merges the forecasting output, the pricing analysis and competitor quotes into
one ranked list of products worth a pricing review.
"""

import logging
from collections.abc import Sequence

from analytics.pricing import analyze_pricing
from analytics.simulation import generate_price_simulations
from config.config import CompetitiveConfig, PricingConfig
from models.enums import Trend
from models.inventory import ForecastReport, ForecastResult
from models.pricing import (
    CompetitiveAdjustment,
    OpportunityView,
    PricePoint,
    PriceSimulationPoint,
    PricingAnalysis,
)
from models.records import CompetitorQuote, ProductSnapshot, SalesRecord
from utils.numeric import clamp, mean, round_half_up

logger = logging.getLogger(__name__)


def _recency(quote: CompetitorQuote) -> tuple[bool, float]:
    # Undated quotes rank as oldest.
    if quote.recorded_at is None:
        return (False, 0.0)
    return (True, quote.recorded_at.timestamp())


def latest_competitor_quotes(
    quotes: Sequence[CompetitorQuote], product: ProductSnapshot
) -> list[CompetitorQuote]:
    """
    Quotes for ``product`` (matched by id, or by case-insensitive name), keeping
    only the most recent one per competitor.
    """
    name = product.name.lower()
    matching = [
        q
        for q in quotes
        if q.product_id == product.id
        or (q.product_name is not None and q.product_name.lower() == name)
    ]
    matching.sort(key=_recency, reverse=True)

    latest: dict[str, CompetitorQuote] = {}
    for quote in matching:
        latest.setdefault(quote.competitor_name, quote)
    return list(latest.values())


def adjust_for_competition(
    forecast: ForecastResult,
    our_price: float,
    competitor_prices: Sequence[float],
    config: CompetitiveConfig | None = None,
) -> CompetitiveAdjustment | None:
    """
    Adjust forecast demand for our position against the competitor average.

    Being more expensive costs ``premium_penalty`` % of demand per 1% of price
    gap; being cheaper gains ``discount_gain`` % per 1%. Returns None when there
    is no usable competitor price.
    """
    config = config or CompetitiveConfig()
    if not competitor_prices:
        return None
    avg_competitor = mean(competitor_prices)
    if avg_competitor <= 0:
        logger.debug(f"Ignoring non-positive competitor average for {forecast.product_id}")
        return None

    diff_pct = (our_price - avg_competitor) / avg_competitor * 100
    if diff_pct > 0:
        adjustment = -diff_pct * config.premium_penalty
    else:
        adjustment = abs(diff_pct) * config.discount_gain

    adjusted_demand = max(0, round_half_up(forecast.predicted_demand * (1 + adjustment / 100)))
    adjusted_confidence = round_half_up(
        max(
            config.confidence_floor,
            forecast.confidence_level - abs(adjustment) * config.confidence_penalty,
        )
    )
    return CompetitiveAdjustment(
        average_competitor_price=avg_competitor,
        price_diff_percent=diff_pct,
        demand_adjustment_percent=adjustment,
        adjusted_demand=adjusted_demand,
        adjusted_confidence=adjusted_confidence,
    )


def opportunity_score(
    pricing: PricingAnalysis | None,
    forecast: ForecastResult | None,
    config: CompetitiveConfig | None = None,
) -> int:
    """Heuristic 0-100 ranking of how much a product would gain from a price review."""
    config = config or CompetitiveConfig()
    score = config.base_score

    if pricing is not None:
        if pricing.current_price > 0:
            gap = abs(pricing.optimal_price - pricing.current_price) / pricing.current_price
            score += gap * 100
        if pricing.competitor_prices:
            avg_diff = mean([c.percentage_difference for c in pricing.competitor_prices])
            if avg_diff < config.cheaper_threshold_pct:
                score += config.cheaper_bonus
            if avg_diff > config.pricier_threshold_pct:
                score -= config.pricier_penalty

    if forecast is not None and forecast.trend == Trend.INCREASING:
        score += config.rising_demand_bonus

    return int(clamp(round_half_up(score), 0, 100))


def revenue_impact(
    product: ProductSnapshot,
    forecast: ForecastResult | None,
    pricing: PricingAnalysis | None,
    default_demand: int = 10,
) -> float:
    """Expected revenue at the optimal price minus revenue at today's price."""
    if pricing is None or forecast is None:
        return 0.0
    current_revenue = product.selling_price * (forecast.predicted_demand or default_demand)
    return pricing.expected_revenue - current_revenue


def price_points_for(
    product: ProductSnapshot, sales_records: Sequence[SalesRecord]
) -> list[PricePoint]:
    return [
        PricePoint(price=s.unit_price, quantity=s.quantity, sale_date=s.sale_date)
        for s in sales_records
        if s.product_id == product.id
    ]


def build_opportunity(
    product: ProductSnapshot,
    forecast: ForecastResult | None,
    sales_records: Sequence[SalesRecord],
    competitor_quotes: Sequence[CompetitorQuote],
    pricing_config: PricingConfig | None = None,
    config: CompetitiveConfig | None = None,
) -> OpportunityView:
    pricing_config = pricing_config or PricingConfig()
    config = config or CompetitiveConfig()

    quotes = latest_competitor_quotes(competitor_quotes, product)
    history = price_points_for(product, sales_records)

    pricing = None
    if history or quotes:
        pricing = analyze_pricing(
            product.id,
            product.name,
            product.selling_price,
            product.cost_price,
            history,
            quotes,
            pricing_config,
        )

    adjustment = None
    if forecast is not None:
        adjustment = adjust_for_competition(
            forecast, product.selling_price, [q.price for q in quotes], config
        )

    return OpportunityView(
        product=product,
        forecast=forecast,
        pricing=pricing,
        competitor_prices=quotes,
        adjustment=adjustment,
        opportunity_score=opportunity_score(pricing, forecast, config),
        revenue_impact=revenue_impact(
            product, forecast, pricing, pricing_config.default_demand
        ),
    )


def build_opportunities(
    products: Sequence[ProductSnapshot],
    report: ForecastReport | None,
    sales_records: Sequence[SalesRecord],
    competitor_quotes: Sequence[CompetitorQuote],
    pricing_config: PricingConfig | None = None,
    config: CompetitiveConfig | None = None,
) -> list[OpportunityView]:
    """Integrated view for every product, highest opportunity score first."""
    views = []
    for product in products:
        forecast = report.get(product.id) if report is not None else None
        if report is not None and forecast is None:
            logger.debug(f"No forecast found for product {product.id}")
        views.append(
            build_opportunity(
                product, forecast, sales_records, competitor_quotes, pricing_config, config
            )
        )
    views.sort(key=lambda v: v.opportunity_score, reverse=True)
    return views


def simulation_curve(
    view: OpportunityView,
    config: CompetitiveConfig | None = None,
    default_demand: int = 10,
) -> list[PriceSimulationPoint]:
    """
    Price/demand curve for the integrated view. Demand starts from the forecast
    when available, otherwise from the pricing analysis.
    """
    if view.pricing is None:
        return []
    config = config or CompetitiveConfig()
    pricing = view.pricing
    base_demand = (
        (view.forecast.predicted_demand if view.forecast else 0)
        or pricing.elasticity.current_demand
        or default_demand
    )
    return generate_price_simulations(
        pricing.current_price,
        base_demand,
        pricing.cost_price,
        pricing.elasticity.elasticity,
        config.grid,
    )
