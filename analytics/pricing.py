"""
Pricing analysis: elasticity, optimal price, simulation curve, competitor
comparison and a plain-language recommendation for one product.
"""

import logging
from collections.abc import Sequence

from analytics.elasticity import calculate_price_elasticity, classify_elasticity
from analytics.optimal_price import calculate_optimal_price, simulate_demand
from analytics.simulation import generate_price_simulations
from config.config import PricingConfig
from models.pricing import (
    CompetitorComparison,
    ElasticityResult,
    PricePoint,
    PricingAnalysis,
)
from models.records import CompetitorQuote
from utils.numeric import mean, round_half_up

logger = logging.getLogger(__name__)


def analyze_competitor_prices(
    our_price: float, competitors: Sequence[CompetitorQuote]
) -> list[CompetitorComparison]:
    comparisons = []
    for quote in competitors:
        difference = our_price - quote.price
        pct = difference / quote.price * 100 if quote.price else 0.0
        comparisons.append(
            CompetitorComparison(
                competitor_name=quote.competitor_name,
                price=quote.price,
                price_difference=difference,
                percentage_difference=round_half_up(pct * 10) / 10,
            )
        )
    return comparisons


def estimate_current_demand(
    points: Sequence[PricePoint], window_days: int = 30, default: int = 10
) -> int:
    """Average quantity per sale scaled to a ``window_days`` window."""
    if not points:
        return default
    return round_half_up(mean([p.quantity for p in points]) * window_days)


def _format_price(value: float, symbol: str) -> str:
    return f"{symbol}{value:,.0f}" if float(value).is_integer() else f"{symbol}{value:,.2f}"


def generate_recommendation(
    elasticity: float,
    current_price: float,
    optimal_price: float,
    competitor_prices: Sequence[CompetitorComparison],
    config: PricingConfig | None = None,
) -> str:
    config = config or PricingConfig()
    band = config.recommendation_band_pct
    target = _format_price(optimal_price, config.currency_symbol)
    change_needed = (
        (optimal_price - current_price) / current_price * 100 if current_price else 0.0
    )

    if abs(elasticity) > 1:
        if change_needed < -band:
            recommendation = (
                f"Demand is price-sensitive. Lower price by "
                f"{abs(round_half_up(change_needed))}% to {target} to maximize revenue."
            )
        elif change_needed > band:
            recommendation = (
                f"Despite elastic demand, margin optimization suggests a "
                f"{round_half_up(change_needed)}% price increase to {target}."
            )
        else:
            recommendation = (
                "Current pricing is near optimal. Monitor competitor pricing "
                "closely due to elastic demand."
            )
    elif change_needed > band:
        recommendation = (
            f"Demand is stable. Increase price by {round_half_up(change_needed)}% "
            f"to {target} for higher margins."
        )
    else:
        recommendation = (
            "Inelastic demand indicates pricing power. Current price is acceptable "
            "but a slight increase could improve margins."
        )

    if competitor_prices:
        avg_competitor = mean([c.price for c in competitor_prices])
        if avg_competitor > 0:
            vs_competitors = (current_price - avg_competitor) / avg_competitor * 100
            gap = config.competitor_gap_pct
            if vs_competitors > gap:
                recommendation += (
                    f" Note: You're {round_half_up(vs_competitors)}% above competitor average."
                )
            elif vs_competitors < -gap:
                recommendation += (
                    f" Opportunity: You're {abs(round_half_up(vs_competitors))}% "
                    f"below competitor average."
                )

    return recommendation


def analyze_pricing(
    product_id: str,
    product_name: str,
    current_price: float,
    cost_price: float,
    sales_history: Sequence[PricePoint],
    competitor_prices: Sequence[CompetitorQuote] = (),
    config: PricingConfig | None = None,
) -> PricingAnalysis:
    """
    Run the full pricing pipeline for one product.

    Args:
        sales_history: The product's own (price, quantity, date) observations.
        competitor_prices: Latest quote per competitor for this product.
        config: Pricing constants; the simulation grid is taken from it.
    """
    config = config or PricingConfig()

    current_demand = estimate_current_demand(
        sales_history, config.demand_window_days, config.default_demand
    )
    estimate = calculate_price_elasticity(sales_history)
    if estimate.sample_count == 0:
        logger.info(
            f"Using default elasticity {estimate.elasticity} for {product_id} "
            f"({len(sales_history)} observations)"
        )

    optimal_price = calculate_optimal_price(
        current_price, estimate.elasticity, cost_price, config=config
    )
    optimal_demand = simulate_demand(
        current_price, current_demand, optimal_price, estimate.elasticity
    )
    optimal_revenue = optimal_price * optimal_demand

    elasticity_result = ElasticityResult(
        product_id=product_id,
        product_name=product_name,
        elasticity=estimate.elasticity,
        elasticity_type=classify_elasticity(estimate.elasticity),
        current_price=current_price,
        current_demand=current_demand,
        optimal_price=optimal_price,
        optimal_demand=optimal_demand,
        optimal_revenue=optimal_revenue,
        confidence_level=estimate.confidence,
    )

    comparisons = analyze_competitor_prices(current_price, competitor_prices)
    simulations = generate_price_simulations(
        current_price, current_demand, cost_price, estimate.elasticity, config.grid
    )

    return PricingAnalysis(
        product_id=product_id,
        product_name=product_name,
        current_price=current_price,
        cost_price=cost_price,
        elasticity=elasticity_result,
        simulations=simulations,
        competitor_prices=comparisons,
        recommendation=generate_recommendation(
            estimate.elasticity, current_price, optimal_price, comparisons, config
        ),
        optimal_price=optimal_price,
        expected_demand=optimal_demand,
        expected_revenue=optimal_revenue,
    )
