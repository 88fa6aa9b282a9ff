"""
Pricing-related data models.
Covers elasticity estimates, price simulations, competitor comparisons and the
integrated opportunity view that merges forecasting with pricing.
"""

from dataclasses import dataclass, field
from datetime import date

from models.enums import ElasticityType
from models.inventory import ForecastResult
from models.records import CompetitorQuote, ProductSnapshot


@dataclass(frozen=True)
class PricePoint:
    """One observation of the price a product sold at and the quantity sold."""

    price: float
    quantity: int
    sale_date: date | None = None


@dataclass(frozen=True)
class ElasticityEstimate:
    elasticity: float
    confidence: int
    sample_count: int = 0


@dataclass
class ElasticityResult:
    """
    Data model for the elasticity of a product and the revenue-maximizing
    price derived from it.
    """

    product_id: str
    product_name: str
    elasticity: float
    elasticity_type: ElasticityType
    current_price: float
    current_demand: int
    optimal_price: float
    optimal_demand: int
    optimal_revenue: float
    confidence_level: int


@dataclass(frozen=True)
class PriceSimulationPoint:
    price_change_percent: float
    simulated_price: float
    simulated_demand: int
    simulated_revenue: float
    profit_margin: float


@dataclass(frozen=True)
class CompetitorComparison:
    competitor_name: str
    price: float
    price_difference: float
    percentage_difference: float


@dataclass
class PricingAnalysis:
    """
    Full pricing analysis for one product.
    """

    product_id: str
    product_name: str
    current_price: float
    cost_price: float
    elasticity: ElasticityResult
    simulations: list[PriceSimulationPoint]
    competitor_prices: list[CompetitorComparison]
    recommendation: str
    optimal_price: float
    expected_demand: int
    expected_revenue: float


@dataclass(frozen=True)
class CompetitiveAdjustment:
    average_competitor_price: float
    price_diff_percent: float
    demand_adjustment_percent: float
    adjusted_demand: int
    adjusted_confidence: int


@dataclass
class OpportunityView:
    """
    Integrated per-product view combining forecast, pricing and competitor data.
    """

    product: ProductSnapshot
    forecast: ForecastResult | None = None
    pricing: PricingAnalysis | None = None
    competitor_prices: list[CompetitorQuote] = field(default_factory=list)
    adjustment: CompetitiveAdjustment | None = None
    opportunity_score: int = 50
    revenue_impact: float = 0.0
