"""
Inventory forecasting data models.
Includes the per-product sales series and the forecast/insight result types.
"""

from dataclasses import dataclass, field
from datetime import date

from models.enums import InsightType, StockoutRisk, Trend


@dataclass
class ProductSeries:
    """
    Chronological sales quantities for one product, together with the stock
    levels the risk assessment needs.
    """

    product_id: str
    product_name: str
    category: str = ""
    current_stock: int = 0
    min_stock: int = 0
    quantities: list[int] = field(default_factory=list)
    dates: list[date] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.quantities)

    @property
    def is_empty(self) -> bool:
        return not self.quantities


@dataclass(frozen=True)
class HistoricalPoint:
    date: date
    quantity: int


@dataclass
class ForecastResult:
    """
    Demand forecast and stock recommendation for a single product.
    """

    product_id: str
    product_name: str
    predicted_demand: int
    confidence_level: int
    trend: Trend
    stockout_risk: StockoutRisk
    suggested_reorder_qty: int
    recommendation: str
    historical_data: list[HistoricalPoint] = field(default_factory=list)

    @property
    def sort_key(self) -> tuple[int, int]:
        """Most urgent risk first, then largest demand."""
        return (self.stockout_risk.rank, -self.predicted_demand)


@dataclass(frozen=True)
class Insight:
    type: InsightType
    title: str
    description: str


@dataclass
class ForecastReport:
    """Output of a full forecasting run over the catalogue."""

    forecasts: list[ForecastResult]
    insights: list[Insight]
    summary: str

    def get(self, product_id: str) -> ForecastResult | None:
        for forecast in self.forecasts:
            if forecast.product_id == product_id:
                return forecast
        return None

    def by_risk(self, risk: StockoutRisk) -> list[ForecastResult]:
        return [f for f in self.forecasts if f.stockout_risk == risk]
