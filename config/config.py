"""
Configuration classes for the inventory analytics engine.
Defines the tunable constants of the forecasting and pricing pipelines in a
type-safe, extensible way so every caller shares one set of defaults.
"""

from dataclasses import dataclass, field

from models.enums import GroupBy
from utils.env import env_float, env_int


@dataclass
class ForecastConfig:
    alpha: float = 0.3
    periods: int = 1
    trend_window: int = 5
    trend_threshold_pct: float = 5.0
    trend_up_multiplier: float = 1.1
    trend_down_multiplier: float = 0.9
    days_per_period: int = 7  # Each history point is treated as one week
    forecast_days: int = 30
    group_by: GroupBy = GroupBy.PRODUCT_ID
    limited_data_threshold: int = 10
    growing_demand_threshold: int = 2

    def __post_init__(self):
        if not 0 < self.alpha <= 1:
            raise ValueError(f"alpha must be in (0, 1], got {self.alpha}")
        if self.days_per_period <= 0:
            raise ValueError("days_per_period must be positive")
        self.group_by = GroupBy(self.group_by)

    @classmethod
    def from_env(cls) -> "ForecastConfig":
        """Build a config from ``ANALYTICS_*`` environment variables."""
        return cls(
            alpha=env_float("ANALYTICS_SMOOTHING_ALPHA", cls.alpha),
            forecast_days=env_int("ANALYTICS_FORECAST_DAYS", cls.forecast_days),
            days_per_period=env_int("ANALYTICS_DAYS_PER_PERIOD", cls.days_per_period),
        )


@dataclass
class RiskConfig:
    high_risk_days: float = 7.0
    medium_risk_days: float = 14.0
    medium_stock_ratio: float = 1.5
    safety_stock_ratio: float = 0.2


@dataclass
class SimulationGrid:
    """Price-change percentages to simulate, from ``start`` to ``stop`` inclusive."""

    start: float = -10.0
    stop: float = 10.0
    step: float = 2.5

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.start > self.stop:
            raise ValueError(f"start ({self.start}) must not exceed stop ({self.stop})")

    @classmethod
    def integrated(cls) -> "SimulationGrid":
        """Wider grid used by the integrated pricing-intelligence view."""
        return cls(start=-15.0, stop=15.0, step=2.5)

    def changes(self) -> list[float]:
        # Multiply instead of accumulating so 2.5 steps stay exact.
        count = int((self.stop - self.start) / self.step + 1e-9)
        values = {self.start + i * self.step for i in range(count + 1)}
        values.add(0.0)  # The current price is always part of the curve
        return sorted(values)


@dataclass
class PricingConfig:
    min_margin: float = 0.10
    inelastic_threshold: float = -0.1
    inelastic_markup: float = 1.15
    lower_bound_ratio: float = 0.5
    upper_bound_ratio: float = 1.5
    demand_window_days: int = 30
    default_demand: int = 10
    recommendation_band_pct: float = 5.0
    competitor_gap_pct: float = 10.0
    currency_symbol: str = "₱"
    grid: SimulationGrid = field(default_factory=SimulationGrid)

    @classmethod
    def from_env(cls) -> "PricingConfig":
        return cls(
            min_margin=env_float("ANALYTICS_MIN_MARGIN", cls.min_margin),
            demand_window_days=env_int(
                "ANALYTICS_DEMAND_WINDOW_DAYS", cls.demand_window_days
            ),
        )


@dataclass
class CompetitiveConfig:
    premium_penalty: float = 0.8  # % demand lost per 1% more expensive
    discount_gain: float = 0.3  # % demand gained per 1% cheaper
    confidence_floor: float = 60.0
    confidence_penalty: float = 0.5
    base_score: float = 50.0
    cheaper_threshold_pct: float = -5.0
    cheaper_bonus: float = 15.0
    pricier_threshold_pct: float = 10.0
    pricier_penalty: float = 10.0
    rising_demand_bonus: float = 10.0
    grid: SimulationGrid = field(default_factory=SimulationGrid.integrated)


# Example usage:
# forecast_config = ForecastConfig.from_env()
# pricing_config = PricingConfig(grid=SimulationGrid.integrated())
