import pytest

from config.config import (
    CompetitiveConfig,
    ForecastConfig,
    PricingConfig,
    RiskConfig,
    SimulationGrid,
)
from models.enums import GroupBy


def test_forecast_config_defaults():
    """Test ForecastConfig initializes with correct default values."""
    config = ForecastConfig()
    assert config.alpha == 0.3
    assert config.periods == 1
    assert config.trend_window == 5
    assert config.trend_threshold_pct == 5.0
    assert config.days_per_period == 7
    assert config.forecast_days == 30
    assert config.group_by == GroupBy.PRODUCT_ID


def test_forecast_config_custom():
    """Test ForecastConfig initialization with custom values."""
    config = ForecastConfig(alpha=0.5, group_by="product_name")
    assert config.alpha == 0.5
    assert config.group_by == GroupBy.PRODUCT_NAME
    # Check a default value is still correct
    assert config.forecast_days == 30


@pytest.mark.parametrize("alpha", [0.0, -0.1, 1.5])
def test_forecast_config_rejects_bad_alpha(alpha):
    with pytest.raises(ValueError, match="alpha"):
        ForecastConfig(alpha=alpha)


def test_forecast_config_rejects_bad_period_length():
    with pytest.raises(ValueError, match="days_per_period"):
        ForecastConfig(days_per_period=0)


def test_forecast_config_rejects_unknown_group_by():
    with pytest.raises(ValueError):
        ForecastConfig(group_by="category")


def test_forecast_config_from_env(monkeypatch):
    """Test ForecastConfig.from_env picks up ANALYTICS_* overrides."""
    monkeypatch.setenv("ANALYTICS_SMOOTHING_ALPHA", "0.6")
    monkeypatch.setenv("ANALYTICS_FORECAST_DAYS", "14")
    monkeypatch.delenv("ANALYTICS_DAYS_PER_PERIOD", raising=False)
    config = ForecastConfig.from_env()
    assert config.alpha == 0.6
    assert config.forecast_days == 14
    assert config.days_per_period == 7


def test_forecast_config_from_env_invalid(monkeypatch):
    monkeypatch.setenv("ANALYTICS_FORECAST_DAYS", "a month")
    with pytest.raises(ValueError, match="ANALYTICS_FORECAST_DAYS"):
        ForecastConfig.from_env()


def test_risk_config_defaults():
    config = RiskConfig()
    assert config.high_risk_days == 7.0
    assert config.medium_risk_days == 14.0
    assert config.medium_stock_ratio == 1.5
    assert config.safety_stock_ratio == 0.2


def test_pricing_config_defaults():
    """Test PricingConfig initializes with correct default values."""
    config = PricingConfig()
    assert config.min_margin == 0.10
    assert config.inelastic_markup == 1.15
    assert (config.lower_bound_ratio, config.upper_bound_ratio) == (0.5, 1.5)
    assert config.demand_window_days == 30
    assert config.default_demand == 10
    assert config.currency_symbol == "₱"
    assert config.grid == SimulationGrid(-10.0, 10.0, 2.5)


def test_pricing_config_default_factory():
    """Test that the default_factory creates separate grid instances."""
    config1 = PricingConfig()
    config2 = PricingConfig()
    assert config1.grid == config2.grid
    assert config1.grid is not config2.grid


def test_pricing_config_from_env(monkeypatch):
    monkeypatch.setenv("ANALYTICS_MIN_MARGIN", "0.25")
    monkeypatch.setenv("ANALYTICS_DEMAND_WINDOW_DAYS", "")
    config = PricingConfig.from_env()
    assert config.min_margin == 0.25
    assert config.demand_window_days == 30


def test_competitive_config_defaults():
    config = CompetitiveConfig()
    assert config.premium_penalty == 0.8
    assert config.discount_gain == 0.3
    assert config.confidence_floor == 60
    assert config.base_score == 50
    assert config.grid == SimulationGrid.integrated()


def test_simulation_grid_changes():
    assert SimulationGrid().changes() == [-10.0, -7.5, -5.0, -2.5, 0.0, 2.5, 5.0, 7.5, 10.0]
    assert SimulationGrid(start=0, stop=1, step=0.25).changes() == [0, 0.25, 0.5, 0.75, 1.0]


def test_simulation_grid_adds_zero_outside_range():
    assert SimulationGrid(start=5, stop=10, step=5).changes() == [0.0, 5, 10]


@pytest.mark.parametrize(
    "kwargs", [{"step": 0}, {"step": -2.5}, {"start": 10, "stop": -10}]
)
def test_simulation_grid_validation(kwargs):
    with pytest.raises(ValueError):
        SimulationGrid(**kwargs)
