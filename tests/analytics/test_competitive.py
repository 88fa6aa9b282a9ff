from datetime import datetime, timezone

import pytest

from analytics.competitive import (
    adjust_for_competition,
    build_opportunity,
    latest_competitor_quotes,
    opportunity_score,
    price_points_for,
    revenue_impact,
    simulation_curve,
)
from analytics.pricing import analyze_pricing
from config.config import CompetitiveConfig
from models.enums import StockoutRisk, Trend
from models.inventory import ForecastResult
from models.records import CompetitorQuote


def make_forecast(
    demand: int = 100,
    confidence: int = 80,
    trend: Trend = Trend.STABLE,
    product_id: str = "P1",
) -> ForecastResult:
    return ForecastResult(
        product_id=product_id,
        product_name="Widget",
        predicted_demand=demand,
        confidence_level=confidence,
        trend=trend,
        stockout_risk=StockoutRisk.LOW,
        suggested_reorder_qty=0,
        recommendation="",
    )


def at(day: int) -> datetime:
    return datetime(2024, 12, day, tzinfo=timezone.utc)


class TestLatestCompetitorQuotes:
    def test_keeps_newest_quote_per_competitor(self, widget):
        quotes = [
            CompetitorQuote(competitor_name="Octagon", price=110, product_id="P1", recorded_at=at(1)),
            CompetitorQuote(competitor_name="Octagon", price=120, product_id="P1", recorded_at=at(20)),
            CompetitorQuote(competitor_name="Villman", price=130, product_id="P1"),
        ]
        latest = latest_competitor_quotes(quotes, widget)
        assert {q.competitor_name: q.price for q in latest} == {"Octagon": 120, "Villman": 130}

    def test_matches_by_id_or_case_insensitive_name(self, widget):
        quotes = [
            CompetitorQuote(competitor_name="A", price=1, product_id="P1"),
            CompetitorQuote(competitor_name="B", price=2, product_name="WIDGET"),
            CompetitorQuote(competitor_name="C", price=3, product_id="P2"),
            CompetitorQuote(competitor_name="D", price=4),
        ]
        assert sorted(q.competitor_name for q in latest_competitor_quotes(quotes, widget)) == [
            "A",
            "B",
        ]

    def test_no_matching_quotes(self, widget):
        assert latest_competitor_quotes([], widget) == []


class TestAdjustForCompetition:
    def test_premium_loses_demand(self):
        adjustment = adjust_for_competition(make_forecast(), 110, [100])
        assert adjustment.price_diff_percent == pytest.approx(10.0)
        assert adjustment.demand_adjustment_percent == pytest.approx(-8.0)
        assert adjustment.adjusted_demand == 92
        assert adjustment.adjusted_confidence == 76

    def test_discount_gains_less_demand(self):
        adjustment = adjust_for_competition(make_forecast(), 90, [100])
        assert adjustment.demand_adjustment_percent == pytest.approx(3.0)
        assert adjustment.adjusted_demand == 103
        assert adjustment.adjusted_confidence == 79

    def test_confidence_has_a_floor(self):
        adjustment = adjust_for_competition(make_forecast(confidence=62), 150, [100])
        assert adjustment.adjusted_demand == 60
        assert adjustment.adjusted_confidence == 60

    def test_uses_competitor_average(self):
        adjustment = adjust_for_competition(make_forecast(), 100, [80, 120])
        assert adjustment.average_competitor_price == 100
        assert adjustment.adjusted_demand == 100
        assert adjustment.adjusted_confidence == 80

    @pytest.mark.parametrize("prices", [[], [0, 0]])
    def test_no_usable_competitor_price(self, prices):
        assert adjust_for_competition(make_forecast(), 100, prices) is None

    def test_custom_sensitivities(self):
        config = CompetitiveConfig(premium_penalty=1.0, confidence_floor=0)
        adjustment = adjust_for_competition(make_forecast(), 110, [100], config)
        assert adjustment.adjusted_demand == 90
        assert adjustment.adjusted_confidence == 75


@pytest.fixture
def widget_pricing(widget, widget_sales, competitor_quotes):
    return analyze_pricing(
        widget.id,
        widget.name,
        widget.selling_price,
        widget.cost_price,
        price_points_for(widget, widget_sales),
        competitor_quotes,
    )


class TestOpportunityScore:
    def test_base_score_without_data(self):
        assert opportunity_score(None, None) == 50

    def test_rising_demand_bonus(self):
        assert opportunity_score(None, make_forecast(trend=Trend.INCREASING)) == 60

    def test_price_gap_cheaper_and_rising(self, widget_pricing):
        # 50 + 15 (gap to optimal) + 15 (cheaper than competitors) + 10 (rising)
        assert opportunity_score(widget_pricing, make_forecast(trend=Trend.INCREASING)) == 90

    def test_pricier_than_competitors(self, widget, widget_sales):
        pricing = analyze_pricing(
            widget.id,
            widget.name,
            widget.selling_price,
            widget.cost_price,
            price_points_for(widget, widget_sales),
            [CompetitorQuote(competitor_name="A", price=80, product_id="P1")],
        )
        assert opportunity_score(pricing, make_forecast()) == 55

    def test_score_is_capped(self, gadget, gadget_sales):
        pricing = analyze_pricing(
            gadget.id,
            gadget.name,
            gadget.selling_price,
            gadget.cost_price,
            price_points_for(gadget, gadget_sales),
        )
        assert pricing.optimal_price == 1500
        assert opportunity_score(pricing, make_forecast(trend=Trend.INCREASING)) == 100


class TestRevenueImpact:
    def test_difference_to_current_revenue(self, widget, widget_pricing):
        assert revenue_impact(widget, make_forecast(demand=43), widget_pricing) == 30_200

    def test_zero_forecast_falls_back_to_default_demand(self, widget, widget_pricing):
        assert revenue_impact(widget, make_forecast(demand=0), widget_pricing) == 33_500

    def test_missing_inputs(self, widget, widget_pricing):
        assert revenue_impact(widget, None, widget_pricing) == 0.0
        assert revenue_impact(widget, make_forecast(), None) == 0.0


def test_build_opportunity(widget, widget_sales, competitor_quotes):
    forecast = make_forecast(demand=43, confidence=95)
    view = build_opportunity(widget, forecast, widget_sales, competitor_quotes)

    assert view.pricing.optimal_price == 115
    assert len(view.competitor_prices) == 2
    assert view.adjustment.adjusted_demand == 46
    assert view.adjustment.adjusted_confidence == 92
    assert view.opportunity_score == 80
    assert view.revenue_impact == 30_200


def test_build_opportunity_without_history_or_quotes(widget):
    view = build_opportunity(widget, make_forecast(), [], [])
    assert view.pricing is None
    assert view.adjustment is None
    assert view.opportunity_score == 50
    assert view.revenue_impact == 0.0
    assert simulation_curve(view) == []


def test_simulation_curve_starts_from_forecast_demand(widget, widget_sales, competitor_quotes):
    view = build_opportunity(widget, make_forecast(demand=43), widget_sales, competitor_quotes)
    curve = simulation_curve(view)
    assert len(curve) == 13
    zero = next(p for p in curve if p.price_change_percent == 0)
    assert zero.simulated_price == 100
    assert zero.simulated_demand == 43


def test_simulation_curve_without_forecast(widget, widget_sales):
    view = build_opportunity(widget, None, widget_sales, [])
    zero = next(p for p in simulation_curve(view) if p.price_change_percent == 0)
    assert zero.simulated_demand == 300
