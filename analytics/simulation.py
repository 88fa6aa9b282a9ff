"""Demand, revenue and margin simulation over a grid of price changes."""

from analytics.optimal_price import simulate_demand
from config.config import SimulationGrid
from models.pricing import PriceSimulationPoint
from utils.numeric import round_half_up


def simulate_price_point(
    change_percent: float,
    current_price: float,
    current_demand: int,
    cost_price: float,
    elasticity: float,
) -> PriceSimulationPoint:
    price = round_half_up(current_price * (1 + change_percent / 100))
    demand = simulate_demand(current_price, current_demand, price, elasticity)
    revenue = price * demand
    profit = (price - cost_price) * demand
    margin = profit / revenue * 100 if revenue > 0 else 0.0
    return PriceSimulationPoint(
        price_change_percent=change_percent,
        simulated_price=price,
        simulated_demand=demand,
        simulated_revenue=revenue,
        profit_margin=round_half_up(margin * 10) / 10,
    )


def generate_price_simulations(
    current_price: float,
    current_demand: int,
    cost_price: float,
    elasticity: float,
    grid: SimulationGrid | None = None,
) -> list[PriceSimulationPoint]:
    """
    Simulate every price change in ``grid`` (default -10%..+10% in 2.5% steps).
    The 0% point reproduces the current price and demand.
    """
    grid = grid or SimulationGrid()
    return [
        simulate_price_point(change, current_price, current_demand, cost_price, elasticity)
        for change in grid.changes()
    ]
