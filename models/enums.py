"""
Centralized Enum definitions for the analytics engine.
"""

from enum import Enum


class Trend(str, Enum):
    """Direction of recent demand"""

    INCREASING = "increasing"
    STABLE = "stable"
    DECREASING = "decreasing"


class StockoutRisk(str, Enum):
    """Likelihood of running out of stock within the forecast window"""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key, most urgent first."""
        return {"high": 0, "medium": 1, "low": 2}[self.value]


class ElasticityType(str, Enum):
    """Classification of price elasticity of demand"""

    ELASTIC = "elastic"  # |PED| > 1.1
    INELASTIC = "inelastic"  # |PED| < 0.9
    UNIT_ELASTIC = "unit_elastic"


class InsightType(str, Enum):
    """Severity/kind of a portfolio-level insight"""

    WARNING = "warning"
    OPPORTUNITY = "opportunity"
    INFO = "info"


class GroupBy(str, Enum):
    """Join key used to group sales records into per-product series"""

    PRODUCT_ID = "product_id"
    PRODUCT_NAME = "product_name"  # Legacy dashboard behaviour
