"""
Input records handed to the analytics engine by the persistence layer.
Validated once at construction; the engine treats them as read-only.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class SalesRecord(BaseModel):
    """One sales transaction joined with the product's stock levels"""

    model_config = ConfigDict(frozen=True)

    product_id: str
    product_name: str
    category: str = ""
    quantity: int = Field(ge=0)
    unit_price: float = Field(gt=0)
    sale_date: date
    current_stock: int = 0
    min_stock: int = 0

    @property
    def total(self) -> float:
        return self.quantity * self.unit_price


class ProductSnapshot(BaseModel):
    """Current catalogue entry for a product"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str = ""
    current_stock: int = Field(default=0, ge=0)
    min_stock: int = Field(default=0, ge=0)
    cost_price: float = Field(default=0.0, ge=0)
    selling_price: float = Field(gt=0)


class CompetitorQuote(BaseModel):
    """A price observed at a competitor, as stored by the scraper"""

    model_config = ConfigDict(frozen=True)

    competitor_name: str
    price: float = Field(ge=0)
    product_id: str | None = None
    product_name: str | None = None
    recorded_at: datetime | None = None
