"""
Module: connectors.dummy_sales_store

Provides a dummy in-memory sales/catalogue/competitor store for demos and tests.
Rows are kept in the shape the database returns them and validated into the
engine's record models on the way out.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any
import asyncio
import logging

from models.records import CompetitorQuote, ProductSnapshot, SalesRecord

logger = logging.getLogger(__name__)

_WEEK_ONE = date(2024, 11, 4)


def _weekly(product_id: str, quantities: list[int], prices: list[float]) -> list[dict[str, Any]]:
    return [
        {
            "product_id": product_id,
            "quantity": qty,
            "unit_price": price,
            "sale_date": _WEEK_ONE + timedelta(weeks=week),
        }
        for week, (qty, price) in enumerate(zip(quantities, prices))
    ]


class DummySalesStore:
    """
    Dummy persistence connector for products, sales and competitor prices.
    """

    _products: dict[str, dict[str, Any]] = {
        "1": {"id": "1", "name": "Dell XPS 13 Laptop", "category": "Laptops",
              "current_stock": 12, "min_stock": 5, "cost_price": 55000, "selling_price": 72000},
        "2": {"id": "2", "name": "Logitech MX Master 3S", "category": "Accessories",
              "current_stock": 45, "min_stock": 15, "cost_price": 4500, "selling_price": 5999},
        "3": {"id": "3", "name": "Logitech C920 HD Pro Webcam", "category": "Peripherals",
              "current_stock": 8, "min_stock": 10, "cost_price": 3200, "selling_price": 4299},
        "6": {"id": "6", "name": "Samsung 970 EVO Plus 1TB", "category": "Storage",
              "current_stock": 32, "min_stock": 15, "cost_price": 5500, "selling_price": 7499},
        "7": {"id": "7", "name": "Apple AirPods Pro 2", "category": "Audio",
              "current_stock": 3, "min_stock": 8, "cost_price": 12000, "selling_price": 14999},
        "12": {"id": "12", "name": "Blue Yeti X Microphone", "category": "Audio",
               "current_stock": 0, "min_stock": 5, "cost_price": 7000, "selling_price": 8999},
    }
    _sales: list[dict[str, Any]] = (
        _weekly("1", [2, 3, 2, 4, 3, 5], [72000, 72000, 69000, 69000, 72000, 68000])
        + _weekly("2", [5, 6, 5, 7, 8, 9], [5999, 5999, 5799, 5799, 5599, 5599])
        + _weekly("3", [4, 4, 5, 4, 5], [4299] * 5)
        + _weekly("6", [10, 8, 8, 6, 5, 4], [7499, 7499, 7799, 7799, 7999, 7999])
        + _weekly("7", [3, 4, 4, 5], [14999, 14999, 14499, 14499])
    )
    _competitor_prices: list[dict[str, Any]] = [
        {"product_id": "1", "product_name": "Dell XPS 13 Laptop", "competitor_name": "Octagon",
         "price": 74990, "recorded_at": datetime(2024, 12, 20, tzinfo=timezone.utc)},
        {"product_id": "1", "product_name": "Dell XPS 13 Laptop", "competitor_name": "Villman",
         "price": 71500, "recorded_at": datetime(2024, 12, 20, tzinfo=timezone.utc)},
        {"product_id": "1", "product_name": "Dell XPS 13 Laptop", "competitor_name": "Octagon",
         "price": 76990, "recorded_at": datetime(2024, 12, 1, tzinfo=timezone.utc)},
        {"product_id": "2", "product_name": "Logitech MX Master 3S", "competitor_name": "PC Express",
         "price": 6495, "recorded_at": datetime(2024, 12, 18, tzinfo=timezone.utc)},
        {"product_id": None, "product_name": "samsung 970 evo plus 1tb", "competitor_name": "Villman",
         "price": 6850, "recorded_at": datetime(2024, 12, 15, tzinfo=timezone.utc)},
    ]

    async def get_products(self) -> list[ProductSnapshot]:
        """Get the catalogue snapshot."""
        await asyncio.sleep(0.01)
        return [ProductSnapshot.model_validate(row) for row in self._products.values()]

    async def get_product(self, pid: str) -> ProductSnapshot | None:
        """Get one product by ID."""
        await asyncio.sleep(0.01)
        row = self._products.get(pid)
        return ProductSnapshot.model_validate(row) if row else None

    async def get_sales_records(self) -> list[SalesRecord]:
        """Get every sale joined with its product's name and stock levels."""
        await asyncio.sleep(0.01)
        records = []
        for sale in self._sales:
            product = self._products.get(sale["product_id"])
            if product is None:
                # Same as an inner join on products
                logger.warning(f"Dropping sale for unknown product {sale['product_id']}")
                continue
            records.append(
                SalesRecord.model_validate(
                    {
                        **sale,
                        "product_name": product["name"],
                        "category": product["category"],
                        "current_stock": product["current_stock"],
                        "min_stock": product["min_stock"],
                    }
                )
            )
        return records

    async def get_competitor_prices(self) -> list[CompetitorQuote]:
        """Get competitor quotes, newest first."""
        await asyncio.sleep(0.01)
        rows = sorted(self._competitor_prices, key=lambda r: r["recorded_at"], reverse=True)
        return [CompetitorQuote.model_validate(row) for row in rows]
