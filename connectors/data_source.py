"""
Module: connectors.data_source

Interface of the persistence collaborator that feeds the analytics engine.
"""

from typing import Protocol, runtime_checkable

from models.records import CompetitorQuote, ProductSnapshot, SalesRecord


@runtime_checkable
class AnalyticsDataSource(Protocol):
    """
    Anything that can materialize sales, catalogue and competitor data in memory.
    All fetching happens before the engine runs; the engine itself never awaits.
    """

    async def get_sales_records(self) -> list[SalesRecord]: ...

    async def get_products(self) -> list[ProductSnapshot]: ...

    async def get_competitor_prices(self) -> list[CompetitorQuote]: ...
