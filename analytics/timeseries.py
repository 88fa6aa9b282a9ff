"""Grouping of raw sales records into per-product chronological series."""

import logging
from collections.abc import Iterable, Sequence

import pandas as pd

from models.enums import GroupBy
from models.inventory import ProductSeries
from models.records import ProductSnapshot, SalesRecord

logger = logging.getLogger(__name__)

_COLUMNS = [
    "product_id",
    "product_name",
    "category",
    "quantity",
    "sale_date",
    "current_stock",
    "min_stock",
]


def sales_to_frame(records: Iterable[SalesRecord]) -> pd.DataFrame:
    """Materialize sales records as a DataFrame sorted by sale date (stable)."""
    rows = [record.model_dump(include=set(_COLUMNS)) for record in records]
    frame = pd.DataFrame(rows, columns=_COLUMNS)
    if frame.empty:
        return frame
    frame["sale_date"] = pd.to_datetime(frame["sale_date"])
    return frame.sort_values("sale_date", kind="stable").reset_index(drop=True)


def _snapshot_key(product: ProductSnapshot, group_by: GroupBy) -> str:
    return product.id if group_by == GroupBy.PRODUCT_ID else product.name


def aggregate_sales(
    records: Sequence[SalesRecord],
    products: Sequence[ProductSnapshot] = (),
    group_by: GroupBy = GroupBy.PRODUCT_ID,
) -> dict[str, ProductSeries]:
    """
    Group sales records by product into ascending-by-date quantity series.

    Args:
        records: Sales transactions in any order.
        products: Catalogue snapshot. Products without sales get an empty series
            and, when present, their stock levels take precedence over the ones
            copied onto the sales records.
        group_by: Join key. ``GroupBy.PRODUCT_NAME`` reproduces the legacy
            dashboard grouping, where renamed products split into two series.

    Returns:
        Mapping of join key -> ProductSeries. Series built from sales come first
        in order of their earliest sale, followed by sales-less products.
    """
    group_by = GroupBy(group_by)
    snapshots = {_snapshot_key(p, group_by): p for p in products}
    series: dict[str, ProductSeries] = {}

    frame = sales_to_frame(records)
    if not frame.empty:
        key_column = group_by.value
        for key, group in frame.groupby(key_column, sort=False):
            latest = group.iloc[-1]
            snapshot = snapshots.get(key)
            series[key] = ProductSeries(
                product_id=snapshot.id if snapshot else str(group.iloc[0]["product_id"]),
                product_name=snapshot.name if snapshot else str(group.iloc[0]["product_name"]),
                category=snapshot.category if snapshot else str(latest["category"]),
                current_stock=(
                    snapshot.current_stock if snapshot else int(latest["current_stock"])
                ),
                min_stock=snapshot.min_stock if snapshot else int(latest["min_stock"]),
                quantities=[int(q) for q in group["quantity"]],
                dates=[ts.date() for ts in group["sale_date"]],
            )
        if group_by == GroupBy.PRODUCT_NAME:
            ids_per_name = frame.groupby("product_name")["product_id"].nunique()
            merged = ids_per_name[ids_per_name > 1]
            if not merged.empty:
                logger.warning(
                    f"Name grouping merged records of different product ids for: "
                    f"{', '.join(map(str, merged.index))}"
                )

    for key, product in snapshots.items():
        if key not in series:
            series[key] = ProductSeries(
                product_id=product.id,
                product_name=product.name,
                category=product.category,
                current_stock=product.current_stock,
                min_stock=product.min_stock,
            )

    logger.debug(
        f"Aggregated {len(records)} sales records into {len(series)} product series"
    )
    return series
