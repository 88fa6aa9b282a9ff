import sys
from datetime import date, timedelta
from pathlib import Path

import pytest

# Ensure project root is on sys.path to allow `import analytics`, `import utils`, etc.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from models.records import CompetitorQuote, ProductSnapshot, SalesRecord  # noqa: E402

START = date(2024, 1, 1)


def make_sales(
    product_id: str,
    name: str,
    quantities: list[int],
    prices: list[float] | None = None,
    current_stock: int = 50,
    min_stock: int = 10,
    start: date = START,
) -> list[SalesRecord]:
    """One sales record per week for ``product_id``."""
    prices = prices or [100.0] * len(quantities)
    return [
        SalesRecord(
            product_id=product_id,
            product_name=name,
            category="Test",
            quantity=qty,
            unit_price=price,
            sale_date=start + timedelta(weeks=i),
            current_stock=current_stock,
            min_stock=min_stock,
        )
        for i, (qty, price) in enumerate(zip(quantities, prices))
    ]


@pytest.fixture
def widget() -> ProductSnapshot:
    return ProductSnapshot(
        id="P1",
        name="Widget",
        category="Test",
        current_stock=50,
        min_stock=10,
        cost_price=60.0,
        selling_price=100.0,
    )


@pytest.fixture
def gadget() -> ProductSnapshot:
    return ProductSnapshot(
        id="P2",
        name="Gadget",
        category="Test",
        current_stock=2,
        min_stock=10,
        cost_price=600.0,
        selling_price=1000.0,
    )


@pytest.fixture
def widget_sales() -> list[SalesRecord]:
    return make_sales("P1", "Widget", [10, 10, 10, 10], [100.0, 100.0, 110.0, 110.0])


@pytest.fixture
def gadget_sales() -> list[SalesRecord]:
    return make_sales("P2", "Gadget", [10, 12, 14, 16, 18], current_stock=2, min_stock=10)


@pytest.fixture
def competitor_quotes() -> list[CompetitorQuote]:
    return [
        CompetitorQuote(competitor_name="Octagon", price=120.0, product_id="P1"),
        CompetitorQuote(competitor_name="Villman", price=130.0, product_id="P1"),
    ]
