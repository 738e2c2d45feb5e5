from datetime import datetime
from decimal import Decimal

import pytest

from src.models.seller_metric import SellerMetric
from src.services.utils import to_datetime, to_float, to_int


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 0),
        (7, 7),
        (2**63 + 5, 2**63 + 5),
        (Decimal("12"), 12),
        (Decimal("12.9"), 12),
        (3.0, 3),
        ("1,204", 1204),
        (" 42 ", 42),
        ("", 0),
        ("n/a", 0),
        (float("nan"), 0),
        (True, 0),
    ],
)
def test_to_int(value, expected) -> None:
    assert to_int(value) == expected


def test_to_int_custom_default() -> None:
    assert to_int(None, default=-1) == -1


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        (Decimal("87.50"), 87.5),
        (3, 3.0),
        ("4.25", 4.25),
        ("junk", None),
        (float("inf"), None),
    ],
)
def test_to_float(value, expected) -> None:
    assert to_float(value) == expected


def test_to_float_default() -> None:
    assert to_float(None, 0.0) == 0.0


def test_to_datetime() -> None:
    stamp = datetime(2026, 3, 4, 5, 6, 7)

    assert to_datetime(stamp) is stamp
    assert to_datetime("2026-03-04 05:06:07.000000") == stamp
    assert to_datetime("yesterday") is None
    assert to_datetime(None) is None


def test_seller_metric_from_raw_row() -> None:
    row = {
        "seller_phone": "+51911111111",
        "seller_name": "Ana Phones",
        "city": None,
        "total_listings_history": 2**40,
        "current_active_listings": Decimal("3"),
        "catalog_quality_score": Decimal("66.6667"),
        "avg_listings_recent": None,
        "last_scan_date": "2026-03-04 05:06:07",
    }

    metric = SellerMetric.from_row(row)

    assert metric.total_listings_history == 2**40
    assert isinstance(metric.current_active_listings, int)
    assert metric.current_active_listings == 3
    assert metric.catalog_quality_score == pytest.approx(66.6667)
    assert metric.avg_listings_recent is None
    assert metric.last_scan_date == datetime(2026, 3, 4, 5, 6, 7)
    assert metric.display_name == "Ana Phones"


def test_seller_metric_missing_numbers_default() -> None:
    metric = SellerMetric.from_row({"seller_phone": "+51900000000"})

    assert metric.total_listings_history == 0
    assert metric.current_active_listings == 0
    assert metric.catalog_quality_score == 0.0
    assert metric.display_name == "+51900000000"
