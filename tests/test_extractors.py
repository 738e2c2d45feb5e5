from datetime import datetime
from types import SimpleNamespace

from src.models.seller_metric import SellerMetric
from src.services.extractors import (
    product_history_search_fields,
    product_search_fields,
    scan_log_search_fields,
    seller_metric_search_fields,
    seller_search_fields,
)
from src.services.search_filter import filter_items

ANA = SimpleNamespace(phone_number="+51911111111", name="Ana Phones", city="Lima", is_active=True)
BETO = SimpleNamespace(phone_number="+51922222222", name=None, city=None, is_active=False)


def _product(**overrides):
    fields = dict(
        id="aaaaaaaa-1111", seller_phone=ANA.phone_number, seller=ANA, raw_name="iPhone 13",
        raw_description="Como nuevo", model_name="iPhone 13", storage_gb="128GB", color="Azul",
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_seller_fields_include_status_label() -> None:
    assert seller_search_fields(ANA) == ["+51911111111", "Ana Phones", "Lima", "active"]
    assert seller_search_fields(BETO)[-1] == "inactive"


def test_inactive_query_does_not_match_active_sellers_by_accident() -> None:
    # "active" is a substring of "inactive", not the other way round
    assert filter_items([ANA, BETO], seller_search_fields, "inactive") == [BETO]
    assert filter_items([ANA, BETO], seller_search_fields, "active") == [ANA, BETO]


def test_product_fields_cover_seller() -> None:
    fields = product_search_fields(_product())

    assert "Ana Phones" in fields
    assert "+51911111111" in fields
    assert "Azul" in fields


def test_product_without_loaded_seller_falls_back_to_phone() -> None:
    fields = product_search_fields(_product(seller=None))

    assert fields[-2] is None
    assert fields[-1] == ANA.phone_number


def test_history_fields() -> None:
    entry = SimpleNamespace(product=_product(), change_type="price_change", availability="in_stock")

    fields = product_history_search_fields(entry)

    assert fields == ["iPhone 13", "Ana Phones", "+51911111111", "price_change", "in_stock"]


def test_history_fields_without_product() -> None:
    entry = SimpleNamespace(product=None, change_type="removed", availability=None)

    assert product_history_search_fields(entry) == [None, None, None, "removed", None]


def test_scan_log_fields() -> None:
    log = SimpleNamespace(seller_phone=ANA.phone_number, seller=ANA, status="failed",
                          error_message="timeout")

    assert scan_log_search_fields(log) == ["+51911111111", "Ana Phones", "Lima", "failed", "timeout"]


def test_metric_fields_include_numbers_as_text() -> None:
    metric = SellerMetric(
        seller_phone="+51911111111", seller_name=None, city="Lima",
        total_listings_history=120, current_active_listings=14, catalog_quality_score=87.5,
        avg_listings_recent=None, last_scan_date=datetime(2026, 1, 2),
    )

    fields = seller_metric_search_fields(metric)

    assert fields == ["+51911111111", None, "Lima", "120", "14", "87.5"]
    assert filter_items([metric], seller_metric_search_fields, "87.5") == [metric]
