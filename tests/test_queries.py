from datetime import datetime, timedelta

import pytest
from sqlalchemy import inspect

from src.models.database import METRICS_VIEW, engine, init_db
from src.services.extractors import product_history_search_fields, product_search_fields
from src.services.queries import (
    get_product_history,
    get_products,
    get_scan_logs,
    get_seller_metrics,
    get_sellers,
)
from src.services.view_state import ViewStateController


def test_init_db_creates_tables_view_and_indexes(db) -> None:
    inspector = inspect(engine)

    assert {"sellers", "products", "product_history", "scan_logs"} <= set(inspector.get_table_names())
    assert METRICS_VIEW in inspector.get_view_names()
    assert "ix_scan_logs_scan_time" in {idx["name"] for idx in inspector.get_indexes("scan_logs")}


def test_init_db_is_idempotent(db) -> None:
    init_db()

    assert METRICS_VIEW in inspect(engine).get_view_names()


def test_empty_database_returns_empty_collections(db) -> None:
    assert get_sellers() == []
    assert get_products() == []
    assert get_product_history() == []
    assert get_scan_logs() == []
    assert get_seller_metrics() == []


def test_sellers_newest_first(seeded_db) -> None:
    sellers = get_sellers()

    assert [s.phone_number for s in sellers] == ["+51922222222", "+51911111111"]


def test_products_most_recently_seen_first_with_seller_loaded(seeded_db) -> None:
    products = get_products()

    assert [p.raw_name for p in products] == ["Moto G", "iPhone 13 128GB Azul", "Galaxy S21"]
    # relationships were eager-loaded, so they survive the closed session
    assert products[1].seller.name == "Ana Phones"
    assert product_search_fields(products[1])[-2] == "Ana Phones"


def test_product_history_newest_first(seeded_db) -> None:
    history = get_product_history()

    assert [h.change_type for h in history] == ["price_change", "created"]
    assert history[0].product.seller.phone_number == "+51911111111"
    assert "iPhone 13 128GB Azul" in product_history_search_fields(history[0])


def test_scan_logs_newest_first(seeded_db) -> None:
    logs = get_scan_logs()

    assert [log.products_found for log in logs] == [6, 4, 100]
    assert logs[2].seller.city == "Lima"


def test_seller_metrics_are_aggregated_and_converted(seeded_db) -> None:
    ana, beto = get_seller_metrics()

    assert ana.seller_phone == "+51911111111"
    assert ana.seller_name == "Ana Phones"
    assert ana.total_listings_history == 2
    assert ana.current_active_listings == 1
    assert ana.catalog_quality_score == pytest.approx(100.0)
    # the 30-day-old scan is outside the recent window
    assert ana.avg_listings_recent == pytest.approx(5.0)
    assert isinstance(ana.last_scan_date, datetime)
    assert datetime.utcnow() - ana.last_scan_date < timedelta(hours=3)

    assert beto.seller_name is None
    assert beto.display_name == "+51922222222"
    assert beto.total_listings_history == 1
    assert beto.current_active_listings == 1
    assert beto.catalog_quality_score == 0.0
    assert beto.avg_listings_recent is None
    assert beto.last_scan_date is None


def test_loaded_products_feed_a_controller(seeded_db) -> None:
    controller = ViewStateController(get_products(), product_search_fields, page_size=2)

    controller.set_query("ana phones")

    assert controller.total_count == 2
    assert controller.total_pages == 1
    assert [p.raw_name for p in controller.paginated_data] == ["iPhone 13 128GB Azul", "Galaxy S21"]
