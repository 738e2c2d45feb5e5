from datetime import datetime
from types import SimpleNamespace

from src.ui.components.data_table import Column, build_rows
from src.ui.components.helpers import (
    active_color,
    active_label,
    format_date,
    format_decimal,
    format_price,
    format_score,
    or_dash,
    quality_color,
    scan_status_color,
    short_id,
)
from src.ui.components.listing_view import result_count_text
from src.services.view_state import ViewStateController


def test_short_id_truncates_long_ids() -> None:
    assert short_id("1b9d6bcd-bbfd-4b2d-9b5d-ab8dfbbd4bed") == "1b9d6bcd..."
    assert short_id("abc") == "abc"
    assert short_id(None) == "-"


def test_formatting_helpers() -> None:
    assert format_date(datetime(2026, 5, 17, 13, 45)) == "2026-05-17"
    assert format_date(None) == "-"
    assert format_score(87.456) == "87.5%"
    assert format_decimal(None) == "-"
    assert format_decimal(0.0) == "-"
    assert format_decimal(3.14159) == "3.1"
    assert format_price(2500, "PEN") == "2,500.00 PEN"
    assert format_price(None) == "-"
    assert or_dash("") == "-"
    assert or_dash(0) == "0"


def test_badge_colors() -> None:
    assert active_label(True) == "Active"
    assert active_label(False) == "Inactive"
    assert active_color(True) != active_color(False)
    assert quality_color(80.0) == active_color(True)
    assert quality_color(79.9) == active_color(False)
    assert scan_status_color("FAILED") == "negative"
    assert scan_status_color(None) == "grey-5"


def test_build_rows_renders_cells_and_badge_colors() -> None:
    sellers = [
        SimpleNamespace(phone="+51911111111", active=True),
        SimpleNamespace(phone="+51922222222", active=False),
    ]
    columns = [
        Column("phone", "Phone", lambda s: s.phone),
        Column("status", "Status", lambda s: active_label(s.active), badge=lambda s: active_color(s.active)),
    ]

    rows = build_rows(sellers, columns)

    assert rows[0] == {
        "_row": 0,
        "phone": "+51911111111",
        "status": "Active",
        "status__color": active_color(True),
    }
    assert rows[1]["status"] == "Inactive"


def test_result_count_text() -> None:
    items = [SimpleNamespace(name=n) for n in ("alpha", "beta", "gamma")]
    controller = ViewStateController(items, lambda i: [i.name])

    controller.set_query("a")
    assert result_count_text(controller) == "Showing 3 of 3"

    controller.set_query("ph")
    assert result_count_text(controller) == "Showing 1 of 3"
