"""Product history page -- price and availability changes over time."""
from nicegui import ui

from src.services.extractors import product_history_search_fields
from src.services.queries import get_product_history
from src.ui.components.data_table import Column
from src.ui.components.helpers import (
    active_color, active_label, field_label, format_datetime, format_price, load_records,
    or_dash, status_badge,
)
from src.ui.components.listing_view import listing_view
from src.ui.layout import build_layout


def _product_name(entry) -> str:
    product = entry.product
    if product is None:
        return "-"
    return product.raw_name or product.model_name or "-"


def _seller_name(entry) -> str:
    product = entry.product
    if product is None or product.seller is None:
        return "-"
    return product.seller.display_name


def _change_label(entry) -> str:
    return (entry.change_type or "").replace("_", " ").title() or "-"


COLUMNS = [
    Column("recordedAt", "Recorded", lambda h: format_datetime(h.recorded_at)),
    Column("product", "Product", _product_name),
    Column("seller", "Seller", _seller_name),
    Column("change", "Change", _change_label),
    Column("price", "Price", lambda h: format_price(h.price, h.currency), align="right"),
    Column("availability", "Availability", lambda h: or_dash(h.availability)),
    Column(
        "status", "Status",
        lambda h: active_label(h.is_active),
        badge=lambda h: active_color(h.is_active),
    ),
]


def _history_card(entry):
    ui.label(_product_name(entry)).classes("text-subtitle1 font-bold")
    field_label("Seller:", _seller_name(entry))
    field_label("Change:", _change_label(entry))
    if entry.price is not None:
        field_label("Price:", format_price(entry.price, entry.currency))
    if entry.availability:
        field_label("Availability:", entry.availability)
    status_badge(active_label(entry.is_active), active_color(entry.is_active))
    ui.label(f"Recorded: {format_datetime(entry.recorded_at)}").classes(
        "text-caption text-secondary pt-2"
    )


def product_history_page():
    """Render the product history listing."""
    content = build_layout("Product History")
    with content:
        history = load_records(get_product_history, "product history")
        listing_view(
            "Product History",
            history,
            product_history_search_fields,
            COLUMNS,
            _history_card,
            subtitle="Track price and availability changes for every product",
            icon="history",
        )
