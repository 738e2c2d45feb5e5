"""Sellers page -- every seller the scanner tracks."""
from nicegui import ui

from src.services.extractors import seller_search_fields
from src.services.queries import get_sellers
from src.ui.components.data_table import Column
from src.ui.components.helpers import (
    active_color, active_label, field_label, format_date, load_records, or_dash, status_badge,
)
from src.ui.components.listing_view import listing_view
from src.ui.layout import build_layout

COLUMNS = [
    Column("phoneNumber", "Phone Number", lambda s: s.phone_number),
    Column("name", "Name", lambda s: or_dash(s.name)),
    Column("city", "City", lambda s: or_dash(s.city)),
    Column(
        "isActive", "Status",
        lambda s: active_label(s.is_active),
        badge=lambda s: active_color(s.is_active),
    ),
    Column("createdAt", "Created", lambda s: format_date(s.created_at)),
]


def _seller_card(seller):
    ui.label(seller.name or "Unnamed Seller").classes("text-subtitle1 font-bold")
    field_label("Phone:", seller.phone_number)
    if seller.city:
        field_label("City:", seller.city)
    status_badge(active_label(seller.is_active), active_color(seller.is_active))
    ui.label(f"Created: {format_date(seller.created_at)}").classes(
        "text-caption text-secondary pt-2"
    )


def sellers_page():
    """Render the sellers listing."""
    content = build_layout("Sellers")
    with content:
        sellers = load_records(get_sellers, "sellers")
        listing_view(
            "Sellers",
            sellers,
            seller_search_fields,
            COLUMNS,
            _seller_card,
            subtitle="Manage and view all sellers in the system",
            icon="people",
        )
