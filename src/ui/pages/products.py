"""Products page -- every listing seen on a seller's storefront."""
from nicegui import ui

from src.services.extractors import product_search_fields
from src.services.queries import get_products
from src.ui.components.data_table import Column
from src.ui.components.helpers import (
    active_color, active_label, field_label, format_date, load_records, or_dash,
    short_id, status_badge,
)
from src.ui.components.listing_view import listing_view
from src.ui.layout import build_layout


def _seller_name(product) -> str:
    if product.seller is None:
        return product.seller_phone
    return product.seller.display_name


COLUMNS = [
    Column("id", "ID", lambda p: short_id(p.id)),
    Column("name", "Name", lambda p: p.raw_name or p.model_name or "-"),
    Column("seller", "Seller", _seller_name),
    Column("model", "Model", lambda p: or_dash(p.model_name)),
    Column("storage", "Storage", lambda p: or_dash(p.storage_gb)),
    Column("color", "Color", lambda p: or_dash(p.color)),
    Column(
        "status", "Status",
        lambda p: active_label(p.is_active),
        badge=lambda p: active_color(p.is_active),
    ),
    Column("lastSeen", "Last Seen", lambda p: format_date(p.last_seen_at)),
]


def _product_card(product):
    ui.label(product.display_name).classes("text-subtitle1 font-bold")
    field_label("Seller:", _seller_name(product))
    if product.model_name:
        field_label("Model:", product.model_name)
    details = [v for v in (product.storage_gb, product.color) if v]
    if details:
        ui.label(" • ".join(details)).classes("text-body2")
    status_badge(active_label(product.is_active), active_color(product.is_active))
    ui.label(f"Last seen: {format_date(product.last_seen_at)}").classes(
        "text-caption text-secondary pt-2"
    )


def products_page():
    """Render the products listing."""
    content = build_layout("Products")
    with content:
        products = load_records(get_products, "products")
        listing_view(
            "Products",
            products,
            product_search_fields,
            COLUMNS,
            _product_card,
            subtitle="View and manage all products",
            icon="inventory_2",
        )
