"""Seller metrics page -- aggregated catalog and scan figures per seller."""
from nicegui import ui

from src.services.extractors import seller_metric_search_fields
from src.services.queries import get_seller_metrics
from src.ui.components.data_table import Column
from src.ui.components.helpers import (
    field_label, format_date, format_decimal, format_score, load_records, or_dash,
    quality_color, status_badge,
)
from src.ui.components.listing_view import listing_view
from src.ui.layout import build_layout

COLUMNS = [
    Column("seller", "Seller", lambda m: m.display_name),
    Column("city", "City", lambda m: or_dash(m.city)),
    Column("activeListings", "Active Listings", lambda m: m.current_active_listings, align="right"),
    Column("totalHistory", "Total History", lambda m: m.total_listings_history, align="right"),
    Column(
        "qualityScore", "Quality Score",
        lambda m: format_score(m.catalog_quality_score),
        badge=lambda m: quality_color(m.catalog_quality_score),
    ),
    Column("avgRecent", "Avg Recent", lambda m: format_decimal(m.avg_listings_recent), align="right"),
    Column("lastScan", "Last Scan", lambda m: format_date(m.last_scan_date)),
]


def _metric_card(metric):
    ui.label(metric.display_name).classes("text-subtitle1 font-bold")
    if metric.city:
        field_label("City:", metric.city)
    with ui.row().classes("w-full gap-6"):
        field_label("Active", str(metric.current_active_listings), "text-h6 font-bold")
        field_label("Total History", str(metric.total_listings_history), "text-h6 font-bold")
    with ui.row().classes("items-center gap-2"):
        ui.label("Quality Score:").classes("text-body2 text-secondary")
        status_badge(
            format_score(metric.catalog_quality_score),
            quality_color(metric.catalog_quality_score),
        )
    if metric.avg_listings_recent:
        field_label("Avg Recent:", format_decimal(metric.avg_listings_recent))
    if metric.last_scan_date:
        ui.label(f"Last scan: {format_date(metric.last_scan_date)}").classes(
            "text-caption text-secondary pt-2"
        )


def metrics_page():
    """Render the seller metrics listing."""
    content = build_layout("Seller Metrics")
    with content:
        metrics = load_records(get_seller_metrics, "seller metrics")
        listing_view(
            "Seller Metrics",
            metrics,
            seller_metric_search_fields,
            COLUMNS,
            _metric_card,
            subtitle="View aggregated seller performance metrics",
            icon="bar_chart",
        )
