"""Scan logs page -- one row per scanner run."""
from nicegui import ui

from src.services.extractors import scan_log_search_fields
from src.services.queries import get_scan_logs
from src.ui.components.data_table import Column
from src.ui.components.helpers import (
    field_label, format_datetime, load_records, or_dash, scan_status_color, status_badge,
)
from src.ui.components.listing_view import listing_view
from src.ui.layout import build_layout


def _seller_name(log) -> str:
    if log.seller is None:
        return log.seller_phone
    return log.seller.display_name


def _status_label(log) -> str:
    return (log.status or "unknown").title()


def _duration(log) -> str:
    if log.duration_ms is None:
        return "-"
    return f"{log.duration_ms / 1000:.1f}s"


COLUMNS = [
    Column("scanTime", "Scan Time", lambda log: format_datetime(log.scan_time)),
    Column("seller", "Seller", _seller_name),
    Column("city", "City", lambda log: or_dash(log.seller.city if log.seller else None)),
    Column(
        "status", "Status", _status_label,
        badge=lambda log: scan_status_color(log.status),
    ),
    Column("found", "Found", lambda log: or_dash(log.products_found), align="right"),
    Column("new", "New", lambda log: or_dash(log.new_products), align="right"),
    Column("removed", "Removed", lambda log: or_dash(log.removed_products), align="right"),
    Column("duration", "Duration", _duration, align="right"),
]


def _scan_log_card(log):
    ui.label(_seller_name(log)).classes("text-subtitle1 font-bold")
    status_badge(_status_label(log), scan_status_color(log.status))
    with ui.row().classes("w-full gap-4"):
        field_label("Found", or_dash(log.products_found), "text-h6 font-bold")
        field_label("New", or_dash(log.new_products), "text-h6 font-bold")
        field_label("Removed", or_dash(log.removed_products), "text-h6 font-bold")
    if log.error_message:
        ui.label(log.error_message).classes("text-caption text-negative")
    ui.label(f"Scanned: {format_datetime(log.scan_time)} ({_duration(log)})").classes(
        "text-caption text-secondary pt-2"
    )


def scan_logs_page():
    """Render the scan logs listing."""
    content = build_layout("Scan Logs")
    with content:
        logs = load_records(get_scan_logs, "scan logs")
        listing_view(
            "Scan Logs",
            logs,
            scan_log_search_fields,
            COLUMNS,
            _scan_log_card,
            subtitle="Review storefront scanner runs and their outcomes",
            icon="description",
        )
