"""Shared UI helper functions and design tokens for listing pages."""
from collections.abc import Callable
from datetime import datetime

from nicegui import ui
from sqlalchemy.exc import SQLAlchemyError

from config import QUALITY_SCORE_HIGHLIGHT


# ─── Design Tokens ────────────────────────────────────────────────────────────

# Card & layout
INPUT_PROPS = "outlined dense"
HOVER_BG = "hover:bg-grey-2"
CARD_GRID_STYLE = "grid-template-columns: repeat(auto-fill, minmax(280px, 1fr))"

# Nav active-state tokens (centralized hex values used in layout.py JS)
NAV_ACTIVE_BG = "#E3E8EF"
NAV_ACTIVE_BORDER = "#1E293B"
NAV_ACTIVE_TEXT = "#0F172A"

# Fallback text for empty cells
NA_TEXT = "-"


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")


def field_label(label: str, value: str, value_classes: str = "font-medium"):
    """Render a small caption + value pair used inside cards."""
    with ui.column().classes("gap-0"):
        ui.label(label).classes("text-caption text-secondary")
        ui.label(value).classes(value_classes)


# ─── Status Badges ────────────────────────────────────────────────────────────

# Active/inactive badge colors (sellers, products, history entries)
ACTIVE_COLOR = "primary"
INACTIVE_COLOR = "grey-5"

# Scan log status badge colors
SCAN_STATUS_COLORS = {
    "success": "positive",
    "partial": "warning",
    "failed": "negative",
}


def active_label(is_active) -> str:
    return "Active" if is_active else "Inactive"


def active_color(is_active) -> str:
    return ACTIVE_COLOR if is_active else INACTIVE_COLOR


def scan_status_color(status: str | None) -> str:
    return SCAN_STATUS_COLORS.get((status or "").lower(), "grey-5")


def quality_color(score: float) -> str:
    """Primary badge for a catalog quality score at/above the highlight level."""
    return ACTIVE_COLOR if score >= QUALITY_SCORE_HIGHLIGHT else INACTIVE_COLOR


def status_badge(label: str, color: str):
    return ui.badge(label, color=color)


# ─── Formatting ───────────────────────────────────────────────────────────────


def format_date(value: datetime | None, na_text: str = NA_TEXT) -> str:
    """Format a timestamp as a date (YYYY-MM-DD)."""
    if value is None:
        return na_text
    return value.strftime("%Y-%m-%d")


def format_datetime(value: datetime | None, na_text: str = NA_TEXT) -> str:
    if value is None:
        return na_text
    return value.strftime("%Y-%m-%d %H:%M")


def format_score(score: float | None, na_text: str = NA_TEXT) -> str:
    """Format a percentage score with one decimal: ``87.5%``."""
    if score is None:
        return na_text
    return f"{score:.1f}%"


def format_decimal(value: float | None, na_text: str = NA_TEXT) -> str:
    """One-decimal number; ``None`` and zero show *na_text*."""
    if not value:
        return na_text
    return f"{value:.1f}"


def format_price(price: float | None, currency: str | None = None, na_text: str = NA_TEXT) -> str:
    if price is None:
        return na_text
    return f"{price:,.2f} {currency}" if currency else f"{price:,.2f}"


def short_id(value: str | None, length: int = 8) -> str:
    """Truncate a long identifier for display: ``1b9d6bcd...``."""
    if not value:
        return NA_TEXT
    return f"{value[:length]}..." if len(value) > length else value


def or_dash(value) -> str:
    return str(value) if value not in (None, "") else NA_TEXT


# ─── Data loading ─────────────────────────────────────────────────────────────


def load_records(loader: Callable[[], list], label: str) -> list:
    """Run a bulk query for a page; on database errors notify and show nothing.

    The query layer has already logged the exception.
    """
    try:
        return loader()
    except SQLAlchemyError:
        ui.notify(f"Could not load {label}. Check the database connection.", type="negative")
        return []
