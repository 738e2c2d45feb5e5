"""Shared layout: header, sidebar navigation, and content area."""
from nicegui import ui

from config import APP_TITLE
from src.ui.components.helpers import HOVER_BG, NAV_ACTIVE_BG, NAV_ACTIVE_BORDER, NAV_ACTIVE_TEXT

# (label, material icon, path) in sidebar order
NAVIGATION = [
    ("Sellers", "people", "/sellers"),
    ("Products", "inventory_2", "/products"),
    ("Product History", "history", "/product-history"),
    ("Scan Logs", "description", "/scan-logs"),
    ("Seller Metrics", "bar_chart", "/metrics"),
]


# JavaScript to highlight the current sidebar nav link on page load.
_ACTIVE_NAV_JS = f"""
(function() {{
    var path = window.location.pathname;
    var links = document.querySelectorAll('.q-drawer a[href]');
    links.forEach(function(a) {{
        if (a.getAttribute('href') !== path) {{
            return;
        }}
        var row = a.querySelector('.row, .q-item');
        if (row) {{
            row.style.background = '{NAV_ACTIVE_BG}';
            row.style.borderLeft = '3px solid {NAV_ACTIVE_BORDER}';
        }}
        a.querySelectorAll('.text-secondary').forEach(function(child) {{
            child.style.color = '{NAV_ACTIVE_TEXT}';
            child.style.fontWeight = '600';
        }});
    }});
}})();
"""


def build_layout(title: str = APP_TITLE):
    """Create the shared page layout with sidebar navigation."""
    ui.page_title(title)
    ui.colors(
        primary="#1E293B",
        secondary="#64748B",
        accent="#2563EB",
        positive="#16A34A",
        negative="#DC2626",
    )

    with ui.header().classes("items-center px-4 bg-primary"):
        ui.label(APP_TITLE).classes("text-subtitle1 text-white font-bold")

    # Left drawer (sidebar nav)
    with ui.left_drawer(value=True).classes("bg-grey-1") as drawer:
        drawer.props("width=256 bordered")
        ui.label("Dashboard").classes("text-h6 px-4 py-3")
        ui.separator().classes("mb-2")
        for label, icon, path in NAVIGATION:
            _nav_link(label, icon, path)

    # Highlight active sidebar nav link after page loads
    ui.timer(0.1, lambda: ui.run_javascript(_ACTIVE_NAV_JS), once=True)

    # Main content container
    content = ui.column().classes("w-full p-6 max-w-7xl mx-auto gap-4")
    return content


def _nav_link(label: str, icon: str, path: str):
    """Render a main sidebar nav item."""
    with ui.link(target=path).classes("no-underline w-full"):
        with ui.row().classes(
            "items-center gap-3 px-4 py-2 rounded-lg w-full "
            f"{HOVER_BG} cursor-pointer"
        ):
            ui.icon(icon).classes("text-secondary")
            ui.label(label).classes("text-body1 text-secondary")
