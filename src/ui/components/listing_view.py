"""Searchable, paginated listing with a table/cards toggle.

Every listing page renders through :func:`listing_view`: it mounts one
:class:`ViewStateController` over the loaded records and redraws the body,
the result counter and the pagination bar whenever the controller changes.
"""
import logging
from collections.abc import Callable
from typing import Any

from nicegui import ui

from config import DEFAULT_PAGE_SIZE
from src.services.search_filter import Extractor
from src.services.view_state import ViewStateController
from src.ui.components.card_grid import card_grid
from src.ui.components.data_table import Column, data_table
from src.ui.components.helpers import INPUT_PROPS, page_header
from src.ui.components.pagination import PaginationBar

logger = logging.getLogger(__name__)

VIEW_MODES = {"table": "Table", "cards": "Cards"}


def result_count_text(controller: ViewStateController) -> str:
    """The "Showing X of Y" counter: matches vs. everything loaded."""
    return f"Showing {controller.total_count} of {controller.source_count}"


def listing_view(
    title: str,
    records: list,
    extractor: Extractor,
    columns: list[Column],
    render_card: Callable[[Any], None],
    subtitle: str | None = None,
    icon: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ViewStateController:
    """Render a full listing screen and return its controller."""
    controller = ViewStateController(records, extractor, page_size=page_size)
    logger.debug("Mounted %s listing with %d records", title, len(records))

    with ui.row().classes("w-full items-start justify-between"):
        with ui.column().classes("gap-1"):
            page_header(title, subtitle=subtitle, icon=icon)
        view_toggle = ui.toggle(VIEW_MODES, value="table").props("dense no-caps")

    with ui.row().classes("w-full items-center gap-3"):
        search_input = ui.input(
            placeholder=f"Search {title.lower()}...", value=controller.query,
        ).props(f"{INPUT_PROPS} clearable").classes("w-80")
        search_input.props('prepend-inner-icon="search"')
        count_label = ui.label(result_count_text(controller)).classes(
            "text-body2 text-secondary"
        )

    @ui.refreshable
    def _body():
        if view_toggle.value == "cards":
            card_grid(controller.paginated_data, render_card)
        else:
            data_table(controller.paginated_data, columns)

    with ui.column().classes("w-full gap-0"):
        _body()
        ui.separator()
        pagination_bar = PaginationBar(controller)

    def _on_view_change(ctrl: ViewStateController):
        count_label.text = result_count_text(ctrl)
        _body.refresh()
        pagination_bar.update()

    controller.subscribe(_on_view_change)
    search_input.on_value_change(lambda e: controller.set_query(e.value))
    view_toggle.on_value_change(lambda _: _body.refresh())
    return controller
