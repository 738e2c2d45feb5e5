"""Pagination bar bound to a ViewStateController."""
from nicegui import ui

from config import MAX_PAGE_SIZE, MIN_PAGE_SIZE
from src.services.view_state import ViewStateController
from src.ui.components.helpers import INPUT_PROPS


class PaginationBar:
    """Items-per-page input, previous/next buttons and a "Page X of Y" label.

    Sends page and page-size changes to the controller; call :meth:`update`
    after the controller recomputes.
    """

    def __init__(self, controller: ViewStateController):
        self.controller = controller
        with ui.row().classes("w-full items-center justify-between px-4 py-3"):
            with ui.row().classes("items-center gap-2"):
                self.size_input = ui.number(
                    "Items per page",
                    value=controller.items_per_page,
                    min=MIN_PAGE_SIZE,
                    max=MAX_PAGE_SIZE,
                    step=1,
                    format="%d",
                    on_change=lambda e: self._on_size_change(e.value),
                ).props(INPUT_PROPS).classes("w-36")
                self.range_label = ui.label("").classes("text-caption text-secondary")
            with ui.row().classes("items-center gap-2"):
                self.prev_btn = ui.button(
                    "Previous", icon="chevron_left",
                    on_click=lambda: controller.previous_page(),
                ).props("outline dense size=sm")
                self.page_label = ui.label("").classes("text-body2 text-secondary")
                self.next_btn = ui.button(
                    "Next", on_click=lambda: controller.next_page(),
                ).props("outline dense size=sm icon-right=chevron_right")
        self.update()

    def _on_size_change(self, value):
        if value is None:
            return
        self.controller.handle_items_per_page_change(value)

    def update(self):
        ctrl = self.controller
        page = ctrl.page_result
        self.range_label.text = f"Rows {page.start_index}-{page.end_index}" if page.items else ""
        self.page_label.text = f"Page {ctrl.current_page} of {ctrl.total_pages}"
        self.prev_btn.set_enabled(ctrl.has_previous)
        self.next_btn.set_enabled(ctrl.has_next)
        # Show the clamped size (e.g. 500 typed -> 100)
        if self.size_input.value is not None and self.size_input.value != ctrl.page_size:
            self.size_input.value = ctrl.page_size
