"""Responsive card grid for the card view of a listing."""
from collections.abc import Callable
from typing import Any

from nicegui import ui

from src.ui.components.helpers import CARD_GRID_STYLE


def card_grid(records: list, render_card: Callable[[Any], None], empty_text: str = "No results found."):
    """Render one card per record using *render_card*."""
    if not records:
        with ui.card().classes("w-full p-8"):
            ui.label(empty_text).classes("text-body2 text-secondary w-full text-center")
        return

    with ui.element("div").classes("w-full grid gap-4").style(CARD_GRID_STYLE):
        for record in records:
            with ui.card().classes("w-full p-4 gap-2"):
                render_card(record)
