"""Generic read-only table for listing pages."""
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from nicegui import ui

# Quasar slot rendering a cell as a coloured badge; color comes from "<key>__color"
_BADGE_SLOT = """
<q-td :props="props">
    <q-badge :color="props.row['{key}__color']" :label="props.value" />
</q-td>
"""


@dataclass(frozen=True)
class Column:
    """One table column.

    ``render`` turns a record into the cell text. When ``badge`` is set the
    cell is drawn as a badge whose colour is ``badge(record)``.
    """

    key: str
    header: str
    render: Callable[[Any], Any]
    badge: Callable[[Any], str] | None = None
    align: str = "left"


def build_rows(records: list, columns: list[Column]) -> list[dict]:
    """Convert records into the row dicts ``ui.table`` expects."""
    rows = []
    for index, record in enumerate(records):
        row: dict[str, Any] = {"_row": index}
        for col in columns:
            row[col.key] = col.render(record)
            if col.badge is not None:
                row[f"{col.key}__color"] = col.badge(record)
        rows.append(row)
    return rows


def data_table(records: list, columns: list[Column], empty_text: str = "No results found."):
    """Render *records* with *columns*. Pagination is handled by the caller."""
    if not records:
        with ui.card().classes("w-full p-8"):
            ui.label(empty_text).classes("text-body2 text-secondary w-full text-center")
        return None

    table = ui.table(
        columns=[
            {"name": col.key, "label": col.header, "field": col.key, "align": col.align}
            for col in columns
        ],
        rows=build_rows(records, columns),
        row_key="_row",
        pagination=0,
    ).classes("w-full").props("flat bordered hide-bottom")

    for col in columns:
        if col.badge is not None:
            table.add_slot(f"body-cell-{col.key}", _BADGE_SLOT.replace("{key}", col.key))
    return table
