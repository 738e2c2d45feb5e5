"""Services package."""
from src.services.search_filter import filter_items, normalize_query
from src.services.paginator import PageResult, paginate
from src.services.view_state import ViewState, ViewStateController, clamp_page_size, derive_view
from src.services.utils import to_datetime, to_float, to_int

__all__ = [
    "filter_items",
    "normalize_query",
    "PageResult",
    "paginate",
    "ViewState",
    "ViewStateController",
    "clamp_page_size",
    "derive_view",
    "to_datetime",
    "to_float",
    "to_int",
]
