"""Search / page / page-size state shared by every listing screen.

A :class:`ViewStateController` is created once per mounted listing. It owns
the query, the requested page and the page size, and re-derives the filtered
records and the visible page after every change::

    controller = ViewStateController(sellers, seller_search_fields)
    controller.set_query("lima")
    controller.paginated_data   # rows to draw
    controller.total_pages      # for the pagination bar

Derivation is always ``paginate(filter_items(source, extractor, query), ...)``
and runs synchronously inside each setter, so readers never observe a page
that disagrees with the current query.
"""
import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MIN_PAGE_SIZE
from src.services.paginator import PageResult, paginate
from src.services.search_filter import Extractor, filter_items

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ViewState:
    query: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


def clamp_page_size(value: Any, fallback: int = DEFAULT_PAGE_SIZE) -> int:
    """Coerce a page-size input into ``[MIN_PAGE_SIZE, MAX_PAGE_SIZE]``.

    Accepts ints, floats and numeric strings (``"500"`` -> 100, ``"0"`` -> 1,
    ``"12.7"`` -> 12). Anything non-numeric returns *fallback*.
    """
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return fallback
        number = int(value)
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = int(float(text))
            except (ValueError, OverflowError):
                return fallback
    else:
        return fallback
    return min(max(number, MIN_PAGE_SIZE), MAX_PAGE_SIZE)


def derive_view(
    state: ViewState, source: Sequence[T], extractor: Extractor
) -> tuple[list[T], PageResult[T]]:
    """Filter *source* by the state's query, then slice the requested page."""
    filtered = filter_items(source, extractor, state.query)
    return filtered, paginate(filtered, state.page, state.page_size)


class ViewStateController(Generic[T]):
    """Owns one listing's view state and its derived page."""

    def __init__(
        self,
        source: Sequence[T],
        extractor: Extractor,
        page_size: Any = DEFAULT_PAGE_SIZE,
        query: str | None = "",
    ) -> None:
        self._source = source
        self._extractor = extractor
        self._state = ViewState(
            query=query or "",
            page=1,
            page_size=clamp_page_size(page_size, DEFAULT_PAGE_SIZE),
        )
        self._observers: list[Callable[["ViewStateController[T]"], None]] = []
        self._filtered: list[T] = []
        self._page: PageResult[T] = PageResult(page_size=self._state.page_size)
        self._recompute(notify=False)

    # ── Observers ────────────────────────────────────────────────────────

    def subscribe(self, callback: Callable[["ViewStateController[T]"], None]) -> None:
        """Call *callback* with this controller after every recomputation."""
        if callback not in self._observers:
            self._observers.append(callback)

    def unsubscribe(self, callback: Callable[["ViewStateController[T]"], None]) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    # ── Mutations ────────────────────────────────────────────────────────

    def set_query(self, query: str | None) -> None:
        """Replace the search query and go back to the first page."""
        self._state.query = query or ""
        self._state.page = 1
        self._recompute()

    def set_page(self, page: Any) -> None:
        """Request *page*; it is clamped to the available pages."""
        try:
            requested = int(page)
        except (TypeError, ValueError, OverflowError):
            logger.debug("Ignoring non-numeric page %r", page)
            requested = self._state.page
        self._state.page = requested
        self._recompute()

    def set_page_size(self, page_size: Any) -> None:
        """Clamp and apply a new page size, then go back to the first page."""
        self._state.page_size = clamp_page_size(page_size, self._state.page_size)
        self._state.page = 1
        self._recompute()

    def set_source(self, source: Sequence[T]) -> None:
        """Swap in a freshly loaded collection, keeping query and page size."""
        self._source = source
        self._recompute()

    def next_page(self) -> None:
        self.set_page(self._state.page + 1)

    def previous_page(self) -> None:
        self.set_page(self._state.page - 1)

    # Names used by the pagination bar
    handle_page_change = set_page
    handle_items_per_page_change = set_page_size

    # ── Derived values ───────────────────────────────────────────────────

    @property
    def state(self) -> ViewState:
        """A copy of the current view state."""
        return replace(self._state)

    @property
    def query(self) -> str:
        return self._state.query

    @property
    def current_page(self) -> int:
        return self._page.current_page

    @property
    def page_size(self) -> int:
        return self._state.page_size

    items_per_page = page_size

    @property
    def total_pages(self) -> int:
        return self._page.total_pages

    @property
    def total_count(self) -> int:
        """Number of records matching the query (before slicing)."""
        return self._page.total_count

    @property
    def source_count(self) -> int:
        return len(self._source)

    @property
    def filtered_data(self) -> list[T]:
        return self._filtered

    @property
    def paginated_data(self) -> list[T]:
        return self._page.items

    @property
    def page_result(self) -> PageResult[T]:
        return self._page

    @property
    def has_previous(self) -> bool:
        return self._page.current_page > 1

    @property
    def has_next(self) -> bool:
        return self._page.current_page < self._page.total_pages

    # ── Internals ────────────────────────────────────────────────────────

    def _recompute(self, notify: bool = True) -> None:
        self._filtered, self._page = derive_view(self._state, self._source, self._extractor)
        # Keep the stored page in range so later changes start from a valid page
        self._state.page = self._page.current_page
        if notify:
            for callback in list(self._observers):
                callback(self)
