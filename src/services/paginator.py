"""Page slicing for filtered listings."""
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of a listing plus the metadata the pagination bar needs."""

    items: list[T] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 1
    total_count: int = 0
    page_size: int = 10

    @property
    def start_index(self) -> int:
        """1-based position of the first row on this page (0 when empty)."""
        if not self.items:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        """1-based position of the last row on this page (0 when empty)."""
        if not self.items:
            return 0
        return self.start_index + len(self.items) - 1


def compute_total_pages(total_count: int, page_size: int) -> int:
    """Number of pages for *total_count* rows; never less than one."""
    return max(1, math.ceil(total_count / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp *page* into ``[1, total_pages]``."""
    return min(max(page, 1), max(total_pages, 1))


def paginate(items: Sequence[T], page: int, page_size: int) -> PageResult[T]:
    """Slice *items* to the requested page.

    An out-of-range *page* is corrected to the nearest valid page and
    reported back as ``current_page``. An empty sequence yields one empty page.
    """
    total_count = len(items)
    total_pages = compute_total_pages(total_count, page_size)
    current_page = clamp_page(page, total_pages)
    start = (current_page - 1) * page_size
    end = min(start + page_size, total_count)
    return PageResult(
        items=list(items[start:end]),
        current_page=current_page,
        total_pages=total_pages,
        total_count=total_count,
        page_size=page_size,
    )
