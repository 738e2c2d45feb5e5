"""Free-text search over in-memory listing records."""
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

# Returns the searchable strings of one record, in display order
Extractor = Callable[[T], Sequence[Any]]


def normalize_query(query: str | None) -> str:
    """Trim and case-fold a search query. ``None`` becomes ``""``."""
    return (query or "").strip().casefold()


def _field_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def matches(item: T, extractor: Extractor, needle: str) -> bool:
    """Return True if any extracted field contains *needle* (already normalized)."""
    return any(needle in _field_text(field).casefold() for field in extractor(item))


def filter_items(items: Sequence[T], extractor: Extractor, query: str | None) -> list[T]:
    """Return the records whose extracted fields contain *query*.

    Matching is a literal, case-insensitive substring test OR-ed across the
    fields produced by *extractor*. Source order is kept. A blank query
    returns every record without calling the extractor.
    """
    needle = normalize_query(query)
    if not needle:
        return list(items)
    return [item for item in items if matches(item, extractor, needle)]
