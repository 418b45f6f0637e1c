"""
Pagination Aggregator
Drives a paged listing endpoint until exhaustion and returns every item
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, TypeVar

from registrar.utils.logger import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One fetched page.

    Attributes:
        items: Items in the order the registrar returned them
        next_cursor: Cursor for the following page, None when the
            registrar signals there is nothing more
    """
    items: List[T] = field(default_factory=list)
    next_cursor: Optional[Any] = None


def collect_all(fetch_page: Callable[[Any], Page[T]], start: Any) -> List[T]:
    """
    Fetch pages sequentially, starting at `start`, and concatenate them.

    Stops when a page is empty (whatever its cursor says) or when
    `next_cursor` is None. Any exception raised by `fetch_page` propagates
    and the items gathered so far are discarded.

    Args:
        fetch_page: Callable returning the Page for a cursor
        start: Initial cursor (e.g. offset 0 or page 1)

    Returns:
        Complete list of items
    """
    collected: List[T] = []
    cursor = start
    fetched = 0

    while True:
        page = fetch_page(cursor)
        fetched += 1

        if not page.items:
            break

        collected.extend(page.items)

        if page.next_cursor is None:
            break
        cursor = page.next_cursor

    logger.debug(f"Collected {len(collected)} items from {fetched} page(s)")
    return collected


def next_page_number(
    page: int,
    items: List[Any],
    page_size: int,
    next_page: Optional[int] = None
) -> Optional[int]:
    """
    Page-number cursor. When the registrar reports `next_page` it is
    trusted; otherwise a short page ends the listing.
    """
    if next_page is not None:
        return next_page if next_page > page else None
    if len(items) < page_size:
        return None
    return page + 1
