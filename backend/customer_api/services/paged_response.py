"""Paged response construction.

Turns a fetched page plus the total row count into a PagedResponse with
first/previous/next/last links.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from customer_api.core.pagination import PaginationFilter
from customer_api.core.responses import PagedResponse

T = TypeVar("T")

PageUriFactory = Callable[[PaginationFilter, str], str]


def total_pages_for(total_records: int, page_size: int) -> int:
    """Return ceil(total_records / page_size) using integer arithmetic."""
    return (total_records + page_size - 1) // page_size


def create_paged_response(
    items: Sequence[T],
    page_filter: PaginationFilter,
    total_records: int,
    uri_builder: PageUriFactory,
    route: str,
) -> PagedResponse[T]:
    """Build the envelope for one page of results.

    Items are passed through untouched. previousPage is set only when
    page_number > 1 and nextPage only when page_number < total pages.
    firstPage and lastPage are always set; with no records the last page
    link points at page 1.

    Args:
        items: Rows already fetched for this page, in display order.
        page_filter: Normalized filter the rows were fetched with.
        total_records: Row count across all pages (>= 0).
        uri_builder: Callable producing a link for (filter, route).
        route: Request path the links should point at.

    Returns:
        PagedResponse carrying the items, counts, and page links.
    """
    page_number = page_filter.page_number
    page_size = page_filter.page_size
    total_pages = total_pages_for(total_records, page_size)

    def link(target_page: int) -> str:
        return uri_builder(
            PaginationFilter(page_number=max(target_page, 1), page_size=page_size),
            route,
        )

    return PagedResponse(
        data=list(items),
        page_number=page_number,
        page_size=page_size,
        total_pages=total_pages,
        total_records=total_records,
        first_page=link(1),
        last_page=link(total_pages),
        next_page=link(page_number + 1) if page_number < total_pages else None,
        previous_page=link(page_number - 1) if page_number > 1 else None,
    )
