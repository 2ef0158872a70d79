"""Pagination filter and normalization.

pageNumber defaults to 1, pageSize defaults to 10. Bad input is never
rejected: absent, non-numeric, or non-positive values fall back to the
defaults, and so do values above MAX_QUERY_VALUE. Page size is otherwise
unbounded unless a maximum is configured.
"""

from dataclasses import dataclass

from fastapi import Query

from customer_api.core.config import settings

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10

# Largest accepted page number or size. Keeps (page - 1) * size inside a
# signed 64-bit OFFSET.
MAX_QUERY_VALUE = 2**31 - 1


@dataclass(frozen=True)
class PaginationFilter:
    """Normalized pagination request.

    Attributes:
        page_number: Current page number (1-indexed).
        page_size: Number of items per page.
    """

    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        """Calculate SQL OFFSET for database queries.

        Returns:
            Number of rows to skip (0 for page 1).
        """
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Calculate SQL LIMIT for database queries.

        Returns:
            Maximum number of rows to return (same as page_size).
        """
        return self.page_size


def _coerce_positive(value: int | str | None) -> int | None:
    """Parse a raw query value; None unless it is in 1..MAX_QUERY_VALUE."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if 1 <= number <= MAX_QUERY_VALUE else None


def normalize_filter(
    page_number: int | str | None = None,
    page_size: int | str | None = None,
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int | None = None,
) -> PaginationFilter:
    """Build a PaginationFilter, silently correcting bad input.

    Args:
        page_number: Raw page number (may be absent, zero, negative, or text).
        page_size: Raw page size (may be absent, zero, negative, or text).
        default_page_size: Size used when page_size is unusable.
        max_page_size: Optional upper bound for page_size. None = unbounded.

    Returns:
        PaginationFilter with page_number >= 1 and page_size >= 1.
    """
    number = _coerce_positive(page_number) or DEFAULT_PAGE_NUMBER
    size = _coerce_positive(page_size) or default_page_size
    if max_page_size is not None:
        size = min(size, max_page_size)
    return PaginationFilter(page_number=number, page_size=size)


def pagination_filter(
    page_number: str | None = Query(
        default=None,
        alias="pageNumber",
        description="Page number (1-indexed, default 1)",
    ),
    page_size: str | None = Query(
        default=None,
        alias="pageSize",
        description="Items per page (default 10)",
    ),
) -> PaginationFilter:
    """FastAPI dependency for pagination query parameters.

    Parameters are read as strings so that malformed values are normalized
    rather than failing request validation.

    Usage:
        @router.get("/items")
        async def list_items(
            page_filter: PaginationFilter = Depends(pagination_filter)
        ):
            items = await repo.list_page(db, page_filter)
            ...
    """
    return normalize_filter(
        page_number,
        page_size,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
