"""Absolute page link construction.

A page link is the base URI joined with the request route, carrying
pageNumber and pageSize as query parameters.
"""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from customer_api.core.errors import InvalidBaseUriError
from customer_api.core.pagination import PaginationFilter

_PAGE_NUMBER_PARAM = "pageNumber"
_PAGE_SIZE_PARAM = "pageSize"


def build_page_uri(base_uri: str, route: str, page_filter: PaginationFilter) -> str:
    """Build the absolute URL of one page.

    Existing pageNumber/pageSize parameters on the route are replaced so each
    appears exactly once; any other query parameters are kept.

    Args:
        base_uri: Scheme and host, e.g. "https://api.example.com".
        route: Request path, e.g. "/api/customer".
        page_filter: Target page.

    Returns:
        URL such as "https://api.example.com/api/customer?pageNumber=2&pageSize=5".

    Raises:
        InvalidBaseUriError: If base_uri is not absolute or route is not a path.
    """
    base = urlsplit(base_uri)
    if not base.scheme or not base.netloc:
        raise InvalidBaseUriError(f"Base URI must be absolute: {base_uri!r}")

    target = urlsplit(route)
    if target.scheme or target.netloc:
        raise InvalidBaseUriError(f"Route must be a path: {route!r}")

    path = base.path.rstrip("/") + "/" + target.path.lstrip("/")
    query = [
        (key, value)
        for key, value in parse_qsl(target.query, keep_blank_values=True)
        if key not in (_PAGE_NUMBER_PARAM, _PAGE_SIZE_PARAM)
    ]
    query.append((_PAGE_NUMBER_PARAM, str(page_filter.page_number)))
    query.append((_PAGE_SIZE_PARAM, str(page_filter.page_size)))

    return urlunsplit((base.scheme, base.netloc, path, urlencode(query), ""))


class PageUriBuilder:
    """Binds a base URI so callers only supply (filter, route)."""

    def __init__(self, base_uri: str) -> None:
        self.base_uri = base_uri

    def __call__(self, page_filter: PaginationFilter, route: str) -> str:
        return build_page_uri(self.base_uri, route, page_filter)
