"""Shared dependencies for API endpoints.

The page link base is the configured BASE_URI, or the incoming request's
scheme and host when none is configured. Routes are taken from
request.url.path, which already carries any root_path prefix, so the
request-derived base stops at the host.
"""

from fastapi import Request

from customer_api.core.config import settings
from customer_api.core.uris import PageUriBuilder


def get_page_uri_builder(request: Request) -> PageUriBuilder:
    """Return a link builder bound to this request's base URI.

    Args:
        request: HTTP request (injected by FastAPI).

    Returns:
        PageUriBuilder for the configured or request-derived base URI.
    """
    base_uri = settings.base_uri or f"{request.url.scheme}://{request.url.netloc}"
    return PageUriBuilder(base_uri)
