"""Customer API router.

GET /api/customer        paged list with first/previous/next/last links
GET /api/customer/{id}   single customer in the Response envelope
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.api.deps import get_page_uri_builder
from customer_api.core.config import settings
from customer_api.core.database import get_db
from customer_api.core.errors import NotFoundError
from customer_api.core.pagination import PaginationFilter, pagination_filter
from customer_api.core.responses import PagedResponse, Response
from customer_api.core.uris import PageUriBuilder
from customer_api.repositories.customer_repository import CustomerRepository
from customer_api.schemas.customer import CustomerRead
from customer_api.services.paged_response import create_paged_response

logger = structlog.get_logger()

router = APIRouter()

# customers.id is a 32-bit INTEGER column
_ID_MIN = -(2**31)
_ID_MAX = 2**31 - 1


@router.get("")
async def list_customers(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    page_filter: Annotated[PaginationFilter, Depends(pagination_filter)],
    uri_builder: Annotated[PageUriBuilder, Depends(get_page_uri_builder)],
) -> PagedResponse[CustomerRead]:
    """List customers one page at a time.

    Missing or malformed pageNumber/pageSize fall back to 1 and 10. The
    page and the total count are read by separate queries.
    """
    customers = await CustomerRepository.list_page(db, page_filter)
    total_records = await CustomerRepository.count(db)

    return create_paged_response(
        [CustomerRead.model_validate(customer) for customer in customers],
        page_filter,
        total_records,
        uri_builder,
        request.url.path,
    )


@router.get("/{customer_id}")
async def get_customer(
    customer_id: Annotated[int, Path(ge=_ID_MIN, le=_ID_MAX)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response[CustomerRead]:
    """Get a customer by ID.

    A missing customer is answered with succeeded=true and data=null, unless
    STRICT_NOT_FOUND is enabled, in which case it is a 404.
    An id outside the INTEGER column range is a 400 VALIDATION_ERROR.

    Raises:
        NotFoundError: If the customer does not exist and strict mode is on.
    """
    customer = await CustomerRepository.get_by_id(db, customer_id)
    if customer is None:
        logger.debug("Customer not found", customer_id=customer_id)
        if settings.strict_not_found:
            raise NotFoundError("Customer", str(customer_id))
        return Response[CustomerRead].success(None)

    return Response[CustomerRead].success(CustomerRead.model_validate(customer))
