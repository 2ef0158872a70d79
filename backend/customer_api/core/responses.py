"""Response envelope models.

Single resources use Response[T] ({data, succeeded, errors, message});
collections use PagedResponse[T] with page links. Errors raised as APIError
are rendered as ErrorResponse ({"error": {...}}).

JSON keys are camelCase (pageNumber, totalRecords, ...); attributes stay
snake_case and either form is accepted on input.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Response(CamelModel, Generic[T]):
    """Standard envelope for single-entity results.

    When succeeded is true, errors is None. When succeeded is false, data
    is None.

    Usage:
        @router.get("/customer/{id}")
        async def get_customer(id: int) -> Response[CustomerRead | None]:
            customer = await CustomerRepository.get_by_id(db, id)
            return Response.success(customer)
    """

    data: T | None = None
    succeeded: bool = False
    errors: list[str] | None = None
    message: str = ""

    @model_validator(mode="after")
    def check_outcome(self) -> "Response[T]":
        """Reject envelopes mixing success and failure fields."""
        if self.succeeded and self.errors:
            msg = "A successful response cannot carry errors"
            raise ValueError(msg)
        if not self.succeeded and self.data is not None:
            msg = "A failed response cannot carry data"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, data: T | None) -> "Response[T]":
        """Wrap a payload (possibly None) as a successful response."""
        return cls(data=data, succeeded=True, errors=None, message="")

    @classmethod
    def failure(cls, message: str, errors: list[str] | None = None) -> "Response[T]":
        """Build a failed response with no payload."""
        return cls(data=None, succeeded=False, errors=errors or [message], message=message)


class PagedResponse(CamelModel, Generic[T]):
    """Envelope for one page of a collection.

    Attributes:
        data: Items on this page, in the order the caller fetched them.
        page_number: Current page number (1-indexed).
        page_size: Requested items per page.
        total_pages: ceil(total_records / page_size); 0 for an empty table.
        total_records: Row count across all pages.
        first_page: Link to page 1.
        last_page: Link to the final page.
        next_page: Link to the following page, None on the last page.
        previous_page: Link to the preceding page, None on page 1.
    """

    data: list[T]
    page_number: int
    page_size: int
    total_pages: int
    total_records: int
    first_page: str
    last_page: str
    next_page: str | None = None
    previous_page: str | None = None


class ErrorDetail(BaseModel):
    """Error detail for response body.

    Attributes:
        code: Machine-readable error code (e.g., "NOT_FOUND").
        message: Human-readable error message.
        details: Optional list of field-level errors (for validation).
    """

    code: str
    message: str
    details: list[dict] | None = None


class ErrorResponse(BaseModel):
    """Standard error response envelope.

    Usage in exception handlers:
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=ErrorDetail(code=exc.code, message=exc.message)
            ).model_dump(),
        )
    """

    error: ErrorDetail
