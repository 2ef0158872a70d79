"""API error classes.

Each APIError carries a machine-readable code and an HTTP status. The
exception handlers in main.py turn them into the standard error envelope.
"""


class APIError(Exception):
    """Base class for API errors.

    Attributes:
        code: Machine-readable error code (e.g., "NOT_FOUND").
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional list of additional error details.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: list[dict] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class NotFoundError(APIError):
    """Resource not found (404).

    Only raised for customers when strict_not_found is enabled; the default
    contract answers a missing id with a successful null payload.
    """

    def __init__(self, resource: str, resource_id: str | None = None) -> None:
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(
            code="NOT_FOUND",
            message=message,
            status_code=404,
        )


class InternalError(APIError):
    """Unexpected server error (500).

    Never expose stack traces to clients.
    """

    def __init__(self, message: str = "An unexpected error occurred") -> None:
        super().__init__(
            code="INTERNAL_ERROR",
            message=message,
            status_code=500,
        )


class InvalidBaseUriError(ValueError):
    """Page link could not be built from the base URI and route.

    Not an APIError: it is a per-request server fault and falls through to
    the catch-all 500 handler.
    """
