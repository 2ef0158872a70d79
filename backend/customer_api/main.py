"""FastAPI application entry point.

This module creates and configures the FastAPI application, including:
- Logging and request logging middleware
- Exception handlers for API errors
- API router mounting at /api
- Health check endpoint
"""

import time

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response as StarletteResponse

from customer_api.api.router import router as api_router
from customer_api.core.config import settings
from customer_api.core.errors import APIError, InternalError
from customer_api.core.log_config import configure_logging
from customer_api.core.responses import ErrorDetail, ErrorResponse

logger = structlog.get_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request at debug level, and handler exceptions at error level."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> StarletteResponse:
        """Time the request and log its outcome."""
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        logger.debug("Incoming request", method=method, path=path, query=str(request.query_params))

        try:
            response = await call_next(request)
        except Exception:
            logger.error("Exception in request handler", method=method, path=path, exc_info=True)
            raise

        logger.debug(
            "Request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_s=round(time.perf_counter() - start_time, 3),
        )
        return response


def _error_response(exc: APIError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
            )
        ).model_dump(),
    )


def api_error_handler(_request: Request, exc: APIError) -> JSONResponse:
    """Handle custom API errors.

    Args:
        request: The incoming request.
        exc: The APIError that was raised.

    Returns:
        JSONResponse with error envelope and appropriate status code.
    """
    return _error_response(exc)


def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors from FastAPI.

    Pagination parameters never reach this handler; they are normalized.
    A non-integer customer id does.

    Args:
        request: The incoming request.
        exc: The RequestValidationError from Pydantic.

    Returns:
        JSONResponse with VALIDATION_ERROR code and field-level details.
    """
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error=ErrorDetail(
                code="VALIDATION_ERROR",
                message="Request validation failed",
                details=[
                    {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
                    for e in exc.errors()
                ],
            )
        ).model_dump(),
    )


def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions.

    Store failures and unbuildable page links end up here. Returns 500
    INTERNAL_ERROR without exposing details; the exception is logged.

    Args:
        request: The incoming request.
        exc: The unhandled exception.

    Returns:
        JSONResponse with generic error message (500).
    """
    logger.exception("Unhandled exception", exc_info=exc, path=str(request.url.path))
    return _error_response(InternalError())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Customer Pagination API",
        version="1.0.0",
        description="Paged read access to customer records",
    )

    # Starlette runs the last added middleware first; CORS goes last.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Authorization", "X-Request-ID"],
    )

    # Specific handlers first, then catch-all
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    def health_check() -> dict:
        """Health check endpoint for monitoring.

        Returns:
            {"status": "healthy"} if service is running.
        """
        return {"status": "healthy"}

    return app


# Used by uvicorn: uvicorn customer_api.main:app
app = create_app()
