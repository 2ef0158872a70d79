"""Pydantic request/response schemas for API endpoints."""

from customer_api.schemas.customer import CustomerRead

__all__ = [
    "CustomerRead",
]
