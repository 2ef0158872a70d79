"""SQLAlchemy ORM models for the customer API.

All models are exported from this module for convenient imports:
    from customer_api.models import Base, Customer
"""

from customer_api.models.base import Base, TimestampMixin
from customer_api.models.customer import Customer

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Entities
    "Customer",
]
