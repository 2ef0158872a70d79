"""Repository for Customer read operations.

Pages are taken in primary-key order so that offset pagination is stable.
count() is a separate query from list_page(); under concurrent writes the
total may not match the page that was read.
"""

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.core.pagination import PaginationFilter
from customer_api.models.customer import Customer

logger = structlog.get_logger()


class CustomerRepository:
    """Stateless repository for Customer table operations.

    All methods are static — no instance state. Pass an AsyncSession
    for every call so the caller controls transaction boundaries.
    """

    @staticmethod
    async def list_page(
        db: AsyncSession, page_filter: PaginationFilter
    ) -> list[Customer]:
        """Fetch one page of customers ordered by id.

        Args:
            db: Async database session.
            page_filter: Normalized page number and size.

        Returns:
            Up to page_size customers, skipping (page_number - 1) * page_size.
        """
        logger.debug(
            "Fetching customer page",
            page_number=page_filter.page_number,
            page_size=page_filter.page_size,
        )
        stmt = (
            select(Customer)
            .order_by(Customer.id.asc())
            .offset(page_filter.offset)
            .limit(page_filter.limit)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def count(db: AsyncSession) -> int:
        """Count all customers.

        Args:
            db: Async database session.

        Returns:
            Total number of rows in the customers table.
        """
        result = await db.execute(select(func.count()).select_from(Customer))
        return result.scalar_one()

    @staticmethod
    async def get_by_id(db: AsyncSession, customer_id: int) -> Customer | None:
        """Fetch a customer by primary key.

        Args:
            db: Async database session.
            customer_id: Integer primary key.

        Returns:
            Customer if found, None otherwise.
        """
        return await db.get(Customer, customer_id)
