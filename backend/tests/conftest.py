import socket
from collections.abc import AsyncGenerator
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from customer_api.core.config import settings
from customer_api.models import Base, Customer

# Use separate test database
TEST_DATABASE_URL = settings.database_url.replace(
    settings.database_name, f"{settings.database_name}_test"
)

# Seeded customer count: 25 rows gives 3 pages at the default size of 10
SEEDED_CUSTOMER_COUNT = 25


def _is_postgres_available() -> bool:
    """Check if PostgreSQL is accepting connections.

    Returns:
        True if PostgreSQL is reachable on the configured port, False otherwise.
    """
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.settimeout(1)
        result = sock.connect_ex((settings.database_host, settings.database_port))
        sock.close()
        return result == 0
    except OSError:
        return False


# Check once at module load time
_POSTGRES_AVAILABLE = _is_postgres_available()


def skip_if_no_postgres() -> None:
    """Skip test if PostgreSQL is not available.

    Called by fixtures that require database connection.
    """
    if not _POSTGRES_AVAILABLE:
        pytest.skip(
            f"PostgreSQL not available on port {settings.database_port}. "
            "Start database with: docker compose up -d"
        )


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create test database engine with fresh tables.

    Skips test if PostgreSQL is not available (e.g., Docker not running).
    """
    skip_if_no_postgres()

    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded_customers(db_session: AsyncSession) -> list[Customer]:
    """Insert customers with ids 1..25.

    Inserted in reverse id order so tests can tell primary-key ordering
    apart from insertion order.

    Args:
        db_session: Database session from db_session fixture.

    Returns:
        Customer rows sorted by id.
    """
    customers = [
        Customer(
            id=customer_id,
            first_name=f"First{customer_id}",
            last_name=f"Last{customer_id}",
            email=f"customer{customer_id}@example.com",
            contact=f"555-{customer_id:04d}",
            date_of_birth=date(1990, 1, 1),
        )
        for customer_id in range(SEEDED_CUSTOMER_COUNT, 0, -1)
    ]
    db_session.add_all(customers)
    await db_session.commit()
    return sorted(customers, key=lambda c: c.id)


@pytest_asyncio.fixture
async def client(
    db_engine,
    seeded_customers,  # noqa: ARG001 - ensures rows exist
) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client backed by the test database.

    Sets up:
    - Test database connection via dependency override
    - httpx.AsyncClient with ASGI transport

    Args:
        db_engine: Test database engine from db_engine fixture.
        seeded_customers: Ensures the customers table is populated.

    Yields:
        Configured AsyncClient for making API requests.
    """
    from customer_api.core.database import get_db
    from customer_api.main import app

    test_session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
