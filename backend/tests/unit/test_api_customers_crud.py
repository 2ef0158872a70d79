"""End-to-end tests for the customer endpoints against PostgreSQL.

Skipped when PostgreSQL is not available. 25 customers are seeded.
"""

from httpx import AsyncClient

_LIST_URL = "/api/customer"


class TestListCustomersEndToEnd:
    """GET /api/customer with a real database."""

    async def test_default_page(self, client: AsyncClient):
        """No parameters: first 10 customers, 3 pages in total."""
        response = await client.get(_LIST_URL)

        assert response.status_code == 200
        body = response.json()
        assert [c["id"] for c in body["data"]] == list(range(1, 11))
        assert body["pageNumber"] == 1
        assert body["pageSize"] == 10
        assert body["totalRecords"] == 25
        assert body["totalPages"] == 3
        assert body["previousPage"] is None
        assert body["nextPage"] == "http://test/api/customer?pageNumber=2&pageSize=10"

    async def test_middle_page(self, client: AsyncClient):
        """Page 2 links back to 1 and forward to 3."""
        response = await client.get(_LIST_URL, params={"pageNumber": 2, "pageSize": 10})

        body = response.json()
        assert [c["id"] for c in body["data"]] == list(range(11, 21))
        assert body["previousPage"] == "http://test/api/customer?pageNumber=1&pageSize=10"
        assert body["nextPage"] == "http://test/api/customer?pageNumber=3&pageSize=10"
        assert body["lastPage"] == "http://test/api/customer?pageNumber=3&pageSize=10"

    async def test_custom_page_size(self, client: AsyncClient):
        """pageSize=5 gives 5 pages."""
        response = await client.get(_LIST_URL, params={"pageNumber": 5, "pageSize": 5})

        body = response.json()
        assert [c["id"] for c in body["data"]] == [21, 22, 23, 24, 25]
        assert body["totalPages"] == 5
        assert body["nextPage"] is None

    async def test_customer_fields_are_camel_case(self, client: AsyncClient):
        """Customer rows serialize with camelCase keys."""
        response = await client.get(_LIST_URL, params={"pageSize": 1})

        customer = response.json()["data"][0]
        assert customer["firstName"] == "First1"
        assert customer["lastName"] == "Last1"
        assert customer["dateOfBirth"] == "1990-01-01"


class TestGetCustomerEndToEnd:
    """GET /api/customer/{id} with a real database."""

    async def test_existing_customer(self, client: AsyncClient):
        """Found customers are returned in the success envelope."""
        response = await client.get("/api/customer/3")

        assert response.status_code == 200
        body = response.json()
        assert body["succeeded"] is True
        assert body["data"]["id"] == 3
        assert body["data"]["email"] == "customer3@example.com"

    async def test_missing_customer_returns_null_data(self, client: AsyncClient):
        """Missing id: 200 with null data and succeeded true."""
        response = await client.get("/api/customer/99999")

        assert response.status_code == 200
        body = response.json()
        assert body["data"] is None
        assert body["succeeded"] is True
        assert body["errors"] is None
