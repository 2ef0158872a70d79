"""Customer response schema."""

from datetime import date, datetime

from pydantic import ConfigDict

from customer_api.core.responses import CamelModel


class CustomerRead(CamelModel):
    """Customer as returned by the API.

    Built from the ORM row (from_attributes); serialized with camelCase keys
    (firstName, dateOfBirth, ...).
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    contact: str | None = None
    date_of_birth: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
