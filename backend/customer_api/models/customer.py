"""Customer model.

The customers table is managed outside this service; the API only reads it.
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from customer_api.models.base import Base, TimestampMixin


class Customer(Base, TimestampMixin):
    """A customer record.

    Attributes:
        id: Integer primary key. Also the stable pagination order.
        first_name: Given name.
        last_name: Family name.
        email: Contact email address.
        contact: Phone number or other contact string.
        date_of_birth: Date of birth, if known.
    """

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    first_name: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )
    last_name: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )
    email: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    contact: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
    )
    date_of_birth: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
    )
