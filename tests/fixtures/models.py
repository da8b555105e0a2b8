"""
Model classes used across the tests.

The declarative models cover every storage type the type mapping knows about
plus a binary column, so reflecting them from SQLite exercises the whole
normalization path.
"""

import datetime
import decimal

from sqlalchemy import (
    JSON,
    BigInteger,
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    Integer,
    LargeBinary,
    MetaData,
    Numeric,
    SmallInteger,
    String,
    Table,
    Text,
    Time,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    photo: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str | None] = mapped_column(String(50), nullable=True)
    color: Mapped[str | None] = mapped_column(String(7), nullable=True)


class Order(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    customer_name: Mapped[str] = mapped_column(String(120), nullable=False)
    quantity: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    reference: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    total: Mapped[decimal.Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_paid: Mapped[bool] = mapped_column(Boolean, nullable=False)
    shipped_on: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime.datetime | None] = mapped_column(
        DateTime, nullable=True
    )
    pickup_time: Mapped[datetime.time | None] = mapped_column(Time, nullable=True)
    extra_data: Mapped[dict | None] = mapped_column(JSON, nullable=True)


class UnmigratedBase(DeclarativeBase):
    pass


# Its metadata is never passed to migrate(), so "ghosts" never exists
class Ghost(UnmigratedBase):
    __tablename__ = "ghosts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)


class LegacyItem:
    """Class bound to a Table object; only __table__.name names the table."""

    __table__ = Table(
        "legacy_items",
        MetaData(),
        Column("id", Integer, primary_key=True),
        Column("title", String(40), nullable=False),
    )


class NotAModel:
    """Plain class without any table."""


not_a_class = "products"
