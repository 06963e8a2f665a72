"""SQLAlchemy table mappings, one table per entity.

Rows are kept separate from the domain entities; repositories translate
between the two. Every non-key column is nullable or carries a server
default so that columns added in later versions can be bolted onto an
existing table (see ``schema.ensure_schema``).
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ProductRow(Base):
    __tablename__ = "products"
    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255))
    quantity: Mapped[int] = mapped_column(Integer, server_default="0")
    threshold: Mapped[int] = mapped_column(Integer, server_default="0")
    unit_price: Mapped[float] = mapped_column(Float, server_default="0")
    username: Mapped[str | None] = mapped_column(String(100), index=True)
    created_at: Mapped[datetime | None] = mapped_column(DateTime, server_default=func.now())


class SupplierRow(Base):
    __tablename__ = "suppliers"
    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255))
    email: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(50))
    address: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime | None] = mapped_column(DateTime, server_default=func.now())


class TransactionRow(Base):
    __tablename__ = "transactions"
    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    # No cascade: a product with recorded movements cannot be deleted.
    product_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("products.id", ondelete="RESTRICT"),
        index=True,
    )
    type: Mapped[str] = mapped_column(String(20))
    quantity: Mapped[int] = mapped_column(Integer)
    timestamp: Mapped[datetime | None] = mapped_column(DateTime, index=True)
