"""Invoice ORM — one row per invoice.

Invariants:
    - id is UUID primary key (server-generated, immutable)
    - amount is integer minor units (cents), never a float
    - status is "paid" or "pending"
    - date is set once at creation and never updated

Design Decisions:
    - String status column over a DB enum: the allowed values are enforced by
      the form schema, migrations stay trivial
    - date column named `date` to match the existing dashboard queries
"""

import uuid
import datetime

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from invoicing.db.base import Base


class Invoice(Base):
    """Invoice — amount in cents, issued to one customer."""
    __tablename__ = "invoices"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("customers.id"), nullable=False,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    customer: Mapped["Customer"] = relationship(
        "Customer", back_populates="invoices",
    )
