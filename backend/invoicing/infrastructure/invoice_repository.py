"""Invoice Repository — SQLAlchemy implementation of InvoiceRepository.

Invariants:
    - Each write method issues exactly one statement and commits it
    - Any failure rolls back and surfaces as DatabaseError chained to the driver error
    - Write failures are logged once, by the handler that recovers them
    - Zero rows affected is returned, not raised: callers decide what "not found" means
    - Malformed identifiers fail like the database would (DatabaseError, not ValueError)
    - Amounts outside the 32-bit Integer column fail the same way, before any IO

Design Decisions:
    - Core insert/update/delete statements over ORM add/delete: one round-trip,
      rowcount available, no identity-map load before a delete
"""

import logging
import uuid
from datetime import date

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from invoicing.core.domain_types import (
    AmountInCents, CustomerId, InvoiceId, InvoiceStatus,
)
from invoicing.core.errors import DatabaseError
from invoicing.infrastructure.database import to_database_error
from invoicing.models.customer import Customer
from invoicing.models.invoice import Invoice

logger = logging.getLogger(__name__)


def _as_uuid(value: str, operation: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise DatabaseError("Invalid identifier syntax", operation)


_INT4_MAX = 2**31 - 1


def _as_int4(value: int, operation: str) -> int:
    if not -_INT4_MAX - 1 <= value <= _INT4_MAX:
        raise DatabaseError("Numeric value out of range", operation)
    return value


class SqlInvoiceRepository:
    """Invoice writes and the listing read, scoped to one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(
        self,
        customer_id: CustomerId,
        amount: AmountInCents,
        status: InvoiceStatus,
        issued_on: date,
    ) -> int:
        stmt = insert(Invoice).values(
            customer_id=_as_uuid(customer_id, "insert"),
            amount=_as_int4(amount, "insert"),
            status=InvoiceStatus(status).value,
            date=issued_on,
        )
        return await self._write(stmt, "insert")

    async def update(
        self,
        invoice_id: InvoiceId,
        customer_id: CustomerId,
        amount: AmountInCents,
        status: InvoiceStatus,
    ) -> int:
        stmt = (
            update(Invoice)
            .where(Invoice.id == _as_uuid(invoice_id, "update"))
            .values(
                customer_id=_as_uuid(customer_id, "update"),
                amount=_as_int4(amount, "update"),
                status=InvoiceStatus(status).value,
            )
        )
        return await self._write(stmt, "update")

    async def delete(self, invoice_id: InvoiceId) -> int:
        stmt = delete(Invoice).where(
            Invoice.id == _as_uuid(invoice_id, "delete"),
        )
        return await self._write(stmt, "delete")

    async def _write(self, stmt, operation: str) -> int:
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_database_error(e, operation) from e
        return result.rowcount

    async def list_page(self, limit: int, offset: int) -> list[dict]:
        """Latest invoices with their customer, newest first."""
        query = (
            select(Invoice, Customer)
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc())
            .limit(limit)
            .offset(offset)
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Invoice listing failed: {e}", extra={"operation": "list"})
            raise to_database_error(e, "list") from e
        return [
            {
                "id": str(invoice.id),
                "customer_id": str(customer.id),
                "name": customer.name,
                "email": customer.email,
                "image_url": customer.image_url,
                "amount": invoice.amount,
                "status": invoice.status,
                "date": invoice.date.isoformat(),
            }
            for invoice, customer in result.all()
        ]
