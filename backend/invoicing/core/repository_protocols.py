"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Repository write methods return rows affected and raise DatabaseError on any failure

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Navigator is a bare callable: redirect() has no state worth an object
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, NoReturn, Protocol

from invoicing.core.domain_types import (
    AmountInCents, CustomerId, FieldMap, InvoiceId, InvoiceStatus, PathKey,
)


@dataclass(frozen=True)
class UserRecord:
    """What the credentials strategy needs to know about a user."""
    id: str
    name: str
    email: str
    password_hash: str


class InvoiceRepository(Protocol):
    """Contract for invoice persistence — one statement per call."""
    async def insert(
        self,
        customer_id: CustomerId,
        amount: AmountInCents,
        status: InvoiceStatus,
        issued_on: date,
    ) -> int: ...
    async def update(
        self,
        invoice_id: InvoiceId,
        customer_id: CustomerId,
        amount: AmountInCents,
        status: InvoiceStatus,
    ) -> int: ...
    async def delete(self, invoice_id: InvoiceId) -> int: ...


class UserRepository(Protocol):
    """Contract for user lookup — read-only."""
    async def get_by_email(self, email: str) -> UserRecord | None: ...


class ViewCache(Protocol):
    """Contract for the rendered-view cache. invalidate() is idempotent."""
    def invalidate(self, path_key: PathKey) -> None: ...


class CredentialVerifier(Protocol):
    """Contract for the sign-in collaborator. Raises AuthError on failure."""
    async def sign_in(self, strategy: str, credentials: FieldMap) -> None: ...


Navigator = Callable[[str], NoReturn]
