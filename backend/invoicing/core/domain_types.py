"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceId and CustomerId are opaque strings — never parsed by the core
    - AmountInCents is always a non-negative int (minor units)
    - InvoiceStatus has exactly two members: paid, pending
    - AuthErrorType is closed-but-extensible: AuthError.type is a plain str

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and compare equal to raw form values
"""

from enum import Enum
from typing import Mapping, NewType


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", str)
CustomerId = NewType("CustomerId", str)


# ─── Value Types ─────────────────────────────────────────────────

AmountInCents = NewType("AmountInCents", int)
PathKey = NewType("PathKey", str)               # UI route, e.g. /dashboard/invoices

# Form transport: string-keyed accessor, .get() returns None for missing fields
FieldMap = Mapping[str, object]


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice payment state — maps to DB `status` column."""
    PAID = "paid"
    PENDING = "pending"


class MutationKind(str, Enum):
    """The three invoice mutations — used in messages and log records."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class AuthErrorType(str, Enum):
    """Known failure subtypes raised by the credential verifier."""
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    CALLBACK_ROUTE_ERROR = "CallbackRouteError"
    ACCESS_DENIED = "AccessDenied"
    CONFIGURATION = "Configuration"


# ─── Constants ───────────────────────────────────────────────────

CREDENTIALS_STRATEGY = "credentials"
