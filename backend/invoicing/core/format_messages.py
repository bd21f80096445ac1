"""User-Facing Messages — every string a handler can put in front of the user.

Invariants:
    - All functions are pure (no IO, no async, no DB)
    - Validation failures carry errors + message; persistence failures carry message only
    - Persistence messages always contain the literal "Database Error"
    - Auth failures map to exactly two display strings

Design Decisions:
    - Builders return plain dicts (not State): core stays free of schema imports,
      services wrap them with FormState(**...)
"""

from invoicing.core.domain_types import AuthErrorType, MutationKind


# ─── Field rule messages ─────────────────────────────────────────

CUSTOMER_MESSAGE = "Please select a customer"
AMOUNT_MESSAGE = "Please enter an amount greater than $0."
STATUS_MESSAGE = "Please select an invoice status"


# ─── Handler outcomes ────────────────────────────────────────────

DELETED_MESSAGE = "Deleted Invoice!"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_AUTH_MESSAGE = "Something went wrong."

_VERBS = {
    MutationKind.CREATE: "Create",
    MutationKind.UPDATE: "Update",
    MutationKind.DELETE: "Delete",
}


def validation_failed_state(
    kind: MutationKind, field_errors: dict[str, list[str]],
) -> dict:
    """State for a form that failed validation — errors plus a banner."""
    return {
        "errors": field_errors,
        "message": f"Missing Fields. Failed to {_VERBS[kind]} Invoice.",
    }


def database_failed_state(kind: MutationKind) -> dict:
    """State for a persistence failure — message only, no errors key."""
    return {"message": f"Database Error: Failed to {_VERBS[kind]} Invoice."}


def deleted_state() -> dict:
    return {"message": DELETED_MESSAGE}


def describe_auth_error(error_type: str) -> str:
    """Map a known verifier failure subtype to its display string."""
    if error_type == AuthErrorType.CREDENTIALS_SIGNIN:
        return INVALID_CREDENTIALS_MESSAGE
    return GENERIC_AUTH_MESSAGE
