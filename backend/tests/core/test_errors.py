"""Error Hierarchy — envelopes and attributes of the invoicing errors.

Tests cover:
    - InvoiceValidationError lists one detail per field message
    - AuthError exposes its subtype as `type`
    - DatabaseError is a 503 that never puts the driver text in the envelope
    - RedirectRequired is not an InvoicingError
"""

from invoicing.core.errors import (
    AuthError,
    DatabaseError,
    ErrorContext,
    InvoicingError,
    InvoiceValidationError,
    RedirectRequired,
)


def test_validation_error_response_lists_field_details():
    exc = InvoiceValidationError({
        "amount": ["Please enter an amount greater than $0."],
        "status": ["Please select an invoice status"],
    })
    body = exc.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == "validation"
    assert body["details"] == [
        {"field": "amount", "message": "Please enter an amount greater than $0."},
        {"field": "status", "message": "Please select an invoice status"},
    ]


def test_auth_error_exposes_type():
    exc = AuthError("CredentialsSignin")
    assert exc.type == "CredentialsSignin"
    assert exc.http_status == 401
    assert isinstance(exc, InvoicingError)


def test_database_error_is_503_with_operation():
    exc = DatabaseError("Integrity constraint violated", "insert")
    assert exc.http_status == 503
    assert exc.operation == "insert"
    assert exc.to_response()["error"]["code"] == "DATABASE_ERROR"


def test_user_message_overrides_internal_message():
    exc = DatabaseError(
        "Integrity constraint violated", "insert",
        context=ErrorContext(user_message="Try again later"),
    )
    assert exc.to_response()["error"]["message"] == "Try again later"


def test_redirect_is_a_control_flow_signal():
    signal = RedirectRequired("/dashboard/invoices")
    assert signal.location == "/dashboard/invoices"
    assert not isinstance(signal, InvoicingError)
