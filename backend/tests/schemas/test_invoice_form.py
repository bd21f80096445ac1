"""Invoice Form Schema — per-field rules and record-level validation.

Tests cover:
    - Valid input coerces to typed fields (str, Decimal, InvoiceStatus)
    - amount: <= 0, blank, missing, non-numeric, NaN and infinities all fail on `amount`
    - amount: parse failures and non-positive values carry distinct error types
    - status accepts exactly paid/pending
    - customerId must be a non-empty string
    - All failing fields reported together, in form order
    - parse_invoice_form raises InvoiceValidationError carrying the same field errors
    - id/date in the form are ignored
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError
from pydantic_core import PydanticCustomError

from invoicing.core.domain_types import InvoiceStatus
from invoicing.core.errors import InvoiceValidationError
from invoicing.core.format_messages import (
    AMOUNT_MESSAGE, CUSTOMER_MESSAGE, STATUS_MESSAGE,
)
from invoicing.schemas.invoice_form import (
    InvoiceForm,
    check_customer_id,
    check_status,
    coerce_amount,
    parse_invoice_form,
    read_invoice_form,
    validate_invoice_form,
)


def _form(**overrides) -> dict:
    form = {"customerId": "abc", "amount": "125.50", "status": "paid"}
    form.update(overrides)
    return form


# ─── success ─────────────────────────────────────────────────────

def test_valid_form_coerces_fields():
    result = validate_invoice_form(_form())
    assert result.success
    assert result.field_errors == {}
    assert result.data.customer_id == "abc"
    assert result.data.amount == Decimal("125.50")
    assert result.data.status is InvoiceStatus.PAID


@pytest.mark.parametrize("raw, expected", [
    ("1", Decimal("1")),
    (" 42 ", Decimal("42")),
    ("0.01", Decimal("0.01")),
    ("1e2", Decimal("100")),
])
def test_numeric_looking_amounts_coerce(raw, expected):
    result = validate_invoice_form(_form(amount=raw))
    assert result.success
    assert result.data.amount == expected


@pytest.mark.parametrize("status", ["paid", "pending"])
def test_status_accepts_paid_and_pending(status):
    result = validate_invoice_form(_form(status=status))
    assert result.success
    assert result.data.status.value == status


# ─── amount ──────────────────────────────────────────────────────

@pytest.mark.parametrize("raw", ["0", "-5", "0.00", "", "   ", None])
def test_non_positive_amount_fails(raw):
    result = validate_invoice_form(_form(amount=raw))
    assert not result.success
    assert result.field_errors == {"amount": [AMOUNT_MESSAGE]}


@pytest.mark.parametrize("raw", [
    "abc", "12abc", "NaN", "Infinity", "-inf", "$5", "1_000", "1_0.5",
])
def test_non_numeric_amount_fails(raw):
    result = validate_invoice_form(_form(amount=raw))
    assert not result.success
    assert result.field_errors == {"amount": [AMOUNT_MESSAGE]}


def test_parse_failure_and_non_positive_have_distinct_types():
    with pytest.raises(ValidationError) as not_numeric:
        InvoiceForm.model_validate(_form(amount="abc"))
    with pytest.raises(ValidationError) as not_positive:
        InvoiceForm.model_validate(_form(amount="0"))
    assert not_numeric.value.errors()[0]["type"] == "amount_parsing"
    assert not_positive.value.errors()[0]["type"] == "amount_not_positive"


def test_coerce_amount_rule_is_usable_alone():
    assert coerce_amount("3.50") == Decimal("3.50")
    with pytest.raises(PydanticCustomError):
        coerce_amount("0")


# ─── status ──────────────────────────────────────────────────────

@pytest.mark.parametrize("raw", ["PAID", "overdue", "", " paid", None])
def test_other_status_values_fail(raw):
    result = validate_invoice_form(_form(status=raw))
    assert not result.success
    assert result.field_errors == {"status": [STATUS_MESSAGE]}


def test_check_status_rule_rejects_non_strings():
    with pytest.raises(PydanticCustomError):
        check_status(["paid"])


# ─── customerId ──────────────────────────────────────────────────

@pytest.mark.parametrize("raw", [None, ""])
def test_missing_customer_fails(raw):
    result = validate_invoice_form(_form(customerId=raw))
    assert not result.success
    assert result.field_errors == {"customerId": [CUSTOMER_MESSAGE]}


def test_check_customer_id_rule_returns_value():
    assert check_customer_id("cust-1") == "cust-1"


# ─── record level ────────────────────────────────────────────────

def test_all_failing_fields_reported_together_in_form_order():
    result = validate_invoice_form({})
    assert not result.success
    assert list(result.field_errors) == ["customerId", "amount", "status"]
    assert result.field_errors == {
        "customerId": [CUSTOMER_MESSAGE],
        "amount": [AMOUNT_MESSAGE],
        "status": [STATUS_MESSAGE],
    }


def test_parse_invoice_form_raises_with_field_errors():
    with pytest.raises(InvoiceValidationError) as exc:
        parse_invoice_form(_form(amount="0", status="late"))
    assert exc.value.field_errors == {
        "amount": [AMOUNT_MESSAGE],
        "status": [STATUS_MESSAGE],
    }
    assert exc.value.http_status == 400


def test_parse_invoice_form_returns_data_on_success():
    data = parse_invoice_form(_form(amount="10"))
    assert data.amount == Decimal("10")


def test_client_supplied_id_and_date_are_ignored():
    picked = read_invoice_form(_form(id="evil", date="1999-01-01"))
    assert set(picked) == {"customerId", "amount", "status"}
