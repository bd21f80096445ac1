"""Invoice Form Schema — per-field rules composed into a record-level validator.

Invariants:
    - Every field accepts raw form values (str or None) and reports its own message
    - All failing fields are reported together, in field order (customerId, amount, status)
    - field_errors are keyed by form field name, not by Python attribute name
    - id and date are never read from the form

Design Decisions:
    - Each rule is a plain function raw -> typed value, attached with BeforeValidator:
      the rules stay testable on their own and pydantic only does the composition
    - PydanticCustomError over ValueError: message surfaces verbatim (no "Value error, " prefix)
    - Fields default to None with validate_default: a missing key hits the same rule
      as an empty one instead of pydantic's generic "Field required"
    - Amount parsed as Decimal: minor-unit conversion stays exact for 2-decimal input
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Annotated

from pydantic import (
    BaseModel, BeforeValidator, ConfigDict, Field, ValidationError,
)
from pydantic_core import PydanticCustomError

from invoicing.core.domain_types import FieldMap, InvoiceStatus
from invoicing.core.errors import InvoiceValidationError
from invoicing.core.format_messages import (
    AMOUNT_MESSAGE, CUSTOMER_MESSAGE, STATUS_MESSAGE,
)

INVOICE_FORM_FIELDS = ("customerId", "amount", "status")


# ─── Field rules ─────────────────────────────────────────────────

def check_customer_id(raw: object) -> str:
    """customerId: any non-empty string."""
    if not isinstance(raw, str) or not raw:
        raise PydanticCustomError("customer_id_type", CUSTOMER_MESSAGE)
    return raw


def coerce_amount(raw: object) -> Decimal:
    """amount: numeric-looking string, finite, strictly greater than 0.

    Missing or blank input coerces to 0 and fails the positivity check;
    anything unparseable fails coercion under its own error type. Digit
    separators ("1_000") are Python-only number syntax and count as unparseable.
    """
    text = "" if raw is None else str(raw).strip()
    if not text:
        value = Decimal(0)
    else:
        if "_" in text:
            raise PydanticCustomError("amount_parsing", AMOUNT_MESSAGE)
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise PydanticCustomError("amount_parsing", AMOUNT_MESSAGE)
        if not value.is_finite():
            raise PydanticCustomError("amount_parsing", AMOUNT_MESSAGE)
    if value <= 0:
        raise PydanticCustomError("amount_not_positive", AMOUNT_MESSAGE)
    return value


def check_status(raw: object) -> InvoiceStatus:
    """status: exactly "paid" or "pending"."""
    if isinstance(raw, str):
        try:
            return InvoiceStatus(raw)
        except ValueError:
            pass
    raise PydanticCustomError("status_enum", STATUS_MESSAGE)


# ─── Record ──────────────────────────────────────────────────────

class InvoiceForm(BaseModel):
    """Validated invoice fields shared by create and update."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    customer_id: Annotated[str, BeforeValidator(check_customer_id)] = Field(
        None, alias="customerId", validate_default=True,
    )
    amount: Annotated[Decimal, BeforeValidator(coerce_amount)] = Field(
        None, validate_default=True,
    )
    status: Annotated[InvoiceStatus, BeforeValidator(check_status)] = Field(
        None, validate_default=True,
    )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_invoice_form: data on success, field_errors otherwise."""
    success: bool
    data: InvoiceForm | None = None
    field_errors: dict[str, list[str]] = field(default_factory=dict)


def read_invoice_form(form: FieldMap) -> dict[str, object]:
    """Pick the invoice fields out of a form accessor (missing -> None)."""
    return {name: form.get(name) for name in INVOICE_FORM_FIELDS}


def flatten_field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by form field name, keeping their order."""
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        name = str(err["loc"][0]) if err["loc"] else "__root__"
        errors.setdefault(name, []).append(err["msg"])
    return errors


def validate_invoice_form(form: FieldMap) -> ValidationResult:
    """Non-throwing validation — failure is an ordinary result."""
    try:
        data = InvoiceForm.model_validate(read_invoice_form(form))
    except ValidationError as e:
        return ValidationResult(success=False, field_errors=flatten_field_errors(e))
    return ValidationResult(success=True, data=data)


def parse_invoice_form(form: FieldMap) -> InvoiceForm:
    """Throwing validation — raises InvoiceValidationError with the field errors."""
    try:
        return InvoiceForm.model_validate(read_invoice_form(form))
    except ValidationError as e:
        raise InvoiceValidationError(flatten_field_errors(e)) from e
