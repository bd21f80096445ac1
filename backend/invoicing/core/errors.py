"""Error Hierarchy — typed, categorized exceptions for all invoicing failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation and auth errors (400-level) are user-correctable; database errors are not
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages
    - RedirectRequired is a control-flow signal, NOT an InvoicingError

Design Decisions:
    - Single hierarchy with InvoicingError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Navigation as an exception: code after redirect() never runs, and the
      handler's return type stays "State or nothing"
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    invoice_id: str | None = None
    operation: str | None = None
    user_message: str | None = None


class InvoicingError(Exception):
    """Base exception for all invoicing errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "invoice_id": self.context.invoice_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvoiceValidationError(InvoicingError):
    """Invoice form failed schema validation (raised by the throwing parse)."""
    def __init__(
        self,
        field_errors: dict[str, list[str]],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Invalid invoice fields: {', '.join(field_errors)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field_errors = field_errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [
            {"field": name, "message": message}
            for name, messages in self.field_errors.items()
            for message in messages
        ]
        return response


class AuthError(InvoicingError):
    """Credential verifier failure; `type` discriminates the subtype."""
    def __init__(self, error_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"Authentication failed ({error_type})",
            "AUTH_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.type = error_type


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(InvoicingError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


# ─── Control Flow ───────────────────────────────────────────────

class RedirectRequired(Exception):
    """Raised by redirect(): the request is over, send the client to `location`."""

    def __init__(self, location: str):
        super().__init__(location)
        self.location = location
