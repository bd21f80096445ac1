"""Invoice Actions — create, update and delete handlers behind the invoice forms.

Invariants:
    - validate -> coerce -> persist (one statement) -> report, in that order
    - create: invalid form returns State(errors, message); update: invalid form RAISES
      InvoiceValidationError. Kept asymmetric on purpose, the edit form relies on the
      framework error page while the create form renders field errors inline
    - Persistence failure returns State(message) with no errors key
    - create/update success: invalidate listing, then navigator (never returns)
    - delete success: invalidate listing, return State("Deleted Invoice!"), no redirect
    - Zero rows affected on update/delete is still success (no not-found distinction)
    - date is stamped here (UTC today) on create and never touched on update

Design Decisions:
    - Collaborators injected through the constructor (repository, cache, navigator, clock)
      so every branch is testable with fakes
    - Only DatabaseError is recovered; anything else propagates to the global handler
"""

import logging
from datetime import date, datetime, timezone
from typing import Callable

from invoicing.core.domain_types import (
    CustomerId, FieldMap, InvoiceId, MutationKind, PathKey,
)
from invoicing.core.errors import DatabaseError
from invoicing.core.format_messages import (
    database_failed_state, deleted_state, validation_failed_state,
)
from invoicing.core.money import to_minor_units
from invoicing.core.repository_protocols import (
    InvoiceRepository, Navigator, ViewCache,
)
from invoicing.infrastructure.navigation import redirect
from invoicing.schemas.form_state import FormState
from invoicing.schemas.invoice_form import parse_invoice_form, validate_invoice_form

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class InvoiceActions:
    """Mutation handlers for the invoice forms."""

    def __init__(
        self,
        repository: InvoiceRepository,
        cache: ViewCache,
        invoices_path: PathKey,
        navigator: Navigator = redirect,
        today: Callable[[], date] = utc_today,
    ):
        self.repository = repository
        self.cache = cache
        self.invoices_path = invoices_path
        self.navigator = navigator
        self.today = today

    async def create_invoice(
        self, prev_state: FormState | None, form: FieldMap,
    ) -> FormState:
        """Validate, insert, then redirect to the listing. Returns State only on failure."""
        validated = validate_invoice_form(form)
        if not validated.success:
            logger.debug(
                f"Create rejected: {sorted(validated.field_errors)}",
                extra={"operation": MutationKind.CREATE.value},
            )
            return FormState(**validation_failed_state(
                MutationKind.CREATE, validated.field_errors,
            ))

        data = validated.data
        try:
            await self.repository.insert(
                CustomerId(data.customer_id),
                to_minor_units(data.amount),
                data.status,
                self.today(),
            )
        except DatabaseError as e:
            self._log_failure(MutationKind.CREATE, e)
            return FormState(**database_failed_state(MutationKind.CREATE))

        self._finish(MutationKind.CREATE)
        self.navigator(self.invoices_path)

    async def update_invoice(
        self, invoice_id: InvoiceId, form: FieldMap,
    ) -> FormState:
        """Validate (raising), update, then redirect. Returns State only on DB failure."""
        data = parse_invoice_form(form)
        try:
            affected = await self.repository.update(
                invoice_id,
                CustomerId(data.customer_id),
                to_minor_units(data.amount),
                data.status,
            )
        except DatabaseError as e:
            self._log_failure(MutationKind.UPDATE, e, invoice_id)
            return FormState(**database_failed_state(MutationKind.UPDATE))

        self._warn_if_untouched(MutationKind.UPDATE, affected, invoice_id)
        self._finish(MutationKind.UPDATE, invoice_id)
        self.navigator(self.invoices_path)

    async def delete_invoice(self, invoice_id: InvoiceId) -> FormState:
        """Delete and refresh the listing in place."""
        try:
            affected = await self.repository.delete(invoice_id)
        except DatabaseError as e:
            self._log_failure(MutationKind.DELETE, e, invoice_id)
            return FormState(**database_failed_state(MutationKind.DELETE))

        self._warn_if_untouched(MutationKind.DELETE, affected, invoice_id)
        self._finish(MutationKind.DELETE, invoice_id)
        return FormState(**deleted_state())

    # ─── helpers ────────────────────────────────────────────────

    def _finish(self, kind: MutationKind, invoice_id: str | None = None) -> None:
        self.cache.invalidate(self.invoices_path)
        logger.info(
            f"Invoice {kind.value} committed",
            extra={"operation": kind.value, "invoice_id": invoice_id},
        )

    @staticmethod
    def _log_failure(
        kind: MutationKind, error: DatabaseError, invoice_id: str | None = None,
    ) -> None:
        logger.error(
            f"Invoice {kind.value} failed: {error.message}",
            exc_info=error,
            extra={
                "operation": kind.value,
                "invoice_id": invoice_id,
                "error_code": error.code,
            },
        )

    @staticmethod
    def _warn_if_untouched(kind: MutationKind, affected: int, invoice_id: str) -> None:
        # TODO: surface "not found" once the edit and delete forms can render it
        if affected == 0:
            logger.warning(
                f"Invoice {kind.value} matched no rows",
                extra={"operation": kind.value, "invoice_id": invoice_id},
            )
